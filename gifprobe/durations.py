# Browsers don't play very short GIF frame delays as written.  Frames below some
# minimum are played at a default delay instead, and the minimum differs between
# engines.  This keeps a total for each engine alongside the raw total.
#
# http://nullsleep.tumblr.com/post/16524517190/animated-gif-minimum-frame-delay-browser-compatibility
# These numbers are old and modern browsers may differ.

# The delay a renderer uses in place of one that's too short, in milliseconds.
DEFAULT_DELAY = 100

# Delays below this mark the file as relying on browser delay substitution.
BROWSER_DURATION_THRESHOLD = 60

# Renderer name -> minimum delay in milliseconds.  Delays below this are played at
# DEFAULT_DELAY.
renderer_thresholds = {
    'ie': 60,
    'safari': 60,
    'chrome': 20,
    'firefox': 20,
    'opera': 20,
}

def browser_delay(delay, renderer):
    """
    Return the delay the given renderer actually uses for a frame.

    Raises KeyError for an unknown renderer.
    """
    if delay < renderer_thresholds[renderer]:
        return DEFAULT_DELAY
    return delay

class DurationTotals:
    def __init__(self):
        self.duration = 0
        self.is_browser_duration = False
        self.renderer_durations = { renderer: 0 for renderer in renderer_thresholds }

    def add(self, delay):
        if delay < BROWSER_DURATION_THRESHOLD:
            self.is_browser_duration = True

        self.duration += delay
        for renderer in self.renderer_durations:
            self.renderer_durations[renderer] += browser_delay(delay, renderer)
