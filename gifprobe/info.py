from collections import namedtuple

from .durations import DurationTotals

_FrameFields = namedtuple('Frame', (
    'local_palette',
    'local_palette_size',
    'interlace',
    'left',
    'top',
    'width',
    'height',
    'delay',
    'disposal',
))

# A single frame.  These are only created once the image descriptor for the frame has
# been read, and never change after that.
class Frame(_FrameFields):
    __slots__ = ()

    def to_dict(self):
        return {
            'localPalette': self.local_palette,
            'localPaletteSize': self.local_palette_size,
            'interlace': self.interlace,
            'left': self.left,
            'top': self.top,
            'width': self.width,
            'height': self.height,
            'delay': self.delay,
            'disposal': self.disposal,
        }

def frame_defaults():
    """
    Return the fields of a frame that hasn't had anything read into it yet.
    """
    return {
        'local_palette': False,
        'local_palette_size': 0,
        'interlace': False,
        'left': 0,
        'top': 0,
        'width': 0,
        'height': 0,
        'delay': 0,
        'disposal': 0,
    }

class Info:
    """
    Everything we know about a GIF after scanning it.

    If valid is false, the header was rejected or the file was cut off partway through.
    In the second case, whatever was read before the problem is still filled in.
    """
    def __init__(self):
        self.valid = False
        self.global_palette = False
        self.global_palette_size = 0
        self.loop_count = 0
        self.width = 0
        self.height = 0
        self.animated = False
        self.images = []
        self.durations = DurationTotals()

    def __repr__(self):
        return '<Info valid=%s %ix%i frames=%i animated=%s duration=%i>' % (
            self.valid, self.width, self.height, len(self.images), self.animated, self.duration)

    @property
    def frame_count(self):
        return len(self.images)

    @property
    def is_browser_duration(self):
        return self.durations.is_browser_duration

    # All durations are in milliseconds.  duration is the sum of the delays in the file,
    # and the others are what each browser would actually play.
    @property
    def duration(self):
        return self.durations.duration

    @property
    def duration_ie(self):
        return self.durations.renderer_durations['ie']

    @property
    def duration_safari(self):
        return self.durations.renderer_durations['safari']

    @property
    def duration_chrome(self):
        return self.durations.renderer_durations['chrome']

    @property
    def duration_firefox(self):
        return self.durations.renderer_durations['firefox']

    @property
    def duration_opera(self):
        return self.durations.renderer_durations['opera']

    def add_frame(self, frame):
        self.images.append(frame)

        if len(self.images) > 1:
            self.animated = True

    def to_dict(self):
        """
        Return the info as a JSON-compatible dictionary.
        """
        return {
            'valid': self.valid,
            'globalPalette': self.global_palette,
            'globalPaletteSize': self.global_palette_size,
            'loopCount': self.loop_count,
            'height': self.height,
            'width': self.width,
            'animated': self.animated,
            'images': [frame.to_dict() for frame in self.images],
            'isBrowserDuration': self.is_browser_duration,
            'duration': self.duration,
            'durationIE': self.duration_ie,
            'durationSafari': self.duration_safari,
            'durationFirefox': self.duration_firefox,
            'durationChrome': self.duration_chrome,
            'durationOpera': self.duration_opera,
        }
