from .gif import get_info, is_animated, get_frame_durations, GifScanner, ScanEnd
from .info import Info, Frame
from .misc import Error, TruncatedError, NotAnimatedError
