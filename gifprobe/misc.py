# Helpers that don't have dependancies on our other modules.
import logging, sys

class Error(Exception):
    def __init__(self, code, reason):
        super().__init__(reason)
        self.code = code
        self.reason = reason

    def data(self):
        return {
            'success': False,
            'code': self.code,
            'reason': self.reason,
        }

class TruncatedError(Error, EOFError):
    """
    A read went past the end of the buffer.

    This is what the scanner catches to decide that a file is cut off.  It's also an
    EOFError, so callers using the reader directly can treat it like any other short read.
    """
    def __init__(self, offset, size, length):
        super().__init__('truncated', 'Read of %i bytes at %i is past the end of a %i byte buffer' % (size, offset, length))
        self.offset = offset

class NotAnimatedError(Error, ValueError):
    def __init__(self, reason='Not an animated GIF'):
        super().__init__('not-animated', reason)

def config_logging(level=logging.INFO):
    """
    Set up logging for scripts and debugging sessions.

    The library itself never adds handlers.  This is for applications that don't have
    their own logging setup and want to see what the scanner is doing.
    """
    old_factory = logging.getLogRecordFactory()

    def record_factory(*args, **kwargs):
        record = old_factory(*args, **kwargs)

        # Add logTime, which is relativeCreated in seconds instead of milliseconds.
        record.logTime = record.relativeCreated / 1000.0
        return record

    logging.setLogRecordFactory(record_factory)

    # basicConfig breaks if sys.stderr is None, which it is in windowed applications, so
    # we just set up logging ourself.
    if logging.root.level > level:
        logging.root.setLevel(level)
    logging.captureWarnings(True)

    if sys.stderr is not None:
        add_root_logging_handler(logging.StreamHandler())

    logging.getLogger('gifprobe').setLevel(level)

def add_root_logging_handler(handler):
    """
    Add a logging handler to the root logger with our formatter.
    """
    formatter = logging.Formatter('%(logTime)8.3f %(levelname)8s:%(name)-30s: %(message)s')
    handler.setFormatter(formatter)
    logging.root.addHandler(handler)
    return handler
