# Extract metadata from GIFs.
#
# If all you want to know is whether a GIF is animated, or how long each frame is,
# decoding it is painfully slow, since that decompresses every frame.  This only walks
# the block structure and skips over image data without looking at it.

import logging
from enum import Enum

from .info import Info, Frame, frame_defaults
from .misc import TruncatedError, NotAnimatedError
from .reader import ByteReader

log = logging.getLogger(__name__)

# Files shorter than this are rejected without looking at them.
MIN_LENGTH = 10

# "GIF8", read as two big-endian words.  The version after it isn't checked.
SIGNATURE = (0x4749, 0x4638)

# Block introducers:
EXTENSION = 0x21
IMAGE_DESCRIPTOR = 0x2C
TRAILER = 0x3B

# Extension labels:
GRAPHICS_CONTROL = 0xF9
APPLICATION = 0xFF

# Fixed block lengths.  These don't include color tables or sub-block chains.
SCREEN_DESCRIPTOR_SIZE = 13
GRAPHICS_CONTROL_SIZE = 8
IMAGE_DESCRIPTOR_SIZE = 11

class ScanEnd(Enum):
    # The signature or length check failed.  Nothing was scanned.
    INVALID = 'invalid'

    # We reached the trailer block.
    TRAILER = 'trailer'

    # We ran out of data without seeing a trailer.  This isn't an error.
    END_OF_DATA = 'end-of-data'

    # A read went past the end of the data.  The file is cut off or corrupt.
    TRUNCATED = 'truncated'

    # We only wanted to know if the file is animated, and it is.
    ANIMATED = 'animated'

class PackedField:
    """
    The flags byte of a screen descriptor, image descriptor or graphics control block.

    GIF numbers these bits from the high bit down, so bit 0 is 0x80.
    """
    def __init__(self, value):
        self.value = value

    @property
    def has_color_table(self):
        return bool(self.value & 0b10000000)

    # This is only meaningful for image descriptors.
    @property
    def interlace(self):
        return bool(self.value & 0b01000000)

    @property
    def color_table_exponent(self):
        return self.value & 0b00000111

    # This is only meaningful for graphics control blocks.
    @property
    def disposal(self):
        return (self.value & 0b00011100) >> 2

def palette_size(packed):
    """
    Return the size in bytes of the color table described by packed.
    """
    return 3 * 2 ** (1 + packed.color_table_exponent)

def sub_block_size(reader, pos):
    """
    Return the number of bytes in the sub-block chain at pos, including the terminator.

    Raises TruncatedError if the chain runs off the end of the data.
    """
    total = 0
    while True:
        size = reader.u8(pos + total)
        total += 1
        if size == 0:
            return total

        total += size

class GifScanner:
    """
    Scan a GIF in a single pass and fill in an Info.

    If quick_pass is true, stop as soon as we know the file is animated.  The result will
    only be complete up to that point.
    """
    def __init__(self, data, quick_pass=False):
        self.reader = ByteReader(data)
        self.quick_pass = quick_pass
        self.info = Info()
        self.pos = 0

        # The frame we're collecting fields for.  This is a dict of Frame fields, and is
        # turned into a Frame when its image descriptor is read.
        self.pending = None

        # Why the scan stopped, once it has.
        self.end = None

    def scan(self):
        if self.end is None:
            self.end = self._scan()
            log.debug('Scan ended (%s) at %i with %i frames', self.end.value, self.pos, len(self.info.images))

        return self.info

    def _scan(self):
        if not self.read_header():
            return ScanEnd.INVALID

        try:
            self.read_screen_descriptor()

            while True:
                end = self.read_block()
                if end is not None:
                    return end

                # The trailer is missing.  Stop at the end of the file.
                if self.pos >= len(self.reader):
                    return ScanEnd.END_OF_DATA

        except TruncatedError as e:
            log.debug('GIF is truncated: %s', e)
            self.info.valid = False
            return ScanEnd.TRUNCATED

    def read_header(self):
        if len(self.reader) < MIN_LENGTH:
            log.debug('Data too short for a GIF (%i bytes)', len(self.reader))
            return False

        signature = self.reader.u16(0, little_endian=False), self.reader.u16(2, little_endian=False)
        if signature != SIGNATURE:
            log.debug('Not a GIF signature: %04x %04x', *signature)
            return False

        self.info.valid = True
        return True

    def read_screen_descriptor(self):
        # Note that this reads height before width.
        self.info.height = self.reader.u16(6)
        self.info.width = self.reader.u16(8)

        packed = PackedField(self.reader.u8(10))
        if packed.has_color_table:
            size = palette_size(packed)
            self.info.global_palette = True
            self.info.global_palette_size = size // 3
            self.pos += size

        self.pos += SCREEN_DESCRIPTOR_SIZE

    def read_block(self):
        """
        Read the block at the cursor and move past it.

        Return a ScanEnd if scanning should stop, otherwise None.
        """
        block = self.reader.u8(self.pos)
        if block == EXTENSION:
            self.read_extension()
        elif block == IMAGE_DESCRIPTOR:
            return self.read_image_descriptor()
        elif block == TRAILER:
            return ScanEnd.TRAILER
        else:
            # Skip unknown bytes one at a time until we find something we recognize.
            log.debug('Skipping unknown block 0x%02x at %i', block, self.pos)
            self.pos += 1

        return None

    def read_extension(self):
        label = self.reader.u8(self.pos + 1)
        if label == GRAPHICS_CONTROL:
            self.read_graphics_control()
            return

        if label == APPLICATION:
            # This assumes a NETSCAPE2.0 looping block and reads its loop count without
            # checking the application identifier.  Other application blocks will give a
            # garbage loop count.
            self.info.loop_count = self.reader.u8(self.pos + 16)

        # Comments, plain text and anything else are skipped.
        self.pos += 2
        self.pos += sub_block_size(self.reader, self.pos)

    def read_graphics_control(self):
        size = self.reader.u8(self.pos + 2)
        if size != 4:
            # Step past the introducer and let read_block resync.
            log.debug('Ignoring graphics control block with size %i at %i', size, self.pos)
            self.pos += 1
            return

        # The delay is in hundredths of a second.
        delay = self.reader.u16(self.pos + 4) * 10
        self.info.durations.add(delay)

        packed = PackedField(self.reader.u8(self.pos + 3))

        frame = self.pending_frame()
        frame['delay'] = delay
        frame['disposal'] = packed.disposal

        self.pos += GRAPHICS_CONTROL_SIZE

    def read_image_descriptor(self):
        reader, pos = self.reader, self.pos

        frame = self.pending_frame()
        frame['left'] = reader.u16(pos + 1)
        frame['top'] = reader.u16(pos + 3)
        frame['width'] = reader.u16(pos + 5)
        frame['height'] = reader.u16(pos + 7)

        packed = PackedField(reader.u8(pos + 9))
        if packed.has_color_table:
            size = palette_size(packed)
            frame['local_palette'] = True
            frame['local_palette_size'] = size // 3
            self.pos += size

        if packed.interlace:
            frame['interlace'] = True

        self.info.add_frame(Frame(**frame))
        self.pending = None

        # Stop before skipping over the image data.  We don't care if it's intact.
        if self.quick_pass and self.info.animated:
            return ScanEnd.ANIMATED

        self.pos += IMAGE_DESCRIPTOR_SIZE
        self.pos += sub_block_size(self.reader, self.pos)
        return None

    def pending_frame(self):
        if self.pending is None:
            self.pending = frame_defaults()
        return self.pending

def get_info(data):
    """
    Scan a GIF and return an Info.

    data can be bytes or any other buffer.  This never raises for bad data: files that
    aren't GIFs or are cut off return an Info with valid set to false.
    """
    return GifScanner(data).scan()

def is_animated(data):
    """
    Return true if data is a GIF with more than one frame.

    This stops as soon as it sees the second frame, so it's faster than get_info for
    large animations.
    """
    return GifScanner(data, quick_pass=True).scan().animated

def get_frame_durations(data):
    """
    Return a list of each frame duration in the given GIF.  Durations are
    in milliseconds.

    If the file isn't an animated GIF, raise NotAnimatedError.
    """
    info = get_info(data)
    if not info.animated:
        raise NotAnimatedError()

    return [frame.delay for frame in info.images]
