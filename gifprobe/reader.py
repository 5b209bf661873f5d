# Random-access reads from an in-memory buffer.
#
# GIF parsing mostly looks at fixed offsets from a block start, so this reads at an
# offset instead of streaming like a file.  Reads never wrap or come back short: anything
# outside the buffer raises TruncatedError.

import struct

from .misc import TruncatedError

_u16_le = struct.Struct('<H')
_u16_be = struct.Struct('>H')

class ByteReader:
    """
    Bounds-checked unsigned reads from a bytes-like object.

    The buffer is only ever read, so one reader can be shared between threads.
    """
    def __init__(self, data):
        # memoryview raises TypeError for anything that isn't a buffer.
        self.data = memoryview(data).cast('B')

    def __len__(self):
        return len(self.data)

    def _check(self, offset, size):
        if offset < 0 or offset + size > len(self.data):
            raise TruncatedError(offset, size, len(self.data))

    def u8(self, offset):
        self._check(offset, 1)
        return self.data[offset]

    def u16(self, offset, little_endian=True):
        self._check(offset, 2)
        fmt = _u16_le if little_endian else _u16_be
        value, = fmt.unpack_from(self.data, offset)
        return value
