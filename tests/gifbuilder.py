# Build GIF files block by block, for tests that need exact control over the layout.
#
# None of these produce valid image data.  The scanner never decompresses it, so a
# short placeholder chain is enough.

import struct

TRAILER = b'\x3b'

# A minimum code size byte followed by one data sub-block and the terminator.
PLACEHOLDER_IMAGE_DATA = b'\x02' + b'\x02\x44\x01' + b'\x00'

def sub_blocks(data):
    result = b''
    for pos in range(0, len(data), 255):
        chunk = data[pos:pos+255]
        result += bytes([len(chunk)]) + chunk
    return result + b'\x00'

def color_table(exponent):
    # Fill the table with something recognizable that isn't a block introducer.
    return b'\x11' * (3 * 2 ** (exponent + 1))

def header(screen_width=1, screen_height=1, global_exponent=None, version=b'89a'):
    packed = 0b01110000
    if global_exponent is not None:
        packed |= 0b10000000 | global_exponent

    data = b'GIF' + version + struct.pack('<HHBBB', screen_width, screen_height, packed, 0, 0)
    if global_exponent is not None:
        data += color_table(global_exponent)
    return data

def graphics_control(delay, disposal=0, size=4, flags=0):
    """
    delay is in hundredths of a second.  flags is ORed into the packed byte, to test
    that bits other than the disposal method are ignored.
    """
    packed = (disposal << 2) | flags
    return b'\x21\xf9' + bytes([size, packed]) + struct.pack('<H', delay) + b'\x00' + b'\x00'

def application(identifier, data):
    assert len(identifier) == 11
    return b'\x21\xff\x0b' + identifier + sub_blocks(data)

def netscape_loop(loops):
    return application(b'NETSCAPE2.0', b'\x01' + struct.pack('<H', loops))

def comment(text):
    return b'\x21\xfe' + sub_blocks(text)

def image(left=0, top=0, width=1, height=1, local_exponent=None, interlace=False, data=PLACEHOLDER_IMAGE_DATA):
    packed = 0
    if local_exponent is not None:
        packed |= 0b10000000 | local_exponent
    if interlace:
        packed |= 0b01000000

    result = b'\x2c' + struct.pack('<HHHHB', left, top, width, height, packed)
    if local_exponent is not None:
        result += color_table(local_exponent)
    return result + data

def frame(delay, **kwargs):
    return graphics_control(delay) + image(**kwargs)

def gif(*blocks, trailer=True, **kwargs):
    """
    Return a GIF with the given blocks after the header.  kwargs go to header().
    """
    data = header(**kwargs) + b''.join(blocks)
    if trailer:
        data += TRAILER
    return data
