import pytest

from gifprobe.reader import ByteReader
from gifprobe.misc import Error, TruncatedError

def test_reads():
    reader = ByteReader(b'\x47\x49\x46\x38\xff')
    assert len(reader) == 5
    assert reader.u8(0) == 0x47
    assert reader.u8(4) == 0xff
    assert reader.u16(0) == 0x4947
    assert reader.u16(0, little_endian=False) == 0x4749
    assert reader.u16(3, little_endian=False) == 0x38ff

@pytest.mark.parametrize('data', [
    bytearray(b'\x01\x02\x03'),
    memoryview(b'\x01\x02\x03'),
    memoryview(b'\x00\x01\x02\x03')[1:],
])
def test_buffer_types(data):
    reader = ByteReader(data)
    assert reader.u8(0) == 1
    assert reader.u16(1) == 0x0302

def test_not_a_buffer():
    with pytest.raises(TypeError):
        ByteReader('GIF89a')

@pytest.mark.parametrize('offset', [3, 100, -1])
def test_u8_out_of_range(offset):
    reader = ByteReader(b'abc')
    with pytest.raises(TruncatedError):
        reader.u8(offset)

def test_u16_straddling_end():
    reader = ByteReader(b'abc')
    assert reader.u16(1) == 0x6362
    with pytest.raises(TruncatedError) as e:
        reader.u16(2)

    assert e.value.offset == 2

def test_truncated_error_types():
    with pytest.raises(EOFError):
        ByteReader(b'').u8(0)

    try:
        ByteReader(b'').u16(0)
    except Error as e:
        data = e.data()
        assert data['success'] is False
        assert data['code'] == 'truncated'
        assert '0' in data['reason']
    else:
        pytest.fail('Expected TruncatedError')
