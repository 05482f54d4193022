import struct

import pytest

from lantern.reader import ByteReader, DecodeError


def test_read_u8_sequence_and_remaining():
    reader = ByteReader(b"\x01\x02\x03")
    assert reader.read_u8() == 1
    assert reader.read_u8() == 2
    assert reader.remaining() == b"\x03"


def test_read_u8_past_end_raises():
    with pytest.raises(DecodeError):
        ByteReader(b"").read_u8()


def test_read_u32_little_endian():
    reader = ByteReader(struct.pack("<I", 0xDEADBEEF))
    assert reader.read_u32() == 0xDEADBEEF
    assert reader.remaining() == b""


def test_read_floats_round_trip():
    reader = ByteReader(struct.pack("<f", 1.5) + struct.pack("<d", -3.25))
    assert reader.read_f32() == 1.5
    assert reader.read_f64() == -3.25


def test_read_varint_single_byte():
    assert ByteReader(b"\x05").read_varint() == 5
    assert ByteReader(b"\x7f").read_varint() == 127


def test_read_varint_multi_byte():
    assert ByteReader(b"\x80\x01").read_varint() == 128
    assert ByteReader(b"\xe5\x8e\x26").read_varint() == 624485


def test_read_varint_leaves_following_bytes():
    reader = ByteReader(b"\x80\x01\xaa")
    reader.read_varint()
    assert reader.remaining() == b"\xaa"


def test_truncated_varint_raises():
    with pytest.raises(DecodeError):
        ByteReader(b"\x80").read_varint()


def test_read_bytes_too_many_raises():
    with pytest.raises(DecodeError):
        ByteReader(b"ab").read_bytes(3)


def test_read_string():
    reader = ByteReader(b"\x03abcz")
    assert reader.read_string() == b"abc"
    assert reader.remaining() == b"z"


def test_read_list_of_u8():
    reader = ByteReader(b"\x02\x07\x09")
    assert reader.read_list(ByteReader.read_u8) == [7, 9]
    assert reader.remaining() == b""


def test_read_list_of_strings():
    reader = ByteReader(b"\x02\x02hi\x00")
    assert reader.read_list(ByteReader.read_string) == [b"hi", b""]


def test_read_fixed_list():
    reader = ByteReader(b"\x04\x05\x06\x07")
    assert reader.read_fixed_list(ByteReader.read_u8, 3) == [4, 5, 6]
    assert reader.position == 3


def test_read_list_truncated_raises():
    with pytest.raises(DecodeError):
        ByteReader(b"\x03\x01").read_list(ByteReader.read_u8)