import struct

import pytest

from lantern.constant import Constant, ConstantKind, decode_import, parse_constant
from lantern.reader import ByteReader, DecodeError


def _parse(data):
    reader = ByteReader(data)
    constant = parse_constant(reader)
    assert reader.remaining() == b""
    return constant


def test_nil():
    assert _parse(b"\x00") == Constant(ConstantKind.NIL, None)


def test_boolean():
    assert _parse(b"\x01\x01").value is True
    assert _parse(b"\x01\x00").value is False


def test_number():
    constant = _parse(b"\x02" + struct.pack("<d", 2.5))
    assert constant.kind is ConstantKind.NUMBER
    assert constant.value == 2.5


def test_string_index():
    assert _parse(b"\x03\x05") == Constant(ConstantKind.STRING, 5)


def test_import():
    encoded = (2 << 30) | (7 << 20) | (9 << 10)
    assert _parse(b"\x04" + struct.pack("<I", encoded)) == Constant(ConstantKind.IMPORT, encoded)


def test_table_keys():
    assert _parse(b"\x05\x02\x01\x02") == Constant(ConstantKind.TABLE, (1, 2))


def test_closure():
    assert _parse(b"\x06\x03") == Constant(ConstantKind.CLOSURE, 3)


def test_vector():
    constant = _parse(b"\x07" + struct.pack("<4f", 1.0, 2.0, 3.0, 4.0))
    assert constant.value == (1.0, 2.0, 3.0, 4.0)


def test_unknown_tag_raises():
    with pytest.raises(DecodeError, match="unknown constant tag: 8"):
        parse_constant(ByteReader(b"\x08"))


def test_truncated_number_raises():
    with pytest.raises(DecodeError):
        parse_constant(ByteReader(b"\x02\x00\x00"))


def test_decode_import_fields():
    encoded = (3 << 30) | (7 << 20) | (9 << 10) | 11
    assert decode_import(encoded) == (3, 7, 9, 11)


def test_decode_import_masks_ids():
    assert decode_import(0x3FF << 10) == (0, 0, 0x3FF, 0)


def test_str_forms():
    assert str(Constant(ConstantKind.NIL)) == "Nil"
    assert str(Constant(ConstantKind.BOOLEAN, True)) == "Boolean(true)"
    assert str(Constant(ConstantKind.STRING, 4)) == "String(4)"