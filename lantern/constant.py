"""Entries of a function's constant table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from lantern.reader import ByteReader, DecodeError


class ConstantKind(IntEnum):
    """Constant tags as stored in bytecode."""

    NIL = 0
    BOOLEAN = 1
    NUMBER = 2
    STRING = 3
    IMPORT = 4
    TABLE = 5
    CLOSURE = 6
    VECTOR = 7


@dataclass(frozen=True)
class Constant:
    """A constant.

    ``value`` is None for NIL, a bool for BOOLEAN, a float for NUMBER, a 1-based
    string-table index for STRING, the encoded path for IMPORT, a tuple of
    constant indices for TABLE, a child proto index for CLOSURE and a tuple of
    four floats for VECTOR.
    """

    kind: ConstantKind
    value: Any = None

    def __str__(self) -> str:
        name = self.kind.name.capitalize()
        if self.kind is ConstantKind.NIL:
            return name
        if self.kind is ConstantKind.BOOLEAN:
            return f"{name}({str(self.value).lower()})"
        if self.kind is ConstantKind.TABLE:
            return f"{name}([{', '.join(map(str, self.value))}])"
        if self.kind is ConstantKind.VECTOR:
            return f"{name}({', '.join(map(repr, self.value))})"
        return f"{name}({self.value!r})"


def parse_constant(reader: ByteReader) -> Constant:
    """Read one tagged constant."""
    tag = reader.read_u8()
    try:
        kind = ConstantKind(tag)
    except ValueError:
        raise DecodeError(f"unknown constant tag: {tag}") from None

    if kind is ConstantKind.NIL:
        value = None
    elif kind is ConstantKind.BOOLEAN:
        value = reader.read_u8() != 0
    elif kind is ConstantKind.NUMBER:
        value = reader.read_f64()
    elif kind is ConstantKind.IMPORT:
        value = reader.read_u32()
    elif kind is ConstantKind.TABLE:
        value = tuple(reader.read_list(ByteReader.read_varint))
    elif kind is ConstantKind.VECTOR:
        value = tuple(reader.read_fixed_list(ByteReader.read_f32, 4))
    else:  # STRING, CLOSURE
        value = reader.read_varint()
    return Constant(kind, value)


def decode_import(encoded: int) -> tuple[int, int, int, int]:
    """Split an import path into (length, id0, id1, id2); ids are 10-bit."""
    encoded &= 0xFFFFFFFF
    return (
        encoded >> 30,
        (encoded >> 20) & 0x3FF,
        (encoded >> 10) & 0x3FF,
        encoded & 0x3FF,
    )