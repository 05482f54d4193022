"""Little-endian binary reader for the bytecode format."""

from __future__ import annotations

import struct
from typing import Callable, TypeVar

T = TypeVar("T")


class DecodeError(ValueError):
    """Raised when bytecode cannot be decoded."""


_U32 = struct.Struct("<I")
_F32 = struct.Struct("<f")
_F64 = struct.Struct("<d")


class ByteReader:
    """Sequential reader over a bytes buffer."""

    def __init__(self, data):
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        """Offset of the next unread byte."""
        return self._pos

    def read_bytes(self, length: int) -> bytes:
        """Read exactly ``length`` bytes."""
        if length < 0:
            raise DecodeError(f"negative length: {length}")
        end = self._pos + length
        if end > len(self._data):
            raise DecodeError(
                f"unexpected end of input: wanted {length} bytes at offset {self._pos}, "
                f"{len(self._data) - self._pos} available"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def read_u8(self) -> int:
        return self.read_bytes(1)[0]

    def read_u32(self) -> int:
        return _U32.unpack(self.read_bytes(4))[0]

    def read_f32(self) -> float:
        return _F32.unpack(self.read_bytes(4))[0]

    def read_f64(self) -> float:
        return _F64.unpack(self.read_bytes(8))[0]

    def read_varint(self) -> int:
        """Read an unsigned LEB128 integer."""
        result = 0
        shift = 0
        while True:
            byte = self.read_u8()
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                return result
            shift += 7

    def read_string(self) -> bytes:
        """Read a varint length followed by that many raw bytes."""
        return self.read_bytes(self.read_varint())

    def read_list(self, parser: Callable[["ByteReader"], T]) -> list[T]:
        """Read a varint count followed by that many items."""
        return self.read_fixed_list(parser, self.read_varint())

    def read_fixed_list(self, parser: Callable[["ByteReader"], T], count: int) -> list[T]:
        """Read ``count`` items with ``parser``."""
        return [parser(self) for _ in range(count)]

    def remaining(self) -> bytes:
        """The bytes not yet consumed."""
        return self._data[self._pos:]