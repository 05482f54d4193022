"""Whole bytecode chunks and the top-level deserializer."""

from __future__ import annotations

from dataclasses import dataclass

from lantern.function import Function
from lantern.reader import ByteReader, DecodeError

SUPPORTED_VERSION = 6
MAX_TYPES_VERSION = 3


@dataclass
class Chunk:
    """A parsed chunk: shared string table, prototypes and the entry index."""

    string_table: list[bytes]
    functions: list[Function]
    main: int

    @classmethod
    def parse(cls, reader: ByteReader, encode_key: int) -> "Chunk":
        """Read the chunk body that follows the version byte."""
        types_version = reader.read_u8()
        if types_version > MAX_TYPES_VERSION:
            raise DecodeError(f"unsupported types version: {types_version}")

        string_table = reader.read_list(ByteReader.read_string)

        if types_version == 3:
            # userdata type remapping, terminated by a zero
            while reader.read_varint() != 0:
                pass

        functions = [
            Function.parse(reader, encode_key, string_table)
            for _ in range(reader.read_varint())
        ]
        main = reader.read_varint()
        return cls(string_table=string_table, functions=functions, main=main)

    def get_string(self, index: int) -> str | None:
        """The 1-based string-table entry as text, or None if out of range."""
        if 0 < index <= len(self.string_table):
            return self.string_table[index - 1].decode("utf-8", errors="replace")
        return None

    def main_function(self) -> Function:
        """The entry prototype."""
        return self.functions[self.main]


def deserialize(bytecode: bytes, encode_key: int) -> Chunk:
    """Parse version 6 bytecode.

    ``encode_key`` multiplies each opcode byte (1 for plain bytecode).
    Raises DecodeError for compile-error blobs, other versions and bad data.
    """
    reader = ByteReader(bytecode)
    version = reader.read_u8()
    if version == 0:
        message = bytes(bytecode[1:]).decode("utf-8", errors="replace")
        raise DecodeError(f"bytecode compilation error: {message}")
    if version != SUPPORTED_VERSION:
        raise DecodeError(
            f"unsupported bytecode version: {version} (lantern targets version 6 only)"
        )
    return Chunk.parse(reader, encode_key)