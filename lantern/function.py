"""Function prototypes and their debug information."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from lantern.constant import Constant, parse_constant
from lantern.instruction import Instruction, decode_all
from lantern.reader import ByteReader
from lantern.scope_tree import LocalScope, ScopeTree


@dataclass(frozen=True)
class LineInfo:
    """Line number information for mapping PCs to source lines."""

    line_gap_log2: int
    line_deltas: tuple[int, ...]
    abs_line_info: tuple[int, ...]
    base_line: int

    def line_for_pc(self, pc: int, line_defined: int) -> int:
        """Source line of ``pc``: ``line_defined`` plus the deltas before it."""
        return line_defined + sum(self.line_deltas[:pc])


@dataclass
class DebugInfo:
    """Names, scopes and line information of a function."""

    func_name_index: int = 0
    scopes: ScopeTree = field(default_factory=ScopeTree)
    upvalue_name_indices: list[int] = field(default_factory=list)
    line_defined: int = 0
    line_info: LineInfo | None = None


def _decode_name(index: int, string_table: Sequence[bytes]) -> str | None:
    if 0 < index <= len(string_table):
        return string_table[index - 1].decode("utf-8", errors="replace")
    return None


@dataclass
class Function:
    """A parsed function prototype."""

    max_stack_size: int
    num_params: int
    num_upvalues: int
    is_vararg: bool
    flags: int
    type_info: bytes
    instructions: list[Instruction]
    constants: list[Constant]
    child_protos: list[int]
    debug: DebugInfo

    @classmethod
    def parse(
        cls, reader: ByteReader, encode_key: int, string_table: Sequence[bytes]
    ) -> "Function":
        """Read one prototype; local names are resolved through ``string_table``."""
        max_stack_size = reader.read_u8()
        num_params = reader.read_u8()
        num_upvalues = reader.read_u8()
        is_vararg = reader.read_u8() != 0

        flags = reader.read_u8()
        type_info = reader.read_string()

        raw_words = reader.read_list(ByteReader.read_u32)
        instructions = decode_all(raw_words, encode_key)

        constants = reader.read_list(parse_constant)
        child_protos = reader.read_list(ByteReader.read_varint)

        line_defined = reader.read_varint()
        func_name_index = reader.read_varint()

        line_info = None
        if reader.read_u8() != 0:
            line_gap_log2 = reader.read_u8()
            line_deltas = reader.read_fixed_list(ByteReader.read_u8, len(raw_words))
            abs_count = (max(len(raw_words) - 1, 0) >> line_gap_log2) + 1
            abs_line_info = reader.read_fixed_list(ByteReader.read_u32, abs_count)
            line_info = LineInfo(
                line_gap_log2=line_gap_log2,
                line_deltas=tuple(line_deltas),
                abs_line_info=tuple(abs_line_info),
                base_line=line_defined,
            )

        scopes = ScopeTree()
        upvalue_names: list[int] = []
        if reader.read_u8() != 0:
            local_scopes = []
            for _ in range(reader.read_varint()):
                name_index = reader.read_varint()
                start = reader.read_varint()
                end = reader.read_varint()
                register = reader.read_u8()
                name = _decode_name(name_index, string_table)
                if name is None:
                    continue
                local_scopes.append(LocalScope(register, name, range(start, end)))
            upvalue_names = reader.read_list(ByteReader.read_varint)
            scopes = ScopeTree(local_scopes)

        return cls(
            max_stack_size=max_stack_size,
            num_params=num_params,
            num_upvalues=num_upvalues,
            is_vararg=is_vararg,
            flags=flags,
            type_info=type_info,
            instructions=instructions,
            constants=constants,
            child_protos=child_protos,
            debug=DebugInfo(
                func_name_index=func_name_index,
                scopes=scopes,
                upvalue_name_indices=upvalue_names,
                line_defined=line_defined,
                line_info=line_info,
            ),
        )

    def get_string(self, idx: int, string_table: Sequence[bytes]) -> bytes | None:
        """The string-table entry at 1-based ``idx``, or None."""
        if 0 < idx <= len(string_table):
            return string_table[idx - 1]
        return None