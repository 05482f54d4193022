"""Decoding of 32-bit instruction words."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from lantern.opcode import OpCode
from lantern.reader import DecodeError


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction with every operand field extracted.

    ABC: op(8) A(8) B(8) C(8); AD: op(8) A(8) D(16, signed);
    E: op(8) E(24, signed). ``aux`` holds the following word, if any.
    """

    op: OpCode
    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0
    e: int = 0
    aux: int = 0

    @classmethod
    def decode(cls, word: int, encode_key: int) -> "Instruction | None":
        """Decode one word; None if its opcode byte is not valid."""
        word &= 0xFFFFFFFF
        op = OpCode.from_byte(((word & 0xFF) * encode_key) & 0xFF)
        if op is None:
            return None
        d = (word >> 16) & 0xFFFF
        if d >= 0x8000:
            d -= 0x10000
        signed_word = word - 0x100000000 if word >= 0x80000000 else word
        return cls(
            op=op,
            a=(word >> 8) & 0xFF,
            b=(word >> 16) & 0xFF,
            c=(word >> 24) & 0xFF,
            d=d,
            e=signed_word >> 8,
        )

    def with_aux(self, aux: int) -> "Instruction":
        """A copy of this instruction carrying ``aux``."""
        return dataclasses.replace(self, aux=aux)


_AUX_PLACEHOLDER = Instruction(OpCode.Nop)


def decode_all(words, encode_key: int) -> list[Instruction]:
    """Decode an instruction stream.

    An instruction with an AUX word takes it as ``aux`` and a NOP is put in the
    AUX word's slot, so list indices stay equal to program counters.
    """
    instructions: list[Instruction] = []
    stream = enumerate(words)
    for pc, word in stream:
        insn = Instruction.decode(word, encode_key)
        if insn is None:
            raise DecodeError(f"invalid opcode at PC {pc}")
        if insn.op.has_aux():
            following = next(stream, None)
            if following is not None:
                instructions.append(insn.with_aux(following[1] & 0xFFFFFFFF))
                instructions.append(_AUX_PLACEHOLDER)
                continue
        instructions.append(insn)
    return instructions