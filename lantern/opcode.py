"""Opcodes of bytecode version 6."""

from __future__ import annotations

from enum import IntEnum


class OpCode(IntEnum):
    """Bytecode opcodes; member names follow the instruction mnemonics."""

    Nop = 0
    Break = 1
    LoadNil = 2
    LoadB = 3
    LoadN = 4
    LoadK = 5
    Move = 6
    GetGlobal = 7
    SetGlobal = 8
    GetUpval = 9
    SetUpval = 10
    CloseUpvals = 11
    GetImport = 12
    GetTable = 13
    SetTable = 14
    GetTableKS = 15
    SetTableKS = 16
    GetTableN = 17
    SetTableN = 18
    NewClosure = 19
    NameCall = 20
    Call = 21
    Return = 22
    Jump = 23
    JumpBack = 24
    JumpIf = 25
    JumpIfNot = 26
    JumpIfEq = 27
    JumpIfLe = 28
    JumpIfLt = 29
    JumpIfNotEq = 30
    JumpIfNotLe = 31
    JumpIfNotLt = 32
    Add = 33
    Sub = 34
    Mul = 35
    Div = 36
    Mod = 37
    Pow = 38
    AddK = 39
    SubK = 40
    MulK = 41
    DivK = 42
    ModK = 43
    PowK = 44
    And = 45
    Or = 46
    AndK = 47
    OrK = 48
    Concat = 49
    Not = 50
    Minus = 51
    Length = 52
    NewTable = 53
    DupTable = 54
    SetList = 55
    ForNPrep = 56
    ForNLoop = 57
    ForGLoop = 58
    ForGPrepINext = 59
    FastCall3 = 60
    ForGPrepNext = 61
    NativeCall = 62
    GetVarArgs = 63
    DupClosure = 64
    PrepVarArgs = 65
    LoadKX = 66
    JumpX = 67
    FastCall = 68
    Coverage = 69
    Capture = 70
    SubRK = 71
    DivRK = 72
    FastCall1 = 73
    FastCall2 = 74
    FastCall2K = 75
    ForGPrep = 76
    JumpXEqKNil = 77
    JumpXEqKB = 78
    JumpXEqKN = 79
    JumpXEqKS = 80
    IDiv = 81
    IDivK = 82

    @classmethod
    def from_byte(cls, byte: int) -> "OpCode | None":
        """The opcode for a raw byte, or None if the byte names no opcode."""
        try:
            return cls(byte)
        except ValueError:
            return None

    def has_aux(self) -> bool:
        """Whether the instruction is followed by an AUX word."""
        return self in _AUX_OPCODES


_AUX_OPCODES = frozenset(
    {
        OpCode.GetGlobal,
        OpCode.SetGlobal,
        OpCode.GetImport,
        OpCode.GetTableKS,
        OpCode.SetTableKS,
        OpCode.NameCall,
        OpCode.JumpIfEq,
        OpCode.JumpIfLe,
        OpCode.JumpIfLt,
        OpCode.JumpIfNotEq,
        OpCode.JumpIfNotLe,
        OpCode.JumpIfNotLt,
        OpCode.NewTable,
        OpCode.SetList,
        OpCode.ForGLoop,
        OpCode.LoadKX,
        OpCode.FastCall2,
        OpCode.FastCall2K,
        OpCode.FastCall3,
        OpCode.JumpXEqKNil,
        OpCode.JumpXEqKB,
        OpCode.JumpXEqKN,
        OpCode.JumpXEqKS,
    }
)