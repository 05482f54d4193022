"""Parameter type annotations from a function's type info bytes.

Layout: varint signature length, varint upvalue count, varint local count,
then the signature ``[FUNCTION, num_params, param types...]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

LBC_TYPE_FUNCTION = 5
LBC_TYPE_OPTIONAL_BIT = 0x80

_TYPE_NAMES = {
    0: "nil",
    1: "boolean",
    2: "number",
    3: "string",
    4: "table",
    5: "function",
    6: "thread",
    7: "userdata",
    8: "vector",
    9: "buffer",
    15: "",
}


@dataclass
class FuncTypeInfo:
    """Annotation per parameter, in order; an empty string means none."""

    param_types: list[str] = field(default_factory=list)


def _type_name(byte: int) -> str:
    base = byte & ~LBC_TYPE_OPTIONAL_BIT & 0xFF
    if 64 <= base <= 95:
        name = "userdata"
    else:
        name = _TYPE_NAMES.get(base, "")
    if not name:
        return ""
    return f"{name}?" if byte & LBC_TYPE_OPTIONAL_BIT else name


class _Truncated(Exception):
    pass


def _read_varint(data: bytes, pos: int) -> tuple[int, int]:
    result = 0
    shift = 0
    while True:
        if pos >= len(data):
            raise _Truncated
        byte = data[pos]
        pos += 1
        result = (result | ((byte & 0x7F) << shift)) & 0xFFFFFFFF
        if not byte & 0x80:
            return result, pos
        shift += 7
        if shift > 28:
            raise _Truncated


def decode_param_types(type_info: bytes) -> FuncTypeInfo | None:
    """Decode parameter types; None if the data is empty or malformed."""
    if not type_info:
        return None
    try:
        sig_len, pos = _read_varint(type_info, 0)
        _, pos = _read_varint(type_info, pos)
        _, pos = _read_varint(type_info, pos)
    except _Truncated:
        return None

    if sig_len < 2 or pos + sig_len > len(type_info):
        return None
    sig = type_info[pos:pos + sig_len]
    if sig[0] != LBC_TYPE_FUNCTION:
        return None

    declared = sig[2:]
    param_types = [
        _type_name(declared[i] if i < len(declared) else 0) for i in range(sig[1])
    ]
    return FuncTypeInfo(param_types=param_types)