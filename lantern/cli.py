"""Command-line entry point: parse bytecode files and dump their instructions."""

from __future__ import annotations

import argparse
import os
import sys
import time
from pathlib import Path
from typing import Sequence

from lantern.chunk import Chunk, deserialize
from lantern.function import Function
from lantern.opcode import OpCode
from lantern.reader import DecodeError

USAGE = "usage: lantern [--emit N] [--dump] <file.l64> [file2.l64 ...]"
BYTECODE_SUFFIX = ".l64"
DEFAULT_ENCODE_KEY = 1

_STRING_KEY_OPS = frozenset({OpCode.GetTableKS, OpCode.SetTableKS, OpCode.NameCall})


def _format_duration(seconds: float) -> str:
    """Render a duration with two decimals and a unit suited to its size."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"


def _function_name(chunk: Chunk, index: int, function: Function) -> str:
    name = chunk.get_string(function.debug.func_name_index)
    return name if name is not None else f"fn#{index}"


def _annotation(chunk: Chunk, function: Function, pc: int) -> str:
    instructions = function.instructions
    insn = instructions[pc]
    op = insn.op

    if op in _STRING_KEY_OPS:
        if pc + 1 < len(instructions):
            text = chunk.get_string(instructions[pc + 1].aux)
            if text is not None:
                return f' ; "{text}"'
        return ""

    if op is OpCode.LoadK:
        if 0 <= insn.d < len(function.constants):
            return f" ; {function.constants[insn.d]}"
        return ""

    if op is OpCode.GetImport:
        encoded = insn.d & 0xFFFFFFFF
        count = encoded >> 30
        bits = encoded & 0x3FFFFFFF
        parts = [
            text
            for j in range(count)
            if (text := chunk.get_string((bits >> (20 - 10 * j)) & 0x3FF)) is not None
        ]
        return f" ; {'.'.join(parts)}" if parts else ""

    return ""


def format_instruction(chunk: Chunk, function: Function, pc: int) -> str:
    """One disassembly line for the instruction at ``pc``."""
    insn = function.instructions[pc]
    aux = f" aux=0x{insn.aux:08X}" if insn.op.has_aux() else ""
    return (
        f"  {pc:4}  {insn.op.name}\tA={insn.a} B={insn.b} C={insn.c} "
        f"D={insn.d} E={insn.e}{aux}{_annotation(chunk, function, pc)}"
    )


def dump_chunk(chunk: Chunk, only_function: int | None = None) -> str:
    """Disassembly of every function, or only of ``only_function``."""
    lines: list[str] = []
    for index, function in enumerate(chunk.functions):
        if only_function is not None and index != only_function:
            continue
        name = _function_name(chunk, index, function)
        lines.append(
            f"=== fn #{index}: {name} ({len(function.instructions)} instructions) ==="
        )
        lines.extend(
            format_instruction(chunk, function, pc)
            for pc in range(len(function.instructions))
        )
        lines.append("")
    return "".join(f"{line}\n" for line in lines)


def collect_l64_files(directory) -> list[str]:
    """All bytecode files below ``directory``, recursively, sorted."""
    found: list[str] = []
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return found
    for entry in entries:
        path = Path(entry.path)
        if path.is_dir():
            found.extend(collect_l64_files(path))
        elif path.suffix == BYTECODE_SUFFIX:
            found.append(str(path))
    return sorted(found)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lantern", usage=USAGE[len("usage: "):])
    parser.add_argument("--emit", type=int, metavar="N", help="select one function by index")
    parser.add_argument("--dump", action="store_true", help="disassemble the bytecode")
    parser.add_argument("paths", nargs="*", help="bytecode files or directories")
    return parser


def _expand_paths(paths: Sequence[str]) -> list[str]:
    expanded: list[str] = []
    for path in paths:
        if Path(path).is_dir():
            expanded.extend(collect_l64_files(path))
        else:
            expanded.append(path)
    return sorted(expanded)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    args_list = list(sys.argv[1:] if argv is None else argv)
    if not args_list:
        print(USAGE, file=sys.stderr)
        return 1

    args = _build_parser().parse_args(args_list)
    paths = _expand_paths(args.paths)
    verbose = len(paths) == 1

    for path in paths:
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            print(f"Error reading {path}: {exc}", file=sys.stderr)
            continue

        started = time.perf_counter()
        try:
            chunk = deserialize(data, DEFAULT_ENCODE_KEY)
        except DecodeError as exc:
            print(f"Parse error {path}: {exc}", file=sys.stderr)
            continue
        parse_time = time.perf_counter() - started

        if args.dump:
            print(dump_chunk(chunk, args.emit), end="")
            continue

        if verbose and args.emit is None:
            print(f"Parsed: {path} ({_format_duration(parse_time)})")

    return 0


if __name__ == "__main__":
    sys.exit(main())