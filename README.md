# lantern

Reads Luau bytecode (version 6) and prints a listing of the functions in a
chunk: opcodes, decoded operands, AUX words and the strings, constants or
import paths they refer to.

## Installing

    pip install .

## Command line

Dump every function in one or more `.l64` files. Directories are searched
recursively for `.l64` files, and all paths are processed in sorted order:

    lantern --dump path/to/script.l64
    lantern --dump path/to/scripts/

Limit the dump to a single function by its index in the chunk:

    lantern --dump --emit 3 path/to/script.l64

Each function starts with a header line of the form
`=== fn #<index>: <name> (<count> instructions) ===`, where the name comes
from the debug info or is `fn#<index>` when there is none. Each instruction
line shows the program counter, the opcode name, the A/B/C/D/E fields, the
AUX word (as `aux=0x........`) for opcodes that carry one, and a comment with:

- the string key for `GetTableKS`, `SetTableKS` and `NameCall`,
- the constant for `LoadK`,
- the dotted import path for `GetImport`.

Without `--dump`, a single file is parsed and the command prints
`Parsed: <path> (<time>)`. Files that cannot be read or parsed are reported
on standard error and skipped. Run with no arguments, the command prints its
usage and exits with status 1.

## Library

    from lantern.chunk import deserialize

    with open("script.l64", "rb") as fh:
        chunk = deserialize(fh.read(), 1)

    main = chunk.main_function()
    for insn in main.instructions:
        print(insn.op.name, insn.a, insn.b, insn.c)

`deserialize(bytecode, encode_key)` takes the raw bytes and the key each
opcode byte is multiplied by (1 for plain bytecode). It raises
`lantern.reader.DecodeError` for compile-error blobs (version byte 0), for
any version other than 6, and for truncated or malformed data.

Other pieces:

- `lantern.chunk.Chunk` holds the string table, the function prototypes and
  the entry index; `Chunk.get_string(index)` resolves a 1-based string index.
- `lantern.function.Function` holds one prototype: instructions, constants,
  child prototypes, type info and `DebugInfo` (name, scopes, line info).
- `lantern.instruction.decode_all(words, encode_key)` decodes a word stream;
  an instruction with an AUX word is followed by a `Nop` placeholder so that
  list indices equal program counters.
- `lantern.opcode.OpCode` lists the opcodes; `OpCode.has_aux()` tells which
  take an AUX word.
- `lantern.constant.decode_import(encoded)` splits an encoded import path
  into its length and three 10-bit constant indices.
- `lantern.scope_tree.ScopeTree` maps a register and PC to a local variable
  name from the debug info.
- `lantern.type_info.decode_param_types(type_info)` turns a function's
  type-info bytes into parameter type annotations such as `number` or
  `string?`.
- `lantern.reader.ByteReader` is the little-endian reader used throughout.

## What it does not do

lantern reads and disassembles bytecode only. It does not turn bytecode
back into Lua source: there is no lifting, variable recovery, control-flow
structuring or source emission, and `--emit` only selects which function is
dumped. It also has no option for writing output files; everything is
printed to standard output.

## Running the tests

    pip install .[test]
    pytest