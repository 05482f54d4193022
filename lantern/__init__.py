"""Reader and disassembler for Luau version 6 bytecode."""

__version__ = "0.1.0"