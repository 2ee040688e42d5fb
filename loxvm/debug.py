"""Disassembler producing a readable listing of a chunk."""

from __future__ import annotations

from .chunk import Chunk, OpCode
from .value import format_value


class DisassemblyError(Exception):
    """Raised when a chunk holds bytes that do not form valid instructions."""


def _simple_instruction(name: str) -> tuple[str, int]:
    return name, 1


def _constant_instruction(name: str, chunk: Chunk, offset: int) -> tuple[str, int]:
    if offset + 1 >= len(chunk.code):
        raise DisassemblyError(f"missing operand for {name} at offset {offset}")
    index = chunk.code[offset + 1]
    if index >= len(chunk.constants):
        raise DisassemblyError(f"constant index {index} out of range")
    value = chunk.constants[index]
    return f"{name:<16} {index:4d} '{format_value(value)}'", 2


def disassemble_instruction(chunk: Chunk, offset: int) -> tuple[str, int]:
    """Describe the instruction at ``offset``.

    Returns the listing line (without newline) and the offset of the next
    instruction.
    """
    if not 0 <= offset < len(chunk.code):
        raise DisassemblyError(f"offset {offset} outside chunk")
    opcode = chunk.code[offset]
    if opcode == OpCode.RETURN:
        text, size = _simple_instruction("OP_RETURN")
    elif opcode == OpCode.CONSTANT:
        text, size = _constant_instruction("OP_CONSTANT", chunk, offset)
    else:
        raise DisassemblyError(f"unknown opcode {opcode}")
    return f"{offset:04d} {text}", offset + size


def disassemble_chunk(chunk: Chunk, name: str) -> str:
    """Return the full listing of ``chunk`` under a ``=== name ===`` header."""
    lines = [f"=== {name} ==="]
    offset = 0
    while offset < len(chunk.code):
        line, offset = disassemble_instruction(chunk, offset)
        lines.append(line)
    return "\n".join(lines) + "\n"