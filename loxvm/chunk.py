"""Bytecode chunks: a growable sequence of bytes plus a constant pool."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .value import Value


class OpCode(IntEnum):
    """Instruction opcodes understood by the virtual machine."""

    RETURN = 0
    CONSTANT = 1


@dataclass
class Chunk:
    """A block of bytecode together with the constants it refers to."""

    code: bytearray = field(default_factory=bytearray)
    constants: list[Value] = field(default_factory=list)

    def write(self, byte: int) -> None:
        """Append one byte (an opcode or an operand) to the chunk.

        Raises ValueError if ``byte`` does not fit in an unsigned byte.
        """
        self.code.append(byte)

    def add_constant(self, value: Value) -> int:
        """Store ``value`` in the constant pool and return its index."""
        self.constants.append(value)
        return len(self.constants) - 1

    def __len__(self) -> int:
        return len(self.code)