"""Command that builds a small sample chunk and prints its disassembly."""

from __future__ import annotations

from collections.abc import Sequence

from .chunk import Chunk, OpCode
from .debug import disassemble_chunk


def main(argv: Sequence[str] | None = None) -> int:
    """Assemble a demonstration chunk and print its listing."""
    chunk = Chunk()
    index = chunk.add_constant(1.2)
    chunk.write(OpCode.CONSTANT)
    chunk.write(index)
    chunk.write(OpCode.RETURN)
    print(disassemble_chunk(chunk, "test_impl"), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())