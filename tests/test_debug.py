import pytest

from loxvm.chunk import Chunk, OpCode
from loxvm.debug import DisassemblyError, disassemble_chunk, disassemble_instruction


def _sample_chunk():
    chunk = Chunk()
    idx = chunk.add_constant(1.2)
    chunk.write(OpCode.CONSTANT)
    chunk.write(idx)
    chunk.write(OpCode.RETURN)
    return chunk


def test_return_instruction():
    chunk = Chunk()
    chunk.write(OpCode.RETURN)
    assert disassemble_instruction(chunk, 0) == ("0000 OP_RETURN", 1)


def test_constant_instruction_advances_two_bytes():
    chunk = _sample_chunk()
    line, nxt = disassemble_instruction(chunk, 0)
    assert nxt == 2
    assert line.startswith("0000 OP_CONSTANT")
    assert line.endswith("'1.2'")


def test_chunk_listing():
    listing = disassemble_chunk(_sample_chunk(), "test_impl")
    assert listing.splitlines() == [
        "=== test_impl ===",
        "0000 OP_CONSTANT         0 '1.2'",
        "0002 OP_RETURN",
    ]


def test_empty_chunk_has_only_header():
    assert disassemble_chunk(Chunk(), "empty") == "=== empty ===\n"


def test_unknown_opcode_raises():
    chunk = Chunk()
    chunk.write(200)
    with pytest.raises(DisassemblyError, match="unknown opcode 200"):
        disassemble_chunk(chunk, "bad")


def test_truncated_constant_raises():
    chunk = Chunk()
    chunk.add_constant(1.0)
    chunk.write(OpCode.CONSTANT)
    with pytest.raises(DisassemblyError):
        disassemble_instruction(chunk, 0)


def test_constant_index_out_of_range_raises():
    chunk = Chunk()
    chunk.write(OpCode.CONSTANT)
    chunk.write(3)
    with pytest.raises(DisassemblyError):
        disassemble_instruction(chunk, 0)


def test_offset_outside_chunk_raises():
    with pytest.raises(DisassemblyError):
        disassemble_instruction(_sample_chunk(), 10)