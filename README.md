# loxvm

The building blocks of a bytecode virtual machine for the Lox language.

- `loxvm.value`: values are double-precision numbers (`Value` is `float`).
  `format_value` renders one in `%g` style, which is how the disassembler
  shows constants.
- `loxvm.chunk`: the `OpCode` enumeration (`OpCode.RETURN`,
  `OpCode.CONSTANT`) and `Chunk`, a dataclass holding a `bytearray` of code
  and a list of constants. `Chunk.write` appends one byte and raises
  `ValueError` if the value does not fit in an unsigned byte.
  `Chunk.add_constant` appends to the constant pool and returns the new
  constant's index. `len(chunk)` is the number of code bytes.
- `loxvm.debug`: a disassembler. `disassemble_instruction(chunk, offset)`
  returns the listing line for one instruction and the offset of the next
  one. `disassemble_chunk(chunk, name)` returns the whole listing under a
  `=== name ===` header. An unknown opcode, a missing operand, a constant
  index outside the pool or an offset outside the chunk raises
  `DisassemblyError`.
- `loxvm.pagemap`: helpers for page-aligned anonymous memory regions.
  `page_size` returns the system page size. `round_size` turns a size below
  one page into one page and rounds larger sizes down to a page boundary.
  `allocate_region` maps a private read-write region (as an `mmap.mmap`) and
  raises `ValueError` for a size that is not positive. `free_region` closes
  the region and raises `ValueError` if it is `None` or the size is not a
  multiple of the page size.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from loxvm.chunk import Chunk, OpCode
from loxvm.debug import disassemble_chunk

chunk = Chunk()
index = chunk.add_constant(1.2)
chunk.write(OpCode.CONSTANT)
chunk.write(index)
chunk.write(OpCode.RETURN)

print(disassemble_chunk(chunk, "test_impl"), end="")
```

## Command line

The `loxvm` command builds a small sample chunk, one constant load followed
by a return, and prints its disassembly:

```
loxvm
```

```
=== test_impl ===
0000 OP_CONSTANT         0 '1.2'
0002 OP_RETURN
```

## What it does not do

The package builds and disassembles bytecode only. It has no scanner, no
compiler from Lox source text and no interpreter loop that executes a chunk.
The `loxvm` command takes no script or file and runs no Lox programs. It only
prints the listing of its built-in sample chunk.