"""Bytecode chunks, values, a disassembler and page-aligned memory helpers for a small Lox virtual machine."""

__version__ = "0.1.0"
__all__ = ["chunk", "debug", "main", "pagemap", "value"]