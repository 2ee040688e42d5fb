"""Runtime values of the virtual machine and their textual form."""

from __future__ import annotations

Value = float


def format_value(value: Value) -> str:
    """Render a value the way the disassembler shows it (``%g`` style)."""
    return "%g" % value