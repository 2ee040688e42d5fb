"""Page-aligned anonymous memory regions."""

from __future__ import annotations

import mmap


def page_size() -> int:
    """Return the system memory page size in bytes."""
    return mmap.PAGESIZE


def round_size(size: int) -> int:
    """Round ``size`` to a whole number of pages.

    Sizes below one page become one page; larger sizes are rounded down to
    the nearest page boundary.
    """
    ps = page_size()
    if size < ps:
        return ps
    return size - size % ps


def allocate_region(size: int) -> mmap.mmap:
    """Map a private, anonymous, read-write region of at least one page.

    Raises ValueError for a zero size and OSError if mapping fails.
    """
    if size <= 0:
        raise ValueError(f"invalid region size: {size} bytes")
    length = round_size(size)
    if hasattr(mmap, "MAP_PRIVATE") and hasattr(mmap, "MAP_ANONYMOUS"):
        return mmap.mmap(
            -1,
            length,
            flags=mmap.MAP_PRIVATE | mmap.MAP_ANONYMOUS,
            prot=mmap.PROT_READ | mmap.PROT_WRITE,
        )
    return mmap.mmap(-1, length)


def free_region(region: mmap.mmap | None, size: int) -> None:
    """Release a region obtained from :func:`allocate_region`.

    Raises ValueError if ``region`` is None or ``size`` is not page-aligned.
    """
    if region is None:
        raise ValueError("cannot free a missing region")
    if size % page_size() != 0:
        raise ValueError(f"region size not page-aligned ({size})")
    region.close()