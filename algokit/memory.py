"""Memory helpers: address alignment and the system page size."""

from __future__ import annotations

import mmap


def align_up(value: int, alignment: int) -> int:
    """Round ``value`` up to the next multiple of ``alignment``, a power of two."""
    if alignment <= 0 or alignment & (alignment - 1):
        raise ValueError(f"alignment must be a positive power of two, got {alignment}")
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    return (value + alignment - 1) & ~(alignment - 1)


def page_size() -> int:
    """Return the size in bytes of a memory page on this system."""
    return mmap.PAGESIZE