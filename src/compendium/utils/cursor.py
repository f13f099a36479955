from __future__ import annotations


def clamp(index: int, length: int) -> int:
    """Soft-reset an index that no longer fits a collection of ``length`` rows."""

    if length <= 0 or index < 0 or index >= length:
        return 0
    return index


def advance(index: int, direction: int, length: int) -> int:
    """Step ``index`` one row in ``direction`` with wraparound.

    ``length`` must be read fresh by the caller since the backing collection can
    change size between frames. An empty collection leaves the index untouched;
    a stale index is treated as 0 before stepping.
    """

    if length <= 0:
        return index
    current = clamp(index, length)
    if direction > 0:
        return 0 if current >= length - 1 else current + 1
    if direction < 0:
        return length - 1 if current == 0 else current - 1
    return current
