from __future__ import annotations

from dataclasses import dataclass

from compendium.utils.cursor import advance, clamp


@dataclass(frozen=True, slots=True)
class Cursor:
    """Selection index paired with the last length it was validated against."""

    index: int = 0
    length: int = 0

    @property
    def active(self) -> bool:
        return self.length > 0

    def step(self, direction: int, length: int) -> "Cursor":
        """Return the cursor moved one row, re-validated against ``length``."""

        return Cursor(index=advance(self.index, direction, length), length=length)

    def resolved(self, length: int) -> int:
        """Index to display for a collection of ``length`` rows."""

        return clamp(self.index, length)
