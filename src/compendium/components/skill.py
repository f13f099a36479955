from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Skill:
    """Describes a talent or skill a character can hold."""

    id: int
    name: str
    description: str = ""
    cost: int = 0
    attribute: str | None = None
