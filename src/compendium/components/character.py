from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True, slots=True)
class Character:
    """Player character with scalar sheet data and references into other tables."""

    id: int
    name: str
    level: int = 1
    character_class: str = ""
    background: str = ""
    attributes: Dict[str, int] = field(default_factory=dict)
    skill_ratings: Dict[str, int] = field(default_factory=dict)
    skill_ids: Tuple[int, ...] = ()
    weapon_ids: Tuple[int, ...] = ()
    armor_ids: Tuple[int, ...] = ()
    gear_ids: Tuple[int, ...] = ()
