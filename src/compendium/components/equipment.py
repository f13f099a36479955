"""Records for the three equipment tables."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True, slots=True)
class Weapon:
    id: int
    name: str
    description: str = ""
    damage: int = 0
    crit: int = 0
    range: str = ""
    cost: int = 0


@dataclass(frozen=True, slots=True)
class Armor:
    id: int
    name: str
    description: str = ""
    rating: int = 0
    cost: int = 0


@dataclass(frozen=True, slots=True)
class Gear:
    id: int
    name: str
    description: str = ""
    bonus: str = ""
    cost: int = 0


ItemKind = Literal["weapon", "armor", "gear"]
Item = Union[Weapon, Armor, Gear]


@dataclass(frozen=True, slots=True)
class ItemEntry:
    """One row of the item browser's flat collection."""

    kind: ItemKind
    record: Item

    @property
    def name(self) -> str:
        return self.record.name
