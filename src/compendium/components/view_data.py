"""Per-view frame data handed to the renderer.

Each view gets its own variant so the renderer never has to guess which
fields apply. ``errors`` carries read failures reported during the pass.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from compendium.components.character import Character
from compendium.components.detail_overlay import Focus
from compendium.components.equipment import Armor, Gear, ItemEntry, Weapon
from compendium.components.skill import Skill


@dataclass(frozen=True, slots=True)
class HomeData:
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CharacterDetailData:
    roster: Tuple[Character, ...]
    roster_index: int
    character: Character | None
    skills: Tuple[Skill, ...]
    weapons: Tuple[Weapon, ...]
    armor: Tuple[Armor, ...]
    gear: Tuple[Gear, ...]
    skill_index: int
    focus: Focus
    popup_shown: bool
    popup_skill: Skill | None
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class SkillBrowserData:
    skills: Tuple[Skill, ...]
    selected_index: int
    errors: Tuple[str, ...] = ()

    @property
    def selected(self) -> Skill | None:
        return self.skills[self.selected_index] if self.skills else None


@dataclass(frozen=True, slots=True)
class ItemBrowserData:
    items: Tuple[ItemEntry, ...]
    selected_index: int
    errors: Tuple[str, ...] = ()

    @property
    def selected(self) -> ItemEntry | None:
        return self.items[self.selected_index] if self.items else None


@dataclass(frozen=True, slots=True)
class LoreData:
    lines: Tuple[str, ...]
    offset: int
    errors: Tuple[str, ...] = ()


ViewData = Union[HomeData, CharacterDetailData, SkillBrowserData, ItemBrowserData, LoreData]
