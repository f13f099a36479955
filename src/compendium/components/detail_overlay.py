"""Overlay state owned by the character detail view."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from compendium.components.cursor import Cursor


class Focus(Enum):
    """Which list of the character view receives up/down input."""
    ROSTER = auto()
    SKILLS = auto()


@dataclass(frozen=True, slots=True)
class DetailOverlay:
    """Skill popup flag, list focus and the secondary cursor over the selected character's skills."""

    popup_shown: bool = False
    focus: Focus = Focus.ROSTER
    skill_cursor: Cursor = field(default_factory=Cursor)
