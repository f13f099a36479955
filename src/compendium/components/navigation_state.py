"""Navigation state resource describing the active view and its cursors."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from compendium.components.cursor import Cursor
from compendium.components.detail_overlay import DetailOverlay


class View(Enum):
    """Top-level views selectable from the menu bar."""
    HOME = auto()
    CHARACTER_DETAIL = auto()
    SKILL_BROWSER = auto()
    ITEM_BROWSER = auto()
    LORE = auto()


class CursorSlot(Enum):
    """Addressable cursors held by the navigation state."""
    ROSTER = auto()
    ROSTER_SKILLS = auto()
    SKILLS = auto()
    ITEMS = auto()
    LORE = auto()


@dataclass(frozen=True, slots=True)
class NavigationState:
    """Singleton component; replaced wholesale on every transition."""

    view: View = View.HOME
    roster: Cursor = field(default_factory=Cursor)
    skills: Cursor = field(default_factory=Cursor)
    items: Cursor = field(default_factory=Cursor)
    overlay: DetailOverlay = field(default_factory=DetailOverlay)
    lore_offset: int = 0
