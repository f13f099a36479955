"""Map discrete input events onto navigation transition requests."""
from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

from compendium.components.detail_overlay import Focus
from compendium.components.navigation_state import NavigationState, View
from compendium.components.transition import (
    Quit,
    StepCursor,
    SwitchFocus,
    SwitchView,
    TogglePopup,
    TransitionRequest,
)
from compendium.constants import (
    KEY_CHARACTER,
    KEY_DOWN_ALIAS,
    KEY_HOME,
    KEY_ITEMS,
    KEY_LORE,
    KEY_QUIT,
    KEY_SKILLS,
    KEY_UP_ALIAS,
)
from compendium.utils.navigation import focused_slot


class InputEvent(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    QUIT = auto()


@dataclass(frozen=True, slots=True)
class ViewSwitch:
    view: View


Input = Union[InputEvent, ViewSwitch]

VIEW_KEYS = {
    KEY_HOME: View.HOME,
    KEY_CHARACTER: View.CHARACTER_DETAIL,
    KEY_SKILLS: View.SKILL_BROWSER,
    KEY_ITEMS: View.ITEM_BROWSER,
    KEY_LORE: View.LORE,
}

_SPECIAL_KEYS = {
    curses.KEY_UP: InputEvent.UP,
    curses.KEY_DOWN: InputEvent.DOWN,
    curses.KEY_LEFT: InputEvent.LEFT,
    curses.KEY_RIGHT: InputEvent.RIGHT,
    curses.KEY_ENTER: InputEvent.ENTER,
    10: InputEvent.ENTER,
    13: InputEvent.ENTER,
}

_CHAR_KEYS = {
    KEY_QUIT: InputEvent.QUIT,
    KEY_UP_ALIAS: InputEvent.UP,
    KEY_DOWN_ALIAS: InputEvent.DOWN,
}


def translate_key(key: int | str) -> Input | None:
    """Translate a curses key code (or single character) into an input event."""

    if isinstance(key, int):
        special = _SPECIAL_KEYS.get(key)
        if special is not None:
            return special
        if not 0 <= key < 0x110000:
            return None
        key = chr(key)
    if len(key) != 1:
        return None
    if key in VIEW_KEYS:
        return ViewSwitch(VIEW_KEYS[key])
    if key == "\n" or key == "\r":
        return InputEvent.ENTER
    return _CHAR_KEYS.get(key)


def dispatch(state: NavigationState, event: Input | None) -> TransitionRequest | None:
    """Return the transition ``event`` asks for in ``state``, or None to ignore it."""

    if isinstance(event, ViewSwitch):
        return SwitchView(event.view)
    if event == InputEvent.QUIT:
        return Quit()
    if event in (InputEvent.UP, InputEvent.DOWN):
        if focused_slot(state) is None:
            return None
        return StepCursor(-1 if event == InputEvent.UP else 1)
    if state.view != View.CHARACTER_DETAIL:
        return None
    if event == InputEvent.LEFT:
        return SwitchFocus(Focus.ROSTER)
    if event == InputEvent.RIGHT:
        return SwitchFocus(Focus.SKILLS)
    if event == InputEvent.ENTER:
        return TogglePopup()
    return None
