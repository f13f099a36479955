"""Transition requests produced by the input dispatcher."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from compendium.components.detail_overlay import Focus
from compendium.components.navigation_state import View


@dataclass(frozen=True, slots=True)
class SwitchView:
    view: View


@dataclass(frozen=True, slots=True)
class StepCursor:
    direction: int


@dataclass(frozen=True, slots=True)
class SwitchFocus:
    focus: Focus


@dataclass(frozen=True, slots=True)
class TogglePopup:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


TransitionRequest = Union[SwitchView, StepCursor, SwitchFocus, TogglePopup, Quit]
