"""Pure transitions of the navigation state machine.

Every function returns a new ``NavigationState``; nothing here touches the
world, the store or the event bus.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Callable

from compendium.components.detail_overlay import Focus
from compendium.components.navigation_state import CursorSlot, NavigationState, View
from compendium.components.transition import (
    Quit,
    StepCursor,
    SwitchFocus,
    SwitchView,
    TogglePopup,
    TransitionRequest,
)

LengthProvider = Callable[[CursorSlot, NavigationState], int]

_VIEW_SLOTS = {
    View.SKILL_BROWSER: CursorSlot.SKILLS,
    View.ITEM_BROWSER: CursorSlot.ITEMS,
    View.LORE: CursorSlot.LORE,
}


def switch_view(state: NavigationState, view: View) -> NavigationState:
    if state.view == view:
        return state
    overlay = state.overlay
    if state.view == View.CHARACTER_DETAIL and overlay.popup_shown:
        overlay = replace(overlay, popup_shown=False)
    return replace(state, view=view, overlay=overlay)


def focused_slot(state: NavigationState) -> CursorSlot | None:
    """Cursor that receives up/down input in the current view."""

    if state.view == View.CHARACTER_DETAIL:
        if state.overlay.focus == Focus.SKILLS:
            return CursorSlot.ROSTER_SKILLS
        return CursorSlot.ROSTER
    return _VIEW_SLOTS.get(state.view)


def step_cursor(state: NavigationState, slot: CursorSlot, direction: int, length: int) -> NavigationState:
    if slot == CursorSlot.ROSTER:
        return replace(state, roster=state.roster.step(direction, length))
    if slot == CursorSlot.ROSTER_SKILLS:
        overlay = replace(state.overlay, skill_cursor=state.overlay.skill_cursor.step(direction, length))
        return replace(state, overlay=overlay)
    if slot == CursorSlot.SKILLS:
        return replace(state, skills=state.skills.step(direction, length))
    if slot == CursorSlot.ITEMS:
        return replace(state, items=state.items.step(direction, length))
    # Lore scrolls without wrapping.
    last = max(length - 1, 0)
    offset = min(max(state.lore_offset + direction, 0), last)
    return replace(state, lore_offset=offset)


def switch_focus(state: NavigationState, focus: Focus) -> NavigationState:
    if state.overlay.focus == focus:
        return state
    return replace(state, overlay=replace(state.overlay, focus=focus))


def toggle_popup(state: NavigationState) -> NavigationState:
    overlay = state.overlay
    return replace(state, overlay=replace(overlay, popup_shown=not overlay.popup_shown))


def apply_request(
    state: NavigationState,
    request: TransitionRequest,
    length_of: LengthProvider,
) -> NavigationState:
    """Apply one dispatched request.

    ``length_of`` is only consulted for cursor steps so that the fresh length of
    the targeted collection is read at the moment the step happens.
    """

    if isinstance(request, SwitchView):
        return switch_view(state, request.view)
    if isinstance(request, StepCursor):
        slot = focused_slot(state)
        if slot is None:
            return state
        return step_cursor(state, slot, request.direction, length_of(slot, state))
    if isinstance(request, SwitchFocus):
        return switch_focus(state, request.focus)
    if isinstance(request, TogglePopup):
        return toggle_popup(state)
    if isinstance(request, Quit):
        return state
    raise TypeError(f"Unknown transition request: {request!r}")
