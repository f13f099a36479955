import pytest

from compendium.components.cursor import Cursor
from compendium.components.detail_overlay import DetailOverlay, Focus
from compendium.components.navigation_state import CursorSlot, NavigationState, View
from compendium.components.transition import Quit, StepCursor, SwitchFocus, SwitchView, TogglePopup
from compendium.utils.navigation import (
    apply_request,
    focused_slot,
    step_cursor,
    switch_focus,
    switch_view,
    toggle_popup,
)


def _lengths(**by_slot):
    calls = []

    def length_of(slot, state):
        calls.append(slot)
        return by_slot.get(slot.name, 0)

    length_of.calls = calls
    return length_of


def test_initial_state_is_home_with_inactive_cursors():
    state = NavigationState()
    assert state.view == View.HOME
    assert state.roster == Cursor()
    assert state.overlay.popup_shown is False
    assert focused_slot(state) is None


@pytest.mark.parametrize(
    "view, slot",
    [
        (View.HOME, None),
        (View.CHARACTER_DETAIL, CursorSlot.ROSTER),
        (View.SKILL_BROWSER, CursorSlot.SKILLS),
        (View.ITEM_BROWSER, CursorSlot.ITEMS),
        (View.LORE, CursorSlot.LORE),
    ],
)
def test_focused_slot_per_view(view, slot):
    assert focused_slot(NavigationState(view=view)) == slot


def test_focus_moves_character_view_to_skill_cursor():
    state = switch_focus(NavigationState(view=View.CHARACTER_DETAIL), Focus.SKILLS)
    assert focused_slot(state) == CursorSlot.ROSTER_SKILLS
    assert focused_slot(switch_focus(state, Focus.ROSTER)) == CursorSlot.ROSTER


def test_switch_view_is_unconditional_and_keeps_cursors():
    state = NavigationState(skills=Cursor(index=2, length=4))
    state = switch_view(state, View.ITEM_BROWSER)
    state = switch_view(state, View.SKILL_BROWSER)
    assert state.view == View.SKILL_BROWSER
    assert state.skills == Cursor(index=2, length=4)


def test_switch_to_same_view_returns_same_state():
    state = NavigationState(view=View.LORE)
    assert switch_view(state, View.LORE) is state


def test_leaving_character_view_closes_popup_but_keeps_skill_cursor():
    overlay = DetailOverlay(popup_shown=True, focus=Focus.SKILLS, skill_cursor=Cursor(index=1, length=2))
    state = NavigationState(view=View.CHARACTER_DETAIL, overlay=overlay)
    state = switch_view(state, View.HOME)
    assert state.overlay.popup_shown is False
    assert state.overlay.skill_cursor == Cursor(index=1, length=2)
    assert state.overlay.focus == Focus.SKILLS


def test_secondary_cursor_steps_leave_primary_untouched():
    state = NavigationState(view=View.CHARACTER_DETAIL, roster=Cursor(index=2, length=3))
    state = step_cursor(state, CursorSlot.ROSTER_SKILLS, 1, 4)
    state = step_cursor(state, CursorSlot.ROSTER_SKILLS, 1, 4)
    assert state.overlay.skill_cursor.index == 2
    assert state.roster == Cursor(index=2, length=3)


def test_primary_cursor_steps_leave_secondary_untouched():
    overlay = DetailOverlay(skill_cursor=Cursor(index=3, length=4))
    state = NavigationState(view=View.CHARACTER_DETAIL, overlay=overlay)
    state = step_cursor(state, CursorSlot.ROSTER, -1, 3)
    assert state.roster.index == 2
    assert state.overlay.skill_cursor == Cursor(index=3, length=4)


def test_lore_offset_clamps_without_wrapping():
    state = NavigationState(view=View.LORE)
    state = step_cursor(state, CursorSlot.LORE, -1, 5)
    assert state.lore_offset == 0
    for _ in range(10):
        state = step_cursor(state, CursorSlot.LORE, 1, 5)
    assert state.lore_offset == 4
    assert step_cursor(state, CursorSlot.LORE, 1, 0).lore_offset == 0


def test_toggle_popup_flips_flag():
    state = NavigationState(view=View.CHARACTER_DETAIL)
    assert toggle_popup(state).overlay.popup_shown is True
    assert toggle_popup(toggle_popup(state)).overlay.popup_shown is False


def test_apply_request_reads_length_only_for_steps():
    length_of = _lengths(SKILLS=3)
    state = NavigationState()
    state = apply_request(state, SwitchView(View.SKILL_BROWSER), length_of)
    assert length_of.calls == []
    state = apply_request(state, StepCursor(-1), length_of)
    assert length_of.calls == [CursorSlot.SKILLS]
    assert state.skills == Cursor(index=2, length=3)


def test_apply_request_step_at_home_is_ignored():
    length_of = _lengths()
    state = NavigationState()
    assert apply_request(state, StepCursor(1), length_of) is state
    assert length_of.calls == []


def test_apply_request_focus_popup_and_quit():
    length_of = _lengths()
    state = NavigationState(view=View.CHARACTER_DETAIL)
    state = apply_request(state, SwitchFocus(Focus.SKILLS), length_of)
    state = apply_request(state, TogglePopup(), length_of)
    assert state.overlay.focus == Focus.SKILLS
    assert state.overlay.popup_shown is True
    assert apply_request(state, Quit(), length_of) is state


def test_apply_request_rejects_unknown_requests():
    with pytest.raises(TypeError):
        apply_request(NavigationState(), object(), _lengths())
