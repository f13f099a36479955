"""Re-read collections and project them into per-view frame data."""
from __future__ import annotations

from typing import List

from esper import World

from compendium.components.character import Character
from compendium.components.equipment import ItemEntry
from compendium.components.navigation_state import CursorSlot, NavigationState, View
from compendium.components.view_data import (
    CharacterDetailData,
    HomeData,
    ItemBrowserData,
    LoreData,
    SkillBrowserData,
    ViewData,
)
from compendium.data_access.entity_store import EntityStore
from compendium.data_access.errors import CompendiumDataError
from compendium.utils.logger import get_logger
from compendium.utils.projection import project

logger = get_logger(__name__)


class ViewDataSystem:
    """Builds the data each view needs for one render pass.

    Nothing is cached: every call reads the store again. Read failures follow a
    single policy for all collections. By default a failing collection is
    treated as empty and its message is reported with the frame; with
    ``strict`` the error propagates to the caller.
    """

    def __init__(self, world: World, store: EntityStore | None = None, *, strict: bool = False) -> None:
        self.world = world
        self.store: EntityStore = store if store is not None else getattr(world, "store")
        self.strict = strict

    # ------------------------------------------------------------------
    # Frame data
    # ------------------------------------------------------------------
    def build(self, state: NavigationState) -> ViewData:
        errors: List[str] = []
        if state.view == View.CHARACTER_DETAIL:
            return self._character_detail(state, errors)
        if state.view == View.SKILL_BROWSER:
            skills = self._load("skills", errors)
            return SkillBrowserData(
                skills=skills,
                selected_index=state.skills.resolved(len(skills)),
                errors=tuple(errors),
            )
        if state.view == View.ITEM_BROWSER:
            items = self._items(errors)
            return ItemBrowserData(
                items=items,
                selected_index=state.items.resolved(len(items)),
                errors=tuple(errors),
            )
        if state.view == View.LORE:
            lines = self._lore_lines(errors)
            offset = min(state.lore_offset, max(len(lines) - 1, 0))
            return LoreData(lines=lines, offset=offset, errors=tuple(errors))
        return HomeData()

    def _character_detail(self, state: NavigationState, errors: List[str]) -> CharacterDetailData:
        roster = self._load("characters", errors)
        roster_index = state.roster.resolved(len(roster))
        character = roster[roster_index] if roster else None

        skill_table = self._load("skills", errors)
        weapon_table = self._load("weapons", errors)
        armor_table = self._load("armor", errors)
        gear_table = self._load("gear", errors)

        if character is None:
            skills = weapons = armor = gear = ()
        else:
            skills = project(character.skill_ids, skill_table)
            weapons = project(character.weapon_ids, weapon_table)
            armor = project(character.armor_ids, armor_table)
            gear = project(character.gear_ids, gear_table)

        overlay = state.overlay
        skill_index = overlay.skill_cursor.resolved(len(skills))
        popup_skill = skills[skill_index] if overlay.popup_shown and skills else None
        return CharacterDetailData(
            roster=roster,
            roster_index=roster_index,
            character=character,
            skills=skills,
            weapons=weapons,
            armor=armor,
            gear=gear,
            skill_index=skill_index,
            focus=overlay.focus,
            popup_shown=overlay.popup_shown,
            popup_skill=popup_skill,
            errors=tuple(errors),
        )

    # ------------------------------------------------------------------
    # Fresh lengths for cursor steps
    # ------------------------------------------------------------------
    def length_for(self, slot: CursorSlot, state: NavigationState) -> int:
        errors: List[str] = []
        if slot == CursorSlot.ROSTER:
            return len(self._load("characters", errors))
        if slot == CursorSlot.ROSTER_SKILLS:
            character = self._selected_character(state, errors)
            if character is None:
                return 0
            return len(project(character.skill_ids, self._load("skills", errors)))
        if slot == CursorSlot.SKILLS:
            return len(self._load("skills", errors))
        if slot == CursorSlot.ITEMS:
            return len(self._items(errors))
        return len(self._lore_lines(errors))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _selected_character(self, state: NavigationState, errors: List[str]) -> Character | None:
        roster = self._load("characters", errors)
        if not roster:
            return None
        return roster[state.roster.resolved(len(roster))]

    def _items(self, errors: List[str]) -> tuple:
        entries: List[ItemEntry] = []
        for collection, kind in (("weapons", "weapon"), ("armor", "armor"), ("gear", "gear")):
            entries.extend(ItemEntry(kind=kind, record=record) for record in self._load(collection, errors))
        return tuple(entries)

    def _lore_lines(self, errors: List[str]) -> tuple:
        try:
            text = self.store.load_text("lore")
        except CompendiumDataError as exc:
            self._report(exc, errors)
            return ()
        return tuple(line.strip() for line in text.strip("\n").splitlines())

    def _load(self, collection: str, errors: List[str]) -> tuple:
        try:
            return self.store.load(collection)
        except CompendiumDataError as exc:
            self._report(exc, errors)
            return ()

    def _report(self, exc: CompendiumDataError, errors: List[str]) -> None:
        if self.strict:
            raise exc
        logger.warning("Read failed, showing empty collection: %s", exc)
        errors.append(str(exc))
