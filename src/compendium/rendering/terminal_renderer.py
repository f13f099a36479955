"""curses renderer drawing one full frame per call."""
from __future__ import annotations

import curses
import textwrap
import threading
from typing import Iterable, List, Sequence

from compendium.components.detail_overlay import Focus
from compendium.components.equipment import Armor, Gear, ItemEntry, Weapon
from compendium.components.navigation_state import NavigationState, View
from compendium.components.view_data import (
    CharacterDetailData,
    HomeData,
    ItemBrowserData,
    LoreData,
    SkillBrowserData,
    ViewData,
)
from compendium.constants import APP_TITLE, FOOTER_TEXT, MENU_TITLES

_MENU_VIEWS = (View.HOME, View.CHARACTER_DETAIL, View.SKILL_BROWSER, View.ITEM_BROWSER, View.LORE, None)
_ITEM_TAGS = {"weapon": "W", "armor": "A", "gear": "G"}
LIST_PANE_PCT = 0.25
LIST_PANE_MIN = 16


class TerminalRenderer:
    """Draws the menu bar, the active view, the skill popup and the status line.

    ``lock`` is shared with the input sampler; a whole frame is drawn while
    holding it.
    """

    def __init__(self, stdscr, lock: threading.Lock | None = None) -> None:
        self.stdscr = stdscr
        self.lock = lock or threading.Lock()

    def draw(self, state: NavigationState, data: ViewData) -> None:
        with self.lock:
            self._draw_frame(state, data)

    def _draw_frame(self, state: NavigationState, data: ViewData) -> None:
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()
        if height < 6 or width < 20:
            self._put(0, 0, "Terminal too small", curses.A_BOLD)
            self.stdscr.refresh()
            return

        self._draw_menu(state.view, width)
        top, bottom = 2, height - 3
        if isinstance(data, CharacterDetailData):
            self._draw_character(data, top, bottom, width)
        elif isinstance(data, SkillBrowserData):
            self._draw_skills(data, top, bottom, width)
        elif isinstance(data, ItemBrowserData):
            self._draw_items(data, top, bottom, width)
        elif isinstance(data, LoreData):
            self._draw_lore(data, top, bottom, width)
        else:
            self._draw_home(data, top, bottom, width)
        self._draw_footer(data.errors, height, width)
        if isinstance(data, CharacterDetailData) and data.popup_shown:
            self._draw_skill_popup(data, top, bottom, width)
        else:
            self.stdscr.refresh()

    # ------------------------------------------------------------------
    # Chrome
    # ------------------------------------------------------------------
    def _draw_menu(self, active: View, width: int) -> None:
        x = 1
        for title, view in zip(MENU_TITLES, _MENU_VIEWS):
            attr = curses.A_REVERSE if view == active else curses.A_NORMAL
            self._put(0, x, title[0], attr | curses.A_UNDERLINE | curses.A_BOLD)
            self._put(0, x + 1, title[1:], attr)
            x += len(title) + 3
            if x >= width:
                break
        self.stdscr.hline(1, 0, curses.ACS_HLINE, width)

    def _draw_footer(self, errors: Sequence[str], height: int, width: int) -> None:
        self.stdscr.hline(height - 2, 0, curses.ACS_HLINE, width)
        if errors:
            message = f"{len(errors)} read error(s): {errors[0]}"
            self._put(height - 1, 0, message, curses.A_BOLD)
        else:
            self._put(height - 1, 0, FOOTER_TEXT, curses.A_DIM)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def _draw_home(self, data: HomeData, top: int, bottom: int, width: int) -> None:
        lines = (
            "Welcome to",
            APP_TITLE,
            "",
            "Press 'c' for characters, 's' for skills, 'i' for items,",
            "'l' for lore, 'h' to come home and 'q' to quit.",
        )
        y = top + max(0, (bottom - top - len(lines)) // 2)
        for offset, line in enumerate(lines):
            attr = curses.A_BOLD if line == APP_TITLE else curses.A_NORMAL
            self._put(y + offset, max(0, (width - len(line)) // 2), line, attr)

    def _draw_character(self, data: CharacterDetailData, top: int, bottom: int, width: int) -> None:
        split = self._list_width(width)
        roster_focused = data.focus == Focus.ROSTER
        self._draw_list(
            [character.name for character in data.roster],
            data.roster_index,
            top,
            bottom,
            0,
            split,
            title="Characters",
            focused=roster_focused,
        )
        x = split + 2
        detail_width = width - x - 1
        character = data.character
        if character is None:
            self._put(top, x, "No characters loaded.")
            return

        lines = [
            f"{character.name}  (id {character.id})",
            f"Level {character.level} {character.character_class}".rstrip(),
        ]
        if character.background:
            lines.append(f"Background: {character.background}")
        if character.attributes:
            lines.append("Attributes: " + _pairs(character.attributes.items()))
        if character.skill_ratings:
            lines.append("Skill ratings: " + _pairs(character.skill_ratings.items()))
        y = top
        for line in lines:
            self._put(y, x, line[:detail_width], curses.A_BOLD if y == top else curses.A_NORMAL)
            y += 1
        y += 1

        skills_bottom = min(bottom, y + 1 + max(len(data.skills), 1))
        self._draw_list(
            [skill.name for skill in data.skills],
            data.skill_index,
            y,
            skills_bottom,
            x,
            detail_width,
            title="Skills",
            focused=not roster_focused,
        )
        y = skills_bottom + 1
        for label, records in (("Weapons", data.weapons), ("Armor", data.armor), ("Gear", data.gear)):
            if y >= bottom:
                break
            names = ", ".join(record.name for record in records) or "-"
            self._put(y, x, f"{label}: {names}"[:detail_width])
            y += 1

    def _draw_skill_popup(self, data: CharacterDetailData, top: int, bottom: int, width: int) -> None:
        skill = data.popup_skill
        box_width = max(20, min(60, width - 8))
        if skill is None:
            title, body = "Skill", ["This character has no skills."]
        else:
            title = skill.name
            body = [f"Cost: {skill.cost}"]
            if skill.attribute:
                body.append(f"Attribute: {skill.attribute}")
            body.append("")
            body.extend(textwrap.wrap(skill.description, box_width - 4) or ["(no description)"])
        box_height = min(len(body) + 2, bottom - top)
        if box_height < 3:
            self.stdscr.refresh()
            return
        y0 = top + max(0, (bottom - top - box_height) // 2)
        x0 = max(0, (width - box_width) // 2)
        window = curses.newwin(box_height, box_width, y0, x0)
        window.erase()
        window.box()
        try:
            window.addnstr(0, 2, f" {title} ", box_width - 4, curses.A_BOLD)
            for row, line in enumerate(body[: box_height - 2], start=1):
                window.addnstr(row, 2, line, box_width - 4)
        except curses.error:
            # Text clipped by a window narrower than requested.
            pass
        self.stdscr.noutrefresh()
        window.noutrefresh()
        curses.doupdate()

    def _draw_skills(self, data: SkillBrowserData, top: int, bottom: int, width: int) -> None:
        split = self._list_width(width)
        self._draw_list([skill.name for skill in data.skills], data.selected_index, top, bottom, 0, split, title="Skills")
        skill = data.selected
        x = split + 2
        if skill is None:
            self._put(top, x, "No skills loaded.")
            return
        lines = [f"{skill.name}  (id {skill.id})", f"Cost: {skill.cost}"]
        if skill.attribute:
            lines.append(f"Attribute: {skill.attribute}")
        lines.append("")
        lines.extend(textwrap.wrap(skill.description, max(10, width - x - 1)))
        self._draw_lines(lines, top, bottom, x, width - x - 1)

    def _draw_items(self, data: ItemBrowserData, top: int, bottom: int, width: int) -> None:
        split = self._list_width(width)
        labels = [f"[{_ITEM_TAGS[entry.kind]}] {entry.name}" for entry in data.items]
        self._draw_list(labels, data.selected_index, top, bottom, 0, split, title="Items")
        entry = data.selected
        x = split + 2
        if entry is None:
            self._put(top, x, "No items loaded.")
            return
        self._draw_lines(_item_lines(entry, max(10, width - x - 1)), top, bottom, x, width - x - 1)

    def _draw_lore(self, data: LoreData, top: int, bottom: int, width: int) -> None:
        if not data.lines:
            self._put(top, 1, "No lore available.")
            return
        visible = data.lines[data.offset : data.offset + (bottom - top)]
        self._draw_lines(visible, top, bottom, 1, width - 2)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------
    def _draw_list(
        self,
        labels: Sequence[str],
        selected: int,
        top: int,
        bottom: int,
        x: int,
        width: int,
        *,
        title: str,
        focused: bool = True,
    ) -> None:
        self._put(top, x, title[:width], curses.A_BOLD | curses.A_UNDERLINE)
        rows = max(0, bottom - top - 1)
        if not labels or rows == 0:
            self._put(top + 1, x, "(empty)"[:width], curses.A_DIM)
            return
        # Keep the selection visible when the list is taller than the pane.
        first = max(0, selected - rows + 1)
        for row, label in enumerate(labels[first : first + rows]):
            index = first + row
            attr = curses.A_NORMAL
            if index == selected:
                attr = curses.A_REVERSE if focused else curses.A_BOLD
            self._put(top + 1 + row, x, label[:width].ljust(width), attr)

    def _draw_lines(self, lines: Iterable[str], top: int, bottom: int, x: int, width: int) -> None:
        for y, line in zip(range(top, bottom), lines):
            self._put(y, x, line[:width])

    def _put(self, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
        height, width = self.stdscr.getmaxyx()
        if y < 0 or y >= height or x < 0 or x >= width:
            return
        try:
            self.stdscr.addnstr(y, x, text, width - x - 1, attr)
        except curses.error:
            # Writing the bottom-right cell reports an error after drawing.
            pass

    @staticmethod
    def _list_width(width: int) -> int:
        return max(LIST_PANE_MIN, int(width * LIST_PANE_PCT))


def _pairs(items) -> str:
    return ", ".join(f"{name} {value}" for name, value in items)


def _item_lines(entry: ItemEntry, wrap_width: int) -> List[str]:
    record = entry.record
    lines = [f"{record.name}  ({entry.kind}, id {record.id})", f"Cost: {record.cost}"]
    if isinstance(record, Weapon):
        lines.append(f"Damage: {record.damage}  Crit: {record.crit}  Range: {record.range or '-'}")
    elif isinstance(record, Armor):
        lines.append(f"Armor rating: {record.rating}")
    elif isinstance(record, Gear) and record.bonus:
        lines.append(f"Bonus: {record.bonus}")
    lines.append("")
    lines.extend(textwrap.wrap(record.description, wrap_width))
    return lines
