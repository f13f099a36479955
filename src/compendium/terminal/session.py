from __future__ import annotations

import curses

from compendium.utils.logger import get_logger

logger = get_logger(__name__)


class TerminalSession:
    """Context manager owning curses raw mode for the lifetime of the viewer.

    The terminal is acquired once in ``__enter__`` and restored exactly once,
    whether the body returns normally or raises.
    """

    def __init__(self) -> None:
        self.stdscr = None
        self._active = False

    def __enter__(self):
        stdscr = curses.initscr()
        self._active = True
        try:
            curses.noecho()
            curses.cbreak()
            stdscr.keypad(True)
            self._configure_display()
        except BaseException:
            self.restore(stdscr)
            raise
        self.stdscr = stdscr
        logger.debug("Terminal raw mode acquired")
        return stdscr

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore(self.stdscr)
        return False

    @property
    def active(self) -> bool:
        return self._active

    def restore(self, stdscr) -> None:
        if not self._active:
            return
        self._active = False
        if stdscr is not None:
            stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.stdscr = None
        logger.debug("Terminal restored")

    @staticmethod
    def _configure_display() -> None:
        # Cursor visibility and colors are cosmetic; some terminals support neither.
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        if curses.has_colors():
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                logger.debug("Terminal has no default colors")
