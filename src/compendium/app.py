"""Command-line entry point and event loop for the compendium viewer.

Sets up logging, the entity store, the ECS world, the event bus and the
systems, then drives one render pass per queued terminal event.
"""
from __future__ import annotations

import argparse
import curses
import queue
import sys
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from compendium.components.navigation_state import NavigationState
from compendium.components.view_data import ViewData
from compendium.constants import DEFAULT_DATA_DIR, DEFAULT_LOG_FILE, TICK_RATE_MS
from compendium.data_access.entity_store import EntityStore
from compendium.data_access.errors import CompendiumDataError
from compendium.events.bus import EVENT_KEY_INPUT, EVENT_QUIT_REQUESTED, EVENT_TICK, EventBus
from compendium.rendering.terminal_renderer import TerminalRenderer
from compendium.systems.navigation_system import NavigationSystem
from compendium.systems.view_data_system import ViewDataSystem
from compendium.terminal.input_sampler import InputSampler, InputSamplerError, TerminalEvent
from compendium.terminal.session import TerminalSession
from compendium.utils.logger import DEFAULT_LEVEL, get_logger, setup_logging
from compendium.world import create_world, get_navigation_state

logger = get_logger(__name__)


@dataclass(slots=True)
class AppConfig:
    data_dir: Path = DEFAULT_DATA_DIR
    tick_rate_ms: int = TICK_RATE_MS
    strict: bool = False
    log_file: str | None = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LEVEL


def parse_args(argv: Sequence[str] | None = None) -> AppConfig:
    parser = argparse.ArgumentParser(
        prog="compendium",
        description="Browse characters, skills and equipment from JSON data files.",
    )
    parser.add_argument("--data-dir", type=Path, default=DEFAULT_DATA_DIR, help="directory holding the JSON tables")
    parser.add_argument("--tick-ms", type=int, default=TICK_RATE_MS, help="tick interval in milliseconds")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="abort on the first unreadable data file instead of showing it empty",
    )
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE, help="log destination (curses owns the terminal)")
    parser.add_argument("--log-level", default=DEFAULT_LEVEL, help="DEBUG, INFO, WARNING or ERROR")
    args = parser.parse_args(argv)
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")
    return AppConfig(
        data_dir=args.data_dir,
        tick_rate_ms=args.tick_ms,
        strict=args.strict,
        log_file=args.log_file or None,
        log_level=args.log_level,
    )


class CompendiumApp:
    def __init__(self, config: AppConfig, store: EntityStore | None = None) -> None:
        self.config = config
        self.event_bus = EventBus()
        self.store = store or EntityStore(config.data_dir)
        self.world = create_world(self.event_bus, self.store)
        self.view_data_system = ViewDataSystem(self.world, strict=config.strict)
        self.navigation_system = NavigationSystem(self.world, self.event_bus, self.view_data_system)
        self.running = True
        self.event_bus.subscribe(EVENT_QUIT_REQUESTED, self._on_quit_requested)

    def _on_quit_requested(self, sender, **payload) -> None:
        self.running = False

    def handle_event(self, event: TerminalEvent) -> None:
        """Apply at most one transition for a drained terminal event."""
        if event.kind == "input":
            self.event_bus.emit(EVENT_KEY_INPUT, key=event.key)
        elif event.kind == "tick":
            self.event_bus.emit(EVENT_TICK)
        else:
            self.running = False
            if event.error is not None:
                raise InputSamplerError(f"input sampler failed: {event.error}") from event.error
            logger.warning("Input sampler closed; shutting down")

    def frame(self) -> tuple[NavigationState, ViewData]:
        state = get_navigation_state(self.world)
        if state is None:
            raise RuntimeError("World has no navigation state")
        return state, self.view_data_system.build(state)

    def run_loop(self, events: "queue.Queue[TerminalEvent]", draw: Callable[[NavigationState, ViewData], None]) -> None:
        """Render, then drain events one at a time until quit."""
        draw(*self.frame())
        while self.running:
            self.handle_event(events.get())
            if not self.running:
                break
            draw(*self.frame())

    def run(self) -> None:
        logger.info("Starting viewer on %s", self.store.data_dir)
        with TerminalSession() as stdscr:
            terminal_lock = threading.Lock()
            renderer = TerminalRenderer(stdscr, terminal_lock)
            input_window = curses.newwin(1, 1, 0, 0)
            input_window.keypad(True)
            events: "queue.Queue[TerminalEvent]" = queue.Queue()
            sampler = InputSampler(
                input_window, events, tick_rate_ms=self.config.tick_rate_ms, lock=terminal_lock
            )
            sampler.start()
            try:
                self.run_loop(events, renderer.draw)
            finally:
                sampler.stop()
        logger.info("Viewer closed")


def main(argv: Sequence[str] | None = None) -> int:
    config = parse_args(argv)
    setup_logging(config.log_level, config.log_file)
    app = CompendiumApp(config)
    try:
        app.run()
    except (CompendiumDataError, InputSamplerError) as exc:
        logger.error("Aborting: %s", exc)
        print(f"compendium: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
