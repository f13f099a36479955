"""Background input sampling for the render loop."""
from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from compendium.constants import KEY_POLL_MS, TICK_RATE_MS
from compendium.utils.logger import get_logger

logger = get_logger(__name__)

NO_KEY = -1


class InputSamplerError(RuntimeError):
    """Raised on the consuming thread when the sampler thread died."""


@dataclass(frozen=True, slots=True)
class TerminalEvent:
    """A key read from the terminal, a payload-free tick, or sampler shutdown.

    A ``closed`` event carries the exception that stopped the sampler, if any.
    """

    kind: Literal["input", "tick", "closed"]
    key: Optional[int] = None
    error: Optional[BaseException] = None


TICK = TerminalEvent(kind="tick")
CLOSED = TerminalEvent(kind="closed")


class InputSampler:
    """Polls a curses window on its own thread and feeds a single event queue.

    curses is not thread-safe, so every call into the window happens under
    ``lock``, the same lock the renderer holds while drawing. The lock is only
    taken for a non-blocking ``getch``; the wait between polls happens outside
    it. A key is queued as an ``input`` event; once the tick interval has
    elapsed a ``tick`` event is queued so the consumer renders even without
    user input. The sampler never touches navigation state.
    """

    def __init__(
        self,
        window,
        events: "queue.Queue[TerminalEvent]",
        *,
        tick_rate_ms: int = TICK_RATE_MS,
        poll_ms: int = KEY_POLL_MS,
        lock: threading.Lock | None = None,
        clock: Callable[[], float] | None = None,
        wait: Callable[[float], object] | None = None,
    ) -> None:
        self._window = window
        self._events = events
        self._tick_rate = max(1, int(tick_rate_ms)) / 1000.0
        self._poll_interval = max(1, int(poll_ms)) / 1000.0
        self._lock = lock or threading.Lock()
        self._clock = clock or time.monotonic
        self._last_tick = self._clock()
        self._stop = threading.Event()
        self._wait = wait or self._stop.wait
        self._thread: threading.Thread | None = None

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    def start(self) -> None:
        if self._thread is not None:
            return
        self._last_tick = self._clock()
        self._thread = threading.Thread(target=self._run, name="input-sampler", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout if timeout is not None else self._tick_rate * 5)
        self._thread = None

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def poll_once(self) -> None:
        """Read one pending key, or wait briefly, then queue a tick if one is due."""

        with self._lock:
            self._window.timeout(0)
            key = self._window.getch()

        if key != NO_KEY:
            self._events.put(TerminalEvent(kind="input", key=key))
        else:
            remaining = self._tick_rate - (self._clock() - self._last_tick)
            if remaining > 0:
                self._wait(min(remaining, self._poll_interval))

        if self._clock() - self._last_tick >= self._tick_rate:
            self._events.put(TICK)
            self._last_tick = self._clock()

    def _run(self) -> None:
        logger.debug("Input sampler started")
        try:
            while not self._stop.is_set():
                self.poll_once()
        except Exception as exc:
            logger.exception("Input sampler failed")
            self._events.put(TerminalEvent(kind="closed", error=exc))
            return
        logger.debug("Input sampler stopped")
