from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: None
EVENT_QUIT_REQUESTED = "quit_requested"    # payload: None


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_INPUT = "key_input"              # payload: key=int|str (curses key code or character)


# ============================================================================
# NAVIGATION
# ============================================================================
EVENT_VIEW_CHANGED = "view_changed"                # payload: previous_view=View, new_view=View
EVENT_NAVIGATION_CHANGED = "navigation_changed"    # payload: previous=NavigationState, state=NavigationState
