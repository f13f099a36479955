from __future__ import annotations

from esper import World

from compendium.components.navigation_state import NavigationState
from compendium.components.transition import Quit
from compendium.events.bus import EVENT_KEY_INPUT, EVENT_QUIT_REQUESTED, EventBus
from compendium.systems.input_dispatcher import Input, dispatch, translate_key
from compendium.systems.view_data_system import ViewDataSystem
from compendium.utils.logger import get_logger
from compendium.utils.navigation import apply_request
from compendium.utils.state import set_navigation_state

logger = get_logger(__name__)


class NavigationSystem:
    """Applies one transition per key event to the world's navigation state."""

    def __init__(self, world: World, event_bus: EventBus, view_data: ViewDataSystem) -> None:
        self.world = world
        self.event_bus = event_bus
        self.view_data = view_data
        self.event_bus.subscribe(EVENT_KEY_INPUT, self.on_key_input)

    def on_key_input(self, sender, **payload) -> None:
        key = payload.get("key")
        if key is None:
            return
        self.handle_input(translate_key(key))

    def handle_input(self, event: Input | None) -> None:
        """Dispatch a translated input event; unrecognized input is ignored."""
        state = self._get_navigation_state()
        if state is None or event is None:
            return
        request = dispatch(state, event)
        if request is None:
            return
        if isinstance(request, Quit):
            logger.info("Quit requested")
            self.event_bus.emit(EVENT_QUIT_REQUESTED)
            return
        new_state = apply_request(state, request, self.view_data.length_for)
        logger.debug("%s -> %s", request, new_state)
        set_navigation_state(self.world, self.event_bus, new_state)

    def _get_navigation_state(self) -> NavigationState | None:
        for _, state in self.world.get_component(NavigationState):
            return state
        return None
