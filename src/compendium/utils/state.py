from __future__ import annotations

from esper import World

from compendium.components.navigation_state import NavigationState
from compendium.events.bus import EVENT_NAVIGATION_CHANGED, EVENT_VIEW_CHANGED, EventBus


def set_navigation_state(world: World, event_bus: EventBus, state: NavigationState) -> None:
    """Replace the navigation resource and emit change events when it differs."""

    previous: NavigationState | None = None
    for entity, current in world.get_component(NavigationState):
        previous = current
        if current == state:
            return
        world.add_component(entity, state)
        break
    else:
        # No existing NavigationState component; create a new one.
        world.create_entity(state)

    event_bus.emit(EVENT_NAVIGATION_CHANGED, previous=previous, state=state)
    if previous is None or previous.view != state.view:
        event_bus.emit(
            EVENT_VIEW_CHANGED,
            previous_view=previous.view if previous is not None else None,
            new_view=state.view,
        )
