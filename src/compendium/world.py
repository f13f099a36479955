from esper import World

from compendium.components.navigation_state import NavigationState, View
from compendium.data_access.entity_store import EntityStore
from compendium.utils.state import set_navigation_state
from .events.bus import EventBus


def create_world(
    event_bus: EventBus,
    store: EntityStore,
    initial_view: View = View.HOME,
) -> World:
    world = World()
    setattr(world, "store", store)

    # Register the navigation state resource; transitions replace it.
    set_navigation_state(world, event_bus, NavigationState(view=initial_view))
    return world


def get_navigation_state(world: World) -> NavigationState | None:
    for _, state in world.get_component(NavigationState):
        return state
    return None
