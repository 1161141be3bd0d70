from __future__ import annotations

from typing import Type, TypeVar

from esper import World

from recall.components.round_state import Phase, RoundState
from recall.events.bus import EVENT_PHASE_CHANGED, EventBus

C = TypeVar("C")


def round_entity(world: World) -> int:
    """Entity id that carries the round singletons."""
    for entity, _ in world.get_component(RoundState):
        return entity
    raise LookupError("World has no RoundState entity; build it with create_world()")


def round_component(world: World, component_type: Type[C]) -> C:
    return world.component_for_entity(round_entity(world), component_type)


def optional_component(world: World, component_type: Type[C]) -> C | None:
    for _, component in world.get_component(component_type):
        return component
    return None


def set_phase(world: World, event_bus: EventBus, phase: Phase) -> bool:
    """Update the round phase and emit a change event when it differs."""

    state = round_component(world, RoundState)
    previous = state.phase
    if previous == phase:
        return False
    state.phase = phase
    event_bus.emit(EVENT_PHASE_CHANGED, previous_phase=previous, new_phase=phase)
    return True
