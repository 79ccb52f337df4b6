from __future__ import annotations

from esper import World

from folio.animation.hover_reveal import HoverRevealAnimator
from folio.events.bus import EVENT_POINTER_ENTER, EVENT_POINTER_LEAVE, EventBus


class HoverRevealSystem:
    """Forwards card pointer transitions to the card's own animator."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_POINTER_ENTER, self.on_pointer_enter)
        event_bus.subscribe(EVENT_POINTER_LEAVE, self.on_pointer_leave)

    def on_pointer_enter(self, sender, **kwargs):
        animator = self._animator(kwargs.get('entity'))
        if animator is not None:
            animator.on_pointer_enter()

    def on_pointer_leave(self, sender, **kwargs):
        animator = self._animator(kwargs.get('entity'))
        if animator is not None:
            animator.on_pointer_leave()

    def _animator(self, entity) -> HoverRevealAnimator | None:
        if entity is None:
            return None
        try:
            return self.world.component_for_entity(entity, HoverRevealAnimator)
        except KeyError:
            # Cards mounted without a surface have no animator.
            return None
