from __future__ import annotations

from esper import World

from folio.components.section_reveal import SectionReveal
from folio.events.bus import EVENT_TICK, EventBus


def ease_out_cubic(p: float) -> float:
    return 1.0 - (1.0 - p) ** 3


class SectionRevealSystem:
    """Advances the staggered fade/slide-in of page sections."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.use_easing = True
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            dt = 1/60
        for _, reveal in self.world.get_component(SectionReveal):
            if reveal.linear >= 1.0:
                continue
            reveal.elapsed += dt
            active = reveal.elapsed - reveal.delay
            if active <= 0.0:
                continue
            if reveal.duration <= 0.0:
                reveal.linear = 1.0
            else:
                reveal.linear = min(1.0, active / reveal.duration)
            reveal.alpha = ease_out_cubic(reveal.linear) if self.use_easing else reveal.linear

    def reveal_for(self, name: str) -> SectionReveal | None:
        for _, reveal in self.world.get_component(SectionReveal):
            if reveal.name == name:
                return reveal
        return None
