from __future__ import annotations

from esper import World

from folio.components.typewriter_text import TypewriterText
from folio.events.bus import EVENT_TICK, EVENT_TYPING_COMPLETE, EventBus


class TypewriterSystem:
    """Reveals greeting text one character per interval, then stops."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            dt = 1/60
        for ent, text in self.world.get_component(TypewriterText):
            if text.finished:
                continue
            text.elapsed += dt
            interval = text.interval if text.interval > 0 else 0.0
            while not text.finished and text.elapsed >= interval:
                text.elapsed -= interval
                if text.visible_count < len(text.full_text):
                    text.visible_count += 1
                if text.visible_count >= len(text.full_text):
                    text.finished = True
                    text.elapsed = 0.0
                    self.event_bus.emit(EVENT_TYPING_COMPLETE, entity=ent, text=text.full_text)
