from __future__ import annotations

from esper import World

from folio.components.viewport import Viewport
from folio.constants import SCROLL_STEP
from folio.events.bus import EVENT_MOUSE_SCROLL, EVENT_SCROLL_CHANGED, EventBus


class ScrollSystem:
    """Moves the page under the window on wheel input, clamped to the content."""

    def __init__(self, world: World, event_bus: EventBus, *, step: float = SCROLL_STEP) -> None:
        self.world = world
        self.event_bus = event_bus
        self.step = step
        self.event_bus.subscribe(EVENT_MOUSE_SCROLL, self.on_mouse_scroll)

    def on_mouse_scroll(self, sender, **payload) -> None:
        scroll_y = payload.get("scroll_y")
        if scroll_y is None:
            return
        try:
            amount = float(scroll_y)
        except (TypeError, ValueError):
            return
        # Wheel up (positive) moves toward the top of the page.
        self.scroll_by(-amount * self.step)

    def scroll_by(self, delta: float) -> float:
        viewport = self._viewport()
        if viewport is None:
            return 0.0
        previous = viewport.scroll
        viewport.scroll = min(max(0.0, previous + delta), viewport.max_scroll)
        if viewport.scroll != previous:
            self.event_bus.emit(EVENT_SCROLL_CHANGED, offset=viewport.scroll)
        return viewport.scroll

    def _viewport(self) -> Viewport | None:
        for _, viewport in self.world.get_component(Viewport):
            return viewport
        return None
