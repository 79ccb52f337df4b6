from __future__ import annotations

import logging
import webbrowser
from typing import Callable, Optional

from esper import World

from folio.components.card import CardBounds, PressCard
from folio.components.viewport import Viewport
from folio.events.bus import EVENT_LINK_OPENED, EVENT_MOUSE_PRESS, EventBus
from folio.ui.layout import PageLayout

logger = logging.getLogger(__name__)

# Left mouse button in arcade/pyglet.
LEFT_BUTTON = 1


class LinkSystem:
    """Opens the URL under a left click: press cards first, then text links."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        opener: Callable[[str], object] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._opener = opener or webbrowser.open
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None:
            return
        try:
            xf = float(x)
            yf = float(y)
            button_int = int(button) if button is not None else LEFT_BUTTON
        except (TypeError, ValueError):
            return
        if button_int != LEFT_BUTTON:
            return
        hit = self.link_at_point(xf, yf)
        if hit is None:
            return
        entity, url = hit
        self._open(url)
        self.event_bus.emit(EVENT_LINK_OPENED, entity=entity, url=url)

    def link_at_point(self, x: float, y: float) -> Optional[tuple[Optional[int], str]]:
        page = self._page()
        if page is None:
            return None
        viewport, layout = page
        page_x, page_y = viewport.to_page(x, y)
        for entity, (card, bounds) in self.world.get_components(PressCard, CardBounds):
            if bounds.width > 0 and bounds.height > 0 and bounds.contains(page_x, page_y):
                return entity, card.url
        for link in layout.links:
            if link.bounds.contains(page_x, page_y):
                return None, link.url
        return None

    def _open(self, url: str) -> None:
        logger.info("opening %s", url)
        try:
            self._opener(url)
        except (webbrowser.Error, OSError) as exc:
            logger.warning("could not open %s: %s", url, exc)

    def _page(self) -> Optional[tuple[Viewport, PageLayout]]:
        for _, (viewport, layout) in self.world.get_components(Viewport, PageLayout):
            return viewport, layout
        return None
