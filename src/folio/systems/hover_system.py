from __future__ import annotations

from typing import Optional

from esper import World

from folio.components.card import CardBounds, PressCard
from folio.components.pointer_hover import PointerHover
from folio.components.viewport import Viewport
from folio.events.bus import (
    EVENT_LAYOUT_CHANGED,
    EVENT_MOUSE_EXIT,
    EVENT_MOUSE_MOVE,
    EVENT_POINTER_ENTER,
    EVENT_POINTER_LEAVE,
    EVENT_SCROLL_CHANGED,
    EventBus,
)
from folio.ui.layout import PageLayout


class HoverSystem:
    """Hit-tests the pointer against press cards and project rows.

    Card changes are reported as enter/leave transitions; both card and row
    are mirrored into the page's ``PointerHover`` for hover backgrounds.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self._hover_entity: Optional[int] = None
        self._mouse: tuple[float, float] | None = None
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_EXIT, self.on_mouse_exit)
        # Content moving under a still pointer changes the hovered card too.
        self.event_bus.subscribe(EVENT_SCROLL_CHANGED, self.on_geometry_changed)
        self.event_bus.subscribe(EVENT_LAYOUT_CHANGED, self.on_geometry_changed)

    @property
    def hovered(self) -> Optional[int]:
        return self._hover_entity

    def on_mouse_move(self, sender, **payload):
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        try:
            self._mouse = (float(x), float(y))
        except (TypeError, ValueError):
            return
        self._update_target()

    def on_mouse_exit(self, sender, **payload):
        self._mouse = None
        self._set_target(None)
        self._set_row(None)

    def on_geometry_changed(self, sender, **payload):
        if self._mouse is not None:
            self._update_target()

    def card_at_point(self, x: float, y: float) -> Optional[int]:
        viewport = self._viewport()
        if viewport is None:
            return None
        page_x, page_y = viewport.to_page(x, y)
        for entity, (_, bounds) in self.world.get_components(PressCard, CardBounds):
            if bounds.width > 0 and bounds.height > 0 and bounds.contains(page_x, page_y):
                return entity
        return None

    def project_row_at_point(self, x: float, y: float) -> Optional[int]:
        for _, (viewport, layout) in self.world.get_components(Viewport, PageLayout):
            page_x, page_y = viewport.to_page(x, y)
            for index, bounds in enumerate(layout.project_rows):
                if bounds.contains(page_x, page_y):
                    return index
        return None

    def _update_target(self) -> None:
        if self._mouse is None:
            return
        self._set_target(self.card_at_point(*self._mouse))
        self._set_row(self.project_row_at_point(*self._mouse))

    def _set_target(self, entity: Optional[int]) -> None:
        if entity == self._hover_entity:
            return
        previous = self._hover_entity
        self._hover_entity = entity
        for _, hover in self.world.get_component(PointerHover):
            hover.card = entity
        if previous is not None:
            self.event_bus.emit(EVENT_POINTER_LEAVE, entity=previous)
        if entity is not None:
            self.event_bus.emit(EVENT_POINTER_ENTER, entity=entity)

    def _set_row(self, index: Optional[int]) -> None:
        for _, hover in self.world.get_component(PointerHover):
            hover.project_row = index

    def _viewport(self) -> Viewport | None:
        for _, viewport in self.world.get_component(Viewport):
            return viewport
        return None
