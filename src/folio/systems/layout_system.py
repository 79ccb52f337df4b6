from __future__ import annotations

from typing import Any

from esper import World

from folio.animation.hover_reveal import HoverRevealAnimator
from folio.components.card import CardBounds, PressCard
from folio.components.viewport import Viewport
from folio.content import PortfolioContent
from folio.events.bus import EVENT_LAYOUT_CHANGED, EVENT_WINDOW_RESIZE, EventBus
from folio.ui.layout import PageLayout, compute_page_layout


def apply_page_layout(world: World, width: float, height: float) -> PageLayout | None:
    """Recompute page geometry for the window size and push it into card entities."""
    pages = list(world.get_components(PortfolioContent, Viewport))
    if not pages:
        return None
    page_entity, (content, viewport) = pages[0]
    layout = compute_page_layout(content, width)
    # add_component replaces the previous layout instance.
    world.add_component(page_entity, layout)
    viewport.width = float(width)
    viewport.height = float(height)
    viewport.content_height = layout.content_height
    viewport.scroll = min(max(0.0, viewport.scroll), viewport.max_scroll)

    for entity, (card, bounds) in world.get_components(PressCard, CardBounds):
        if not 0 <= card.card_index < len(layout.press_cards):
            continue
        target = layout.press_cards[card.card_index]
        resized = (bounds.width, bounds.height) != (target.width, target.height)
        bounds.left, bounds.top = target.left, target.top
        bounds.width, bounds.height = target.width, target.height
        if not resized:
            continue
        try:
            animator = world.component_for_entity(entity, HoverRevealAnimator)
        except KeyError:
            continue
        animator.resize(target.width, target.height)
    return layout


class LayoutSystem:
    """Keeps the page layout in step with the window size."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_WINDOW_RESIZE, self.on_resize)

    def on_resize(self, sender: Any, **payload: Any) -> None:
        width = payload.get("width")
        height = payload.get("height")
        if width is None or height is None:
            return
        try:
            width_f = float(width)
            height_f = float(height)
        except (TypeError, ValueError):
            return
        layout = apply_page_layout(self.world, width_f, height_f)
        if layout is not None:
            self.event_bus.emit(EVENT_LAYOUT_CHANGED, width=width_f, content_height=layout.content_height)
