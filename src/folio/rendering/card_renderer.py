from typing import Dict, Optional

from esper import World

from folio.components.card import CardBounds, PressCard
from folio.components.viewport import Viewport
from folio.constants import CARD_BORDER_COLOR, HOVER_BACKGROUND, MUTED_TEXT_COLOR, PAGE_BACKGROUND, TEXT_COLOR
from folio.rendering.card_surface import CardSurface


def with_alpha(color, alpha: float):
    return (*tuple(color)[:3], int(255 * max(0.0, min(1.0, alpha))))


class CardRenderer:
    """Draw press cards: hover background and fill shapes first, then border and text on top."""

    def __init__(self, world: World):
        self.world = world
        self.layout_cache: Dict[int, tuple[float, float, float, float]] = {}

    def render(
        self, arcade, viewport: Viewport, alpha: float = 1.0, shift_x: float = 0.0, hovered: Optional[int] = None
    ) -> None:
        self.layout_cache.clear()
        for ent, (card, bounds) in self.world.get_components(PressCard, CardBounds):
            if bounds.width <= 0 or bounds.height <= 0:
                continue
            left = bounds.left + shift_x
            top = viewport.to_screen_y(bounds.top)
            bottom = viewport.to_screen_y(bounds.bottom)
            if top < 0 or bottom > viewport.height:
                continue
            self.layout_cache[ent] = (left, bottom, bounds.width, bounds.height)
            backdrop = HOVER_BACKGROUND if ent == hovered else PAGE_BACKGROUND
            if ent == hovered:
                arcade.draw_lrbt_rectangle_filled(
                    left, left + bounds.width, bottom, top, with_alpha(HOVER_BACKGROUND, alpha)
                )
            try:
                surface = self.world.component_for_entity(ent, CardSurface)
            except KeyError:
                surface = None
            if surface is not None:
                for shape in surface.shapes:
                    color = backdrop if shape.color is None else shape.color
                    points = [(left + px, viewport.to_screen_y(bounds.top + py)) for px, py in shape.points]
                    arcade.draw_polygon_filled(points, with_alpha(color, alpha))
            arcade.draw_lrbt_rectangle_outline(
                left, left + bounds.width, bottom, top, with_alpha(CARD_BORDER_COLOR, alpha), border_width=1
            )
            arcade.draw_text(
                card.title,
                left + 16,
                top - 16,
                with_alpha(TEXT_COLOR, alpha),
                15,
                bold=True,
                anchor_y="top",
            )
            arcade.draw_text(
                card.subtitle,
                left + 16,
                top - 44,
                with_alpha(MUTED_TEXT_COLOR, alpha),
                12,
                anchor_y="top",
            )
