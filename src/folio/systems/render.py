from __future__ import annotations

from typing import Dict

from esper import World

from folio.components.pointer_hover import PointerHover
from folio.components.section_reveal import SectionReveal
from folio.components.typewriter_text import TypewriterText
from folio.components.viewport import Viewport
from folio.constants import (
    HOVER_BACKGROUND,
    LINK_COLOR,
    MUTED_TEXT_COLOR,
    PORTRAIT_COLOR,
    RULE_COLOR,
    TEXT_COLOR,
)
from folio.rendering.card_renderer import CardRenderer, with_alpha
from folio.ui.layout import GREETING_LINE_HEIGHT, PageLayout

# Sections whose links share the main text color rather than the link blue.
PLAIN_LINK_SECTIONS = ("header", "projects", "socials")


class PageRenderSystem:
    """Draws the whole page from the current layout, scroll and reveal state."""

    def __init__(self, world: World, window):
        self.world = world
        self.window = window
        self._card_renderer = CardRenderer(world)

    @property
    def card_renderer(self) -> CardRenderer:
        return self._card_renderer

    def process(self) -> None:
        import arcade

        self.render(arcade)

    def render(self, arcade) -> None:
        page = self._page()
        if page is None:
            return
        viewport, layout = page
        reveals = self._reveals()
        hover = self._hover()

        # The rule between bio and projects is static: no fade, no slide.
        rule_y = viewport.to_screen_y(layout.rule_y)
        if 0 <= rule_y <= viewport.height:
            arcade.draw_line(
                layout.column_left, rule_y, layout.column_left + layout.column_width, rule_y, RULE_COLOR, 1
            )

        for name, bounds in layout.sections.items():
            alpha, dx, dy = self._reveal_params(reveals, name)
            if alpha <= 0.0:
                continue
            top = viewport.to_screen_y(bounds.top) - dy
            bottom = viewport.to_screen_y(bounds.bottom) - dy
            if bottom > viewport.height or top < 0:
                continue
            if name == "projects" and hover.project_row is not None:
                self._draw_row_highlight(arcade, viewport, layout, hover.project_row, alpha, dx)
            for block in layout.section_texts(name):
                self._draw_block(arcade, viewport, block, alpha, dx, dy)
            for span in layout.section_spans(name):
                # Linked spans are drawn with the links below.
                if span.url:
                    continue
                arcade.draw_text(
                    span.text,
                    span.left + dx,
                    viewport.to_screen_y(span.top) - dy,
                    with_alpha(TEXT_COLOR, alpha),
                    span.font_size,
                    bold=span.bold,
                    italic=span.italic,
                    anchor_y="top",
                )
            for link in layout.section_links(name):
                color = with_alpha(TEXT_COLOR if name in PLAIN_LINK_SECTIONS else LINK_COLOR, alpha)
                arcade.draw_text(
                    link.label,
                    link.bounds.left + dx,
                    viewport.to_screen_y(link.bounds.top) - dy,
                    color,
                    14,
                    bold=name == "projects",
                    anchor_y="top",
                )
                if link.underline:
                    underline_y = viewport.to_screen_y(link.bounds.bottom) - dy + 3
                    arcade.draw_line(link.bounds.left + dx, underline_y, link.bounds.right + dx, underline_y, color, 1)
            if name == "bio":
                self._draw_bio_extras(arcade, viewport, layout, alpha, dx)
            elif name == "press":
                self._card_renderer.render(arcade, viewport, alpha=alpha, shift_x=dx, hovered=hover.card)
            elif name == "socials":
                for start, end, y in layout.social_leaders:
                    screen_y = viewport.to_screen_y(y)
                    arcade.draw_line(start + dx, screen_y, end + dx, screen_y, with_alpha(RULE_COLOR, alpha), 1)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _draw_block(self, arcade, viewport: Viewport, block, alpha: float, dx: float, dy: float) -> None:
        color = MUTED_TEXT_COLOR if block.muted else TEXT_COLOR
        for index, line in enumerate(block.lines):
            if not line:
                continue
            y = viewport.to_screen_y(block.top + index * block.line_height) - dy
            if y < 0 or y - block.line_height > viewport.height:
                continue
            arcade.draw_text(
                line,
                block.left + dx,
                y,
                with_alpha(color, alpha),
                block.font_size,
                bold=block.bold,
                anchor_y="top",
            )

    def _draw_row_highlight(self, arcade, viewport: Viewport, layout: PageLayout, index: int, alpha: float, dx: float) -> None:
        if not 0 <= index < len(layout.project_rows):
            return
        row = layout.project_rows[index]
        arcade.draw_lrbt_rectangle_filled(
            row.left + dx,
            row.right + dx,
            viewport.to_screen_y(row.bottom),
            viewport.to_screen_y(row.top),
            with_alpha(HOVER_BACKGROUND, alpha),
        )

    def _draw_bio_extras(self, arcade, viewport: Viewport, layout: PageLayout, alpha: float, dx: float) -> None:
        portrait = layout.portrait
        arcade.draw_lrbt_rectangle_filled(
            portrait.left + dx,
            portrait.right + dx,
            viewport.to_screen_y(portrait.bottom),
            viewport.to_screen_y(portrait.top),
            with_alpha(PORTRAIT_COLOR, alpha),
        )
        text = self._typed_text()
        for index, line in enumerate(text.split("\n")):
            if not line:
                continue
            arcade.draw_text(
                line,
                layout.greeting_left + dx,
                viewport.to_screen_y(layout.greeting_top + index * GREETING_LINE_HEIGHT),
                with_alpha(TEXT_COLOR, alpha),
                22,
                anchor_y="top",
            )

    @staticmethod
    def _reveal_params(reveals: Dict[str, SectionReveal], name: str) -> tuple[float, float, float]:
        reveal = reveals.get(name)
        if reveal is None:
            return 1.0, 0.0, 0.0
        if reveal.axis == "x":
            return reveal.alpha, reveal.shift, 0.0
        return reveal.alpha, 0.0, reveal.shift

    def _typed_text(self) -> str:
        for _, text in self.world.get_component(TypewriterText):
            return text.visible_text
        return ""

    def _hover(self) -> PointerHover:
        for _, hover in self.world.get_component(PointerHover):
            return hover
        return PointerHover()

    def _reveals(self) -> Dict[str, SectionReveal]:
        return {reveal.name: reveal for _, reveal in self.world.get_component(SectionReveal)}

    def _page(self) -> tuple[Viewport, PageLayout] | None:
        for _, (viewport, layout) in self.world.get_components(Viewport, PageLayout):
            return viewport, layout
        return None
