"""Entry point for the portfolio page.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import logging
import os

from arcade import Window, run, set_background_color

from folio.constants import PAGE_BACKGROUND, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from folio.events.bus import (
    EVENT_MOUSE_EXIT,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_SCROLL,
    EVENT_TICK,
    EVENT_WINDOW_RESIZE,
    EventBus,
)
from folio.systems.frame_scheduler_system import FrameSchedulerSystem
from folio.systems.hover_reveal_system import HoverRevealSystem
from folio.systems.hover_system import HoverSystem
from folio.systems.layout_system import LayoutSystem
from folio.systems.link_system import LinkSystem
from folio.systems.render import PageRenderSystem
from folio.systems.scroll_system import ScrollSystem
from folio.systems.section_reveal_system import SectionRevealSystem
from folio.systems.typewriter_system import TypewriterSystem
from folio.world import create_world

logger = logging.getLogger(__name__)


class PortfolioWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, width=self.width, height=self.height)

        # Frame driver for card animations.
        self.frame_scheduler_system = FrameSchedulerSystem(self.event_bus, scheduler=self.world.scheduler)

        # Page systems
        self.layout_system = LayoutSystem(self.world, self.event_bus)
        self.typewriter_system = TypewriterSystem(self.world, self.event_bus)
        self.section_reveal_system = SectionRevealSystem(self.world, self.event_bus)
        self.scroll_system = ScrollSystem(self.world, self.event_bus)

        # Interaction systems
        self.hover_system = HoverSystem(self.world, self.event_bus)
        self.hover_reveal_system = HoverRevealSystem(self.world, self.event_bus)
        self.link_system = LinkSystem(self.world, self.event_bus)

        self.render_system = PageRenderSystem(self.world, self)
        set_background_color(PAGE_BACKGROUND)

    def on_resize(self, width: int, height: int):
        # pyglet may fire a resize before __init__ has wired the bus.
        if hasattr(self, 'event_bus'):
            self.event_bus.emit(EVENT_WINDOW_RESIZE, width=width, height=height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_leave(self, x: float, y: float):
        self.event_bus.emit(EVENT_MOUSE_EXIT, x=x, y=y)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_scroll(self, x: int, y: int, scroll_x: float, scroll_y: float):
        self.event_bus.emit(EVENT_MOUSE_SCROLL, x=x, y=y, scroll_x=scroll_x, scroll_y=scroll_y)


def main():
    logging.basicConfig(
        level=os.environ.get("FOLIO_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    window = PortfolioWindow()
    logger.info("portfolio window opened at %dx%d", window.width, window.height)
    run()

if __name__ == "__main__":
    main()
