import random

from esper import World
from .events.bus import EventBus
from folio.components.pointer_hover import PointerHover
from folio.components.section_reveal import SectionReveal
from folio.components.typewriter_text import TypewriterText
from folio.components.viewport import Viewport
from folio.constants import CARD_PALETTE, SECTION_REVEAL_DELAYS, TYPING_INTERVAL, WINDOW_HEIGHT, WINDOW_WIDTH
from folio.content import DEFAULT_CONTENT, PortfolioContent
from folio.factories.cards import spawn_press_cards
from folio.systems.layout_system import apply_page_layout
from folio.ui.layout import SECTION_ORDER
from folio.utils.frame_scheduler import FrameScheduler


def create_world(
    event_bus: EventBus,
    content: PortfolioContent = DEFAULT_CONTENT,
    *,
    scheduler: FrameScheduler | None = None,
    width: float = WINDOW_WIDTH,
    height: float = WINDOW_HEIGHT,
    typing_interval: float = TYPING_INTERVAL,
    palette=CARD_PALETTE,
    rng: random.Random | None = None,
    with_card_surfaces: bool = True,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "scheduler", scheduler or FrameScheduler())

    # Page singleton: content, viewport and hover state; the layout is attached below.
    world.create_entity(content, Viewport(width=width, height=height), PointerHover())

    world.create_entity(TypewriterText(full_text=content.greeting, interval=typing_interval))

    for name, delay in zip(SECTION_ORDER, SECTION_REVEAL_DELAYS):
        world.create_entity(SectionReveal(name=name, delay=delay, axis="y" if name == "footer" else "x"))

    spawn_press_cards(
        world,
        content.articles,
        world.scheduler,
        palette=palette,
        rng=world.random,
        with_surfaces=with_card_surfaces,
    )
    apply_page_layout(world, width, height)
    return world
