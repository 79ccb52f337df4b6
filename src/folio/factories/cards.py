from __future__ import annotations

import logging
import random
from typing import List, Sequence

from esper import World

from folio.animation.hover_reveal import HoverRevealAnimator
from folio.components.card import CardBounds, PressCard
from folio.constants import CARD_PALETTE
from folio.content import Article
from folio.rendering.card_surface import CardSurface
from folio.utils.frame_scheduler import FrameScheduler
from folio.utils.palette import Color, palette_color

logger = logging.getLogger(__name__)


def mount_hover_reveal(
    world: World,
    entity: int,
    surface: CardSurface | None,
    scheduler: FrameScheduler,
    *,
    palette: Sequence[Color] = CARD_PALETTE,
    rng: random.Random | None = None,
) -> HoverRevealAnimator | None:
    """Attach a hover animator to a card entity; without a surface the card stays static."""
    if surface is None:
        logger.debug("card %s has no drawing surface; hover reveal disabled", entity)
        return None
    card = world.component_for_entity(entity, PressCard)
    animator = HoverRevealAnimator(
        surface,
        scheduler,
        palette_color(card.card_index, palette),
        rng=rng,
    )
    world.add_component(entity, surface)
    world.add_component(entity, animator)
    return animator


def spawn_press_cards(
    world: World,
    articles: Sequence[Article],
    scheduler: FrameScheduler,
    *,
    palette: Sequence[Color] = CARD_PALETTE,
    rng: random.Random | None = None,
    with_surfaces: bool = True,
) -> List[int]:
    """Create one entity per article, in page order, each with its own animator."""
    entities: List[int] = []
    for index, article in enumerate(articles):
        entity = world.create_entity(
            PressCard(card_index=index, title=article.title, subtitle=article.publication, url=article.url),
            CardBounds(),
        )
        surface = CardSurface(0, 0) if with_surfaces else None
        mount_hover_reveal(world, entity, surface, scheduler, palette=palette, rng=rng)
        entities.append(entity)
    return entities
