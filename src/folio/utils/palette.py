from __future__ import annotations

from typing import Sequence, Tuple

from folio.constants import CARD_PALETTE

Color = Tuple[int, ...]


def palette_color(card_index: int, palette: Sequence[Color] = CARD_PALETTE) -> Color:
    """Return ``palette[card_index mod len(palette)]``.

    Negative indices wrap the same way positive ones do, so ``-1`` picks the
    last color.
    """
    if not palette:
        raise ValueError("palette must contain at least one color")
    return tuple(palette[int(card_index) % len(palette)])
