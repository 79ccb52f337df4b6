from dataclasses import dataclass


@dataclass(slots=True)
class PressCard:
    """Press grid entry; only ``card_index`` feeds the hover animation."""
    card_index: int
    title: str
    subtitle: str
    url: str = "#"


@dataclass(slots=True)
class CardBounds:
    """Page-space rectangle (top-left origin, y grows downward)."""
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom
