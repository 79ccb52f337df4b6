from dataclasses import dataclass


@dataclass
class Viewport:
    """Singleton component holding window size and page scroll offset."""
    width: float = 0.0
    height: float = 0.0
    scroll: float = 0.0
    content_height: float = 0.0

    @property
    def max_scroll(self) -> float:
        return max(0.0, self.content_height - self.height)

    def to_page(self, x: float, y: float) -> tuple[float, float]:
        """Convert window coordinates (bottom-left origin) to page space."""
        return x, self.height - y + self.scroll

    def to_screen_y(self, page_y: float) -> float:
        return self.height - (page_y - self.scroll)
