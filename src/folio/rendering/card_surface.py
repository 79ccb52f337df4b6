from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from folio.constants import CURVE_SEGMENTS

Point = Tuple[float, float]
Color = Tuple[int, ...]


@dataclass(slots=True)
class SurfaceShape:
    """Painted polygon in surface coordinates; ``color`` None marks an erased area."""
    color: Optional[Color]
    points: Tuple[Point, ...]


class CardSurface:
    """Retained drawing surface behind one press card.

    Mirrors the small slice of the HTML canvas 2D API the hover animation
    needs. Coordinates use a top-left origin with y growing downward; the
    renderer flips them into arcade's bottom-left screen space. Painted shapes
    are kept until cleared so the card can be redrawn every window frame.
    """

    def __init__(self, width: float, height: float, *, curve_segments: int = CURVE_SEGMENTS):
        self.width = float(width)
        self.height = float(height)
        self.curve_segments = max(1, int(curve_segments))
        self.fill_color: Color = (0, 0, 0)
        self._shapes: List[SurfaceShape] = []
        self._subpaths: List[List[Point]] = []
        self._cursor: Point | None = None

    # ------------------------------------------------------------------
    # Canvas-style operations
    # ------------------------------------------------------------------
    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        if x <= 0 and y <= 0 and x + width >= self.width and y + height >= self.height:
            self._shapes.clear()
            return
        if width <= 0 or height <= 0:
            return
        self._shapes.append(SurfaceShape(None, _rect_points(x, y, width, height)))

    def set_fill_color(self, color: Color) -> None:
        self.fill_color = tuple(color)

    def begin_path(self) -> None:
        self._subpaths = []
        self._cursor = None

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(x, y)])
        self._cursor = (x, y)

    def line_to(self, x: float, y: float) -> None:
        if self._cursor is None:
            self.move_to(x, y)
            return
        self._subpaths[-1].append((x, y))
        self._cursor = (x, y)

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        if self._cursor is None:
            self.move_to(cpx, cpy)
        x0, y0 = self._cursor
        steps = self.curve_segments
        path = self._subpaths[-1]
        for step in range(1, steps + 1):
            t = step / steps
            inv = 1.0 - t
            px = inv * inv * x0 + 2 * inv * t * cpx + t * t * x
            py = inv * inv * y0 + 2 * inv * t * cpy + t * t * y
            path.append((px, py))
        self._cursor = (x, y)

    def close_path(self) -> None:
        if not self._subpaths:
            return
        path = self._subpaths[-1]
        if len(path) > 1 and path[0] != path[-1]:
            path.append(path[0])
        self._cursor = path[0]

    def fill(self) -> None:
        for path in self._subpaths:
            if len(path) < 3 or _bbox_area(path) <= 0.0:
                continue
            self._shapes.append(SurfaceShape(self.fill_color, tuple(path)))

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            return
        self._shapes.append(SurfaceShape(self.fill_color, _rect_points(x, y, width, height)))

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self._shapes.clear()

    @property
    def shapes(self) -> Tuple[SurfaceShape, ...]:
        return tuple(self._shapes)

    @property
    def is_empty(self) -> bool:
        return not self._shapes


def _rect_points(x: float, y: float, width: float, height: float) -> Tuple[Point, ...]:
    return ((x, y), (x + width, y), (x + width, y + height), (x, y + height))


def _bbox_area(points: List[Point]) -> float:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (max(xs) - min(xs)) * (max(ys) - min(ys))
