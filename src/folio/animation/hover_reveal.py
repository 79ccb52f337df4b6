from __future__ import annotations

import logging
import random
from typing import Tuple

from folio.components.hover_reveal_state import AnimationState, HoverRevealState, WavePoint
from folio.constants import (
    HOVER_REVEAL_DURATION_MS,
    WAVE_POINT_COUNT,
    WAVE_RATE_MAX,
    WAVE_RATE_MIN,
)
from folio.utils.frame_scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class HoverRevealAnimator:
    """Organic color wipe that rises from the bottom of one card while hovered.

    ``surface`` is any object offering the canvas-style calls used below
    (``clear_rect``, ``set_fill_color``, ``begin_path``, ``move_to``,
    ``line_to``, ``quadratic_curve_to``, ``close_path``, ``fill``,
    ``fill_rect``) plus ``width``/``height``. Frames come from ``scheduler``;
    the handle of the single outstanding frame lives in ``state.frame_handle``
    so a pointer leave can deregister it.
    """

    def __init__(
        self,
        surface,
        scheduler: FrameScheduler,
        fill_color: Tuple[int, ...],
        *,
        rng: random.Random | None = None,
        duration_ms: float = HOVER_REVEAL_DURATION_MS,
        point_count: int = WAVE_POINT_COUNT,
    ) -> None:
        self.surface = surface
        self.scheduler = scheduler
        self.fill_color = tuple(fill_color)
        self.rng = rng or random.Random()
        self.duration_ms = duration_ms
        self.state = HoverRevealState(points=[WavePoint(x=0.0) for _ in range(max(2, point_count))])
        self._layout_points()

    @property
    def width(self) -> float:
        return float(self.surface.width)

    @property
    def height(self) -> float:
        return float(self.surface.height)

    @property
    def points(self) -> list[WavePoint]:
        return self.state.points

    @property
    def is_running(self) -> bool:
        return self.state.state == AnimationState.RUNNING

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def on_pointer_enter(self) -> None:
        if self.state.state == AnimationState.RUNNING:
            return
        # A finished (COMPLETING) fill restarts the same way as IDLE.
        self.state.state = AnimationState.RUNNING
        self.state.start_time = None
        self.state.progress = 0.0
        for point in self.state.points:
            point.vertical_rate = self.rng.uniform(WAVE_RATE_MIN, WAVE_RATE_MAX)
        self.scheduler.cancel_frame(self.state.frame_handle)
        self.state.frame_handle = self.scheduler.request_frame(self.on_frame)
        logger.debug("hover reveal started (%dx%d)", self.width, self.height)

    def on_pointer_leave(self) -> None:
        self.scheduler.cancel_frame(self.state.frame_handle)
        self.state.frame_handle = None
        was_active = self.state.state != AnimationState.IDLE
        self.state.state = AnimationState.IDLE
        self.state.start_time = None
        self.state.progress = 0.0
        self.surface.clear_rect(0, 0, self.width, self.height)
        if was_active:
            logger.debug("hover reveal cancelled")

    # ------------------------------------------------------------------
    # Frame driver
    # ------------------------------------------------------------------
    def on_frame(self, timestamp_ms: float) -> None:
        if self.state.state != AnimationState.RUNNING:
            return
        self.state.frame_handle = None
        if self.state.start_time is None:
            self.state.start_time = timestamp_ms
        progress = self.progress_at(timestamp_ms)
        self.state.progress = progress
        height = self.height
        for point in self.state.points:
            point.current_y = max(0.0, height - height * progress * point.vertical_rate)
        self._draw_wave()
        if progress < 1.0:
            self.state.frame_handle = self.scheduler.request_frame(self.on_frame)
            return
        self.surface.set_fill_color(self.fill_color)
        self.surface.fill_rect(0, 0, self.width, height)
        self.state.state = AnimationState.COMPLETING
        logger.debug("hover reveal complete")

    def progress_at(self, timestamp_ms: float) -> float:
        """Normalized time in [0, 1] for ``timestamp_ms`` within the current run."""
        if self.duration_ms <= 0:
            return 1.0
        if self.state.start_time is None:
            return 0.0
        elapsed = timestamp_ms - self.state.start_time
        return min(max(elapsed / self.duration_ms, 0.0), 1.0)

    def resize(self, width: float, height: float) -> None:
        """Adopt new surface dimensions and re-space the wave points.

        The surface is cleared. A running fill carries on from its original
        start time on the next frame; a completed fill is repainted solid.
        """
        if hasattr(self.surface, "resize"):
            self.surface.resize(width, height)
        else:
            self.surface.width = width
            self.surface.height = height
        self._layout_points()
        if self.state.state == AnimationState.COMPLETING:
            self.surface.set_fill_color(self.fill_color)
            self.surface.fill_rect(0, 0, self.width, self.height)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _layout_points(self) -> None:
        width = self.width
        last = len(self.state.points) - 1
        for index, point in enumerate(self.state.points):
            point.x = (index / last) * width
        # Pin both ends so the fill meets the card edges exactly.
        self.state.points[0].x = 0.0
        self.state.points[last].x = width

    def _draw_wave(self) -> None:
        surface = self.surface
        width = self.width
        height = self.height
        points = self.state.points
        surface.clear_rect(0, 0, width, height)
        surface.set_fill_color(self.fill_color)
        surface.begin_path()
        surface.move_to(0, height)
        surface.line_to(0, points[0].current_y)
        for current, following in zip(points, points[1:]):
            mid_x = (current.x + following.x) / 2
            mid_y = (current.current_y + following.current_y) / 2
            surface.quadratic_curve_to(current.x, current.current_y, mid_x, mid_y)
        surface.line_to(width, points[-1].current_y)
        surface.line_to(width, height)
        surface.close_path()
        surface.fill()
