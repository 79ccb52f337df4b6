from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class AnimationState(Enum):
    """Lifecycle of one card's hover fill."""
    IDLE = auto()
    RUNNING = auto()
    COMPLETING = auto()


@dataclass(slots=True)
class WavePoint:
    x: float
    vertical_rate: float = 1.0
    current_y: float = 0.0


@dataclass(slots=True)
class HoverRevealState:
    """Mutable animation record owned by a single card's animator."""

    state: AnimationState = AnimationState.IDLE
    start_time: float | None = None
    points: List[WavePoint] = field(default_factory=list)
    frame_handle: int | None = None
    progress: float = 0.0
