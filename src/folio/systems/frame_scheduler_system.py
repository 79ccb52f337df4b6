from __future__ import annotations

from typing import Any

from folio.events.bus import EVENT_TICK, EventBus
from folio.utils.frame_scheduler import FrameScheduler


class FrameSchedulerSystem:
    """Runs one scheduler frame per window tick."""

    def __init__(
        self,
        event_bus: EventBus,
        *,
        scheduler: FrameScheduler | None = None,
    ) -> None:
        self.event_bus = event_bus
        self._scheduler = scheduler or FrameScheduler()
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)

    @property
    def scheduler(self) -> FrameScheduler:
        return self._scheduler

    def _on_tick(self, sender: Any, **payload: Any) -> None:
        self._scheduler.run_frame()
