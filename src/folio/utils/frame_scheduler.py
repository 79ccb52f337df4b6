from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import monotonic
from typing import Callable, Dict

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


@dataclass(slots=True)
class FrameScheduler:
	"""One-shot per-frame callbacks, the desktop stand-in for ``requestAnimationFrame``.

	Callbacks requested while a frame is running are deferred to the next
	frame. Every callback in a frame receives the same timestamp, in
	milliseconds read from ``clock`` (seconds, monotonic).
	"""

	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_pending: Dict[int, FrameCallback] = field(init=False, repr=False)
	_next_handle: int = field(init=False, default=0, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic
		self._pending = {}

	def request_frame(self, callback: FrameCallback) -> int:
		self._next_handle += 1
		self._pending[self._next_handle] = callback
		return self._next_handle

	def cancel_frame(self, handle: int | None) -> None:
		if handle is None:
			return
		self._pending.pop(handle, None)

	def run_frame(self) -> int:
		"""Invoke every callback pending at the start of this frame; return how many ran."""
		if not self._pending:
			return 0
		batch = self._pending
		self._pending = {}
		timestamp_ms = self._clock() * 1000.0
		for callback in batch.values():
			callback(timestamp_ms)
		logger.debug("frame ran %d callback(s) at %.1fms", len(batch), timestamp_ms)
		return len(batch)

	@property
	def pending(self) -> int:
		return len(self._pending)

	def is_pending(self, handle: int | None) -> bool:
		return handle is not None and handle in self._pending

	def reset(self) -> None:
		self._pending.clear()
