from __future__ import annotations


class FakeClock:
    """Monotonic clock stand-in (seconds) advanced by hand."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def advance(self, amount: float) -> None:
        self.value += amount

    def set_ms(self, ms: float) -> None:
        self.value = ms / 1000.0

    def __call__(self) -> float:
        return self.value


class RecordingArcade:
    """Collects draw calls made by renderers instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple, dict]] = []

    def __getattr__(self, name):
        if not name.startswith("draw_"):
            raise AttributeError(name)

        def _record(*args, **kwargs):
            self.calls.append((name, args, kwargs))

        return _record

    def named(self, name: str) -> list[tuple[tuple, dict]]:
        return [(args, kwargs) for call, args, kwargs in self.calls if call == name]

    def texts(self) -> list[str]:
        return [args[0] for args, _ in self.named("draw_text")]
