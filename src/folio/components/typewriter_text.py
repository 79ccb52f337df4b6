from dataclasses import dataclass

from folio.constants import TYPING_INTERVAL


@dataclass(slots=True)
class TypewriterText:
    """Greeting text revealed one character per ``interval`` seconds."""

    full_text: str
    interval: float = TYPING_INTERVAL
    visible_count: int = 0
    elapsed: float = 0.0
    finished: bool = False

    @property
    def visible_text(self) -> str:
        return self.full_text[: self.visible_count]
