from dataclasses import dataclass

from folio.constants import SECTION_REVEAL_DURATION, SECTION_REVEAL_OFFSET


@dataclass(slots=True)
class SectionReveal:
    """Load-in fade for one page section.

    ``linear`` is raw progress through ``duration``; ``alpha`` is its eased value
    and drives both opacity and ``shift``.

    ``axis`` is ``"x"`` for sections sliding in from the left and ``"y"`` for
    the footer rising from below.
    """

    name: str
    delay: float
    duration: float = SECTION_REVEAL_DURATION
    offset: float = SECTION_REVEAL_OFFSET
    axis: str = "x"
    elapsed: float = 0.0
    linear: float = 0.0
    alpha: float = 0.0

    @property
    def shift(self) -> float:
        return -self.offset * (1.0 - self.alpha) if self.axis == "x" else self.offset * (1.0 - self.alpha)
