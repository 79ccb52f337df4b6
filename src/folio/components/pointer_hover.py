from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class PointerHover:
    """What the pointer is over, read by the renderer for hover backgrounds."""
    card: Optional[int] = None
    project_row: Optional[int] = None
