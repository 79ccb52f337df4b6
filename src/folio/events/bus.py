from blinker import Signal
from typing import Dict

class EventBus:
    """Named blinker signals shared by every system on the page."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems held by nobody else keep receiving events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# WINDOW & TIMING
# ============================================================================
EVENT_TICK = "tick"                        # payload: dt=float
EVENT_WINDOW_RESIZE = "window_resize"      # payload: width=int, height=int


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_MOVE = "mouse_move"            # payload: x, y, dx, dy
EVENT_MOUSE_EXIT = "mouse_exit"            # payload: x, y
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_SCROLL = "mouse_scroll"        # payload: x, y, scroll_x, scroll_y


# ============================================================================
# CARDS & LINKS
# ============================================================================
EVENT_POINTER_ENTER = "pointer_enter"      # payload: entity=int
EVENT_POINTER_LEAVE = "pointer_leave"      # payload: entity=int
EVENT_LINK_OPENED = "link_opened"          # payload: entity=int, url=str


# ============================================================================
# PAGE
# ============================================================================
EVENT_LAYOUT_CHANGED = "layout_changed"    # payload: width=float, content_height=float
EVENT_TYPING_COMPLETE = "typing_complete"  # payload: entity=int, text=str
EVENT_SCROLL_CHANGED = "scroll_changed"    # payload: offset=float
