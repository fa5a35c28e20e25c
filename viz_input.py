"""
Per-frame input snapshot and the accumulator that builds it.

The accumulator is fed from window callbacks between frames; the systems
only ever see the immutable FrameInput returned by snapshot().
"""
import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class MouseButton(enum.IntEnum):
    # same numbering as glfw.MOUSE_BUTTON_*
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2
    BUTTON_4 = 3
    BUTTON_5 = 4

    @classmethod
    def from_name(cls, name):
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown mouse button {name!r}") from None


@dataclass(frozen=True)
class FrameInput:
    pressed_buttons: frozenset = frozenset()
    pointer_delta: tuple = (0.0, 0.0)
    scroll_delta: float = 0.0
    elapsed_seconds: float = 0.0

    def is_pressed(self, button):
        return button in self.pressed_buttons


class InputAccumulator:
    def __init__(self):
        self._pressed = set()
        self._last_x = None
        self._last_y = None
        self._dx = 0.0
        self._dy = 0.0
        self._scroll = 0.0

    def handle_button(self, button, pressed):
        try:
            button = MouseButton(button)
        except ValueError:
            logger.debug("ignoring unmapped mouse button %s", button)
            return
        if pressed:
            self._pressed.add(button)
        else:
            self._pressed.discard(button)

    def handle_cursor(self, xpos, ypos):
        xpos, ypos = float(xpos), float(ypos)
        if self._last_x is not None:
            self._dx += xpos - self._last_x
            self._dy += ypos - self._last_y
        self._last_x, self._last_y = xpos, ypos

    def handle_scroll(self, yoffset):
        self._scroll += float(yoffset)

    def reset_cursor(self):
        """Forget the last cursor position, e.g. when the pointer leaves the window."""
        self._last_x = None
        self._last_y = None

    def snapshot(self, elapsed_seconds=0.0):
        """Freeze everything gathered since the last call and drain the deltas."""
        frame = FrameInput(
            pressed_buttons=frozenset(self._pressed),
            pointer_delta=(self._dx, self._dy),
            scroll_delta=self._scroll,
            elapsed_seconds=float(elapsed_seconds),
        )
        self._dx = 0.0
        self._dy = 0.0
        self._scroll = 0.0
        return frame
