"""Tracking of a window being dragged with the left mouse button."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag

Point = tuple[int, int]


class MouseButton(Flag):
    """Mouse buttons; combine with ``|`` for the set of held buttons."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    MIDDLE = 4


@dataclass
class DragTracker:
    """Remembers where the window was grabbed and computes where it moves to."""

    offset: Point = (0, 0)

    def press(self, button: MouseButton, global_pos: Point, window_pos: Point) -> bool:
        """Record the grab point on a left press; True when the press was handled."""
        if button is not MouseButton.LEFT:
            return False
        self.offset = (global_pos[0] - window_pos[0], global_pos[1] - window_pos[1])
        return True

    def move(self, buttons: MouseButton, global_pos: Point) -> Point | None:
        """New window position while the left button is held, otherwise None."""
        if MouseButton.LEFT not in buttons:
            return None
        return (global_pos[0] - self.offset[0], global_pos[1] - self.offset[1])