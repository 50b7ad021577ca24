"""Frame-by-frame playback of an animation."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .resources import ResourceManager, RoleAct

FRAME_INTERVAL_MS = 60


class AnimationController:
    """Cycles through an animation's frames, reporting each one to ``on_frame``.

    The owner calls :meth:`tick` every :data:`FRAME_INTERVAL_MS` milliseconds
    while :meth:`is_active` is true.
    """

    def __init__(self, resources: ResourceManager, on_frame: Callable[[Path], object]) -> None:
        self._resources = resources
        self._on_frame = on_frame
        self._frames: list[Path] = []
        self._index = 0
        self._active = False

    def start(self, act: RoleAct) -> None:
        """Stop whatever is playing and start ``act`` from its first frame."""
        self.stop()
        frames = self._resources.frames_for(act)
        if not frames:
            return
        self._frames = frames
        self._index = 0
        self._active = True

    def stop(self) -> None:
        """Stop playback and forget the current frames."""
        self._active = False
        self._frames = []
        self._index = 0

    def tick(self) -> Path | None:
        """Advance one frame and report it; returns the frame, or None when idle."""
        if not self._frames:
            return None
        frame = self._frames[self._index % len(self._frames)]
        self._index += 1
        self._on_frame(frame)
        return frame

    def is_active(self) -> bool:
        """Whether an animation is playing."""
        return self._active