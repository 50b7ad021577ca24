"""Animation kinds and the lookup of their frame images on disk."""

from __future__ import annotations

import logging
from enum import IntEnum
from pathlib import Path

log = logging.getLogger(__name__)


class RoleAct(IntEnum):
    """The animations the character can play."""

    ROLLING = 0
    RIDE_SCOOTER = 1
    RIDE_MALTESE = 2
    BICKERING = 3
    MELODY_SPRINT = 4

    @property
    def label(self) -> str:
        """Display name, e.g. ``RideScooter``."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    @property
    def default_pattern(self) -> str:
        """Frame file pattern relative to the resource root; ``{}`` is the frame number."""
        stem = self.name.lower()
        return f"img/{stem}/{stem}_{{}}.png"


class ResourceManager:
    """Maps each animation to the ordered list of its frame files."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        self._frames: dict[RoleAct, list[Path]] = {}
        for act in RoleAct:
            self.add_frames(act, act.default_pattern)

    def add_frames(self, act: RoleAct, pattern: str) -> list[Path]:
        """Collect frames ``pattern.format(0)``, ``pattern.format(1)``, ... until one is missing."""
        frames: list[Path] = []
        count = 0
        while True:
            path = self.root / pattern.format(count)
            if not path.exists():
                if count == 0:
                    log.warning("Missing frames: %s", path)
                break
            frames.append(path)
            count += 1
        self._frames[act] = frames
        return list(frames)

    def frames_for(self, act: RoleAct) -> list[Path]:
        """Frames of ``act``; an empty list when there are none."""
        return list(self._frames.get(act, ()))


_instances: dict[Path, ResourceManager] = {}


def instance(root: str | Path) -> ResourceManager:
    """The shared manager for the resource directory ``root``."""
    key = Path(root).resolve()
    manager = _instances.get(key)
    if manager is None:
        manager = _instances[key] = ResourceManager(key)
    return manager