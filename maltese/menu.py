"""The context menu: one entry per animation plus Show, Hide and Exit."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from .resources import RoleAct


class MenuReceiver(Protocol):
    def set_visible(self, visible: bool) -> None: ...

    def quit(self) -> None: ...


@dataclass(frozen=True)
class MenuItem:
    """A menu entry; separators have no label or action."""

    label: str = ""
    action: Callable[[], None] | None = None
    value: int | None = None
    separator: bool = False

    def trigger(self) -> None:
        """Run the entry's action, if any."""
        if self.action is not None:
            self.action()


class TrayMenuBuilder:
    """Builds the menu and tells listeners which animation was chosen."""

    def __init__(self) -> None:
        self._listeners: list[Callable[[int], object]] = []

    def connect(self, callback: Callable[[int], object]) -> None:
        """Call ``callback`` with the animation value whenever one is chosen."""
        self._listeners.append(callback)

    def _emit(self, value: int) -> None:
        for listener in list(self._listeners):
            listener(value)

    def build_menu(self, receiver: MenuReceiver) -> list[MenuItem]:
        """Animation entries, a separator, then Show, Hide and Exit acting on ``receiver``."""
        items = [
            MenuItem(label=act.label, action=lambda v=int(act): self._emit(v), value=int(act))
            for act in RoleAct
        ]
        items.append(MenuItem(separator=True))
        items.append(MenuItem(label="Show", action=lambda: receiver.set_visible(True)))
        items.append(MenuItem(label="Hide", action=lambda: receiver.set_visible(False)))
        items.append(MenuItem(label="Exit", action=receiver.quit))
        return items