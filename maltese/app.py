"""The animated desktop character window and the application entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from .animation import FRAME_INTERVAL_MS, AnimationController
from .drag import DragTracker, MouseButton
from .menu import TrayMenuBuilder
from .resources import ResourceManager, RoleAct, instance

APP_NAME = "MyAnimatedApp"
WINDOW_TITLE = "Animated Widget"
DEFAULT_RESOURCE_ROOT = Path("resources")


class AnimatedWidget:
    """A frameless, draggable window that plays the selected animation.

    ``root`` is a Tk root window; with ``None`` the widget keeps its state
    without any display, and playback advances only through ``animation.tick()``.
    """

    def __init__(self, root: Any, resources: ResourceManager) -> None:
        self.root = root
        self.animation = AnimationController(resources, self.update_frame)
        self.current_frame: Path | None = None
        self.visible = False
        self._drag = DragTracker()
        self._after_id: str | None = None
        self._label: Any = None
        self._image: Any = None
        if root is not None:
            self._build_view()
        self.show_animation(RoleAct.ROLLING)

    def _build_view(self) -> None:
        import tkinter as tk

        root = self.root
        root.overrideredirect(True)
        try:
            root.attributes("-topmost", True)
        except tk.TclError:
            pass
        self._label = tk.Label(root, borderwidth=0, highlightthickness=0)
        if sys.platform == "win32":
            self._label.configure(bg="magenta")
            try:
                root.wm_attributes("-transparentcolor", "magenta")
            except tk.TclError:
                pass
        self._label.pack()
        self._label.bind("<ButtonPress-1>", self._on_press)
        self._label.bind("<B1-Motion>", self._on_motion)

    def _on_press(self, event: Any) -> None:
        self._drag.press(
            MouseButton.LEFT,
            (event.x_root, event.y_root),
            (self.root.winfo_x(), self.root.winfo_y()),
        )

    def _on_motion(self, event: Any) -> None:
        pos = self._drag.move(MouseButton.LEFT, (event.x_root, event.y_root))
        if pos is not None:
            self.root.geometry(f"+{pos[0]}+{pos[1]}")

    def _cancel_timer(self) -> None:
        if self.root is not None and self._after_id is not None:
            self.root.after_cancel(self._after_id)
        self._after_id = None

    def _on_timer(self) -> None:
        self._after_id = None
        if not self.animation.is_active():
            return
        self.animation.tick()
        self._after_id = self.root.after(FRAME_INTERVAL_MS, self._on_timer)

    def show_animation(self, act: RoleAct) -> None:
        """Switch to and start playing ``act``."""
        self._cancel_timer()
        self.animation.start(act)
        if self.root is not None and self.animation.is_active():
            self._after_id = self.root.after(FRAME_INTERVAL_MS, self._on_timer)

    def update_frame(self, frame: Path) -> None:
        """Take a new frame and redraw."""
        self.current_frame = frame
        if self._label is None:
            return
        import tkinter as tk

        try:
            self._image = tk.PhotoImage(file=str(frame))
        except tk.TclError:
            return
        self._label.configure(image=self._image)

    def set_visible(self, visible: bool) -> None:
        """Show or hide the window."""
        self.visible = visible
        if self.root is None:
            return
        if visible:
            self.root.deiconify()
        else:
            self.root.withdraw()

    def quit(self) -> None:
        """Stop playback and leave the event loop."""
        self._cancel_timer()
        self.animation.stop()
        self.visible = False
        if self.root is not None:
            self.root.quit()


class AppController:
    """Creates the window and its menu and runs the event loop."""

    def __init__(self, resource_root: str | Path | None = None) -> None:
        self.resource_root = Path(resource_root) if resource_root is not None else DEFAULT_RESOURCE_ROOT
        self.resources = instance(self.resource_root)
        self.menu_builder = TrayMenuBuilder()
        self.widget: AnimatedWidget | None = None

    def run(self, argv: list[str] | None = None) -> int:
        """Run the application; returns the exit status, -1 when no display is available."""
        parser = argparse.ArgumentParser(prog=APP_NAME)
        parser.add_argument("--display", default=None, help="X display to open")
        options = parser.parse_args(argv)

        import tkinter as tk

        try:
            root = tk.Tk(screenName=options.display, className=APP_NAME)
        except tk.TclError as exc:
            print(f"Error: no display is available, the application cannot start ({exc}).", file=sys.stderr)
            return -1

        root.title(WINDOW_TITLE)
        icon_path = self.resource_root / "img" / "icon.png"
        if icon_path.is_file():
            try:
                root.iconphoto(True, tk.PhotoImage(file=str(icon_path)))
            except tk.TclError:
                pass

        widget = self.widget = AnimatedWidget(root, self.resources)
        self.menu_builder.connect(lambda value: widget.show_animation(RoleAct(value)))

        popup = tk.Menu(root, tearoff=False)
        for item in self.menu_builder.build_menu(widget):
            if item.separator:
                popup.add_separator()
            else:
                popup.add_command(label=item.label, command=item.trigger)
        root.bind_all("<Button-3>", lambda event: popup.tk_popup(event.x_root, event.y_root))

        widget.set_visible(True)
        root.mainloop()
        try:
            root.destroy()
        except tk.TclError:
            pass
        return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog=APP_NAME, description="A desktop animated character.")
    parser.add_argument(
        "--resources",
        type=Path,
        default=DEFAULT_RESOURCE_ROOT,
        help="directory holding the img/ frame folders",
    )
    options, rest = parser.parse_known_args(argv)
    return AppController(options.resources).run(rest)


if __name__ == "__main__":
    sys.exit(main())