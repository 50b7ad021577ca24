# maltese

A small desktop companion: a frameless, always-on-top window that plays
looping frame animations of a Maltese dog. Drag it anywhere on the screen
with the left mouse button, and right-click to pick which animation it plays.
The window is drawn with tkinter from the standard library; the package has
no other dependencies.

## Animations

The animations are the members of `maltese.resources.RoleAct`. Each has a
display `label`, used in the menu:

| Member          | Label          | Frame files                                  |
|-----------------|----------------|----------------------------------------------|
| `ROLLING`       | `Rolling`      | `img/rolling/rolling_<n>.png`                |
| `RIDE_SCOOTER`  | `RideScooter`  | `img/ride_scooter/ride_scooter_<n>.png`      |
| `RIDE_MALTESE`  | `RideMaltese`  | `img/ride_maltese/ride_maltese_<n>.png`      |
| `BICKERING`     | `Bickering`    | `img/bickering/bickering_<n>.png`            |
| `MELODY_SPRINT` | `MelodySprint` | `img/melody_sprint/melody_sprint_<n>.png`    |

Frame paths are relative to a resource directory. Frames are read starting
at `0` until the first missing number. An animation with no frames is
logged with a warning ("Missing frames: ...") and simply does not play.
`Rolling` starts when the window opens. Frames advance every 60 ms
(`maltese.animation.FRAME_INTERVAL_MS`) and loop.

## Running

```
pip install .
maltese --resources path/to/resources
```

Options:

- `--resources DIR` — directory holding the `img/` frame folders
  (default: `resources` in the current directory). If `img/icon.png`
  exists there it is used as the window icon.
- `--display DISPLAY` — the X display to open.

Right-clicking opens a menu listing every animation, a separator, then
**Show**, **Hide** and **Exit**. If no display can be opened, an error is
printed and the command exits with status -1.

## Using it from Python

```python
from maltese.resources import ResourceManager, RoleAct
from maltese.animation import AnimationController

resources = ResourceManager("path/to/resources")
frames = []
controller = AnimationController(resources, frames.append)
controller.start(RoleAct.BICKERING)
controller.tick()   # delivers the first Bickering frame to frames.append
controller.stop()
```

- `maltese.resources.instance(root)` returns one shared `ResourceManager`
  per resource directory; `ResourceManager.add_frames(act, pattern)`
  replaces an animation's frames with those matching a pattern such as
  `"img/custom/frame_{}.png"`.
- `maltese.drag.DragTracker` holds the window-dragging logic:
  `press(button, global_pos, window_pos)` records the grab point for a left
  press and `move(buttons, global_pos)` returns the new window position
  while `MouseButton.LEFT` is held.
- `maltese.menu.TrayMenuBuilder.build_menu(receiver)` returns the menu as a
  list of `MenuItem` values; triggering an animation entry calls every
  callback registered with `connect` with the animation's value.
- `maltese.app.AnimatedWidget(None, resources)` keeps the widget's state
  without any display, which is handy for scripting and tests.

None of this needs a display except `AppController.run` and an
`AnimatedWidget` given a Tk root.

## What it does not do

- There is no system-tray icon; the menu is a right-click popup on the window.
- The window background is transparent only on Windows; elsewhere the frames
  are shown on an ordinary background.
- No frame images ship with the package; point `--resources` at a directory
  that has them.

## Tests

```
pip install .[test]
pytest
```