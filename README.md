# shapesketch

shapesketch is a small interactive sketching tool. It draws dots, lines, rectangles, circles and arcs on a flat ground plane, which you see from directly above.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
shapesketch
```

This opens a 1280×720 window. You can set another size with `--width` and `--height`:

```
shapesketch --width 800 --height 600
```

The window shows 6 world units from top to bottom. A teal disc of radius 0.5 marks the origin. The mouse position is projected onto the ground plane. When the pointer leaves the window, the cursor stays at its last position.

Press a key to pick a tool:

| Key    | Mode      |
|--------|-----------|
| `D`    | Dot       |
| `S`    | Line      |
| `R`    | Rectangle |
| `C`    | Circle    |
| `A`    | Arc       |
| `Esc`  | None      |

Changing mode discards any shape you have only partly drawn and ends any line chain.

Left-click places points:

- **Dot**: each click adds a dot.
- **Line**: the first click sets the start, and each later click ends a segment. Segments chain, so the end of one segment is the start of the next. A dot is placed at every joint. Right-click ends the chain.
- **Rectangle**: two clicks set opposite corners. This adds four corner dots and four edges.
- **Circle**: the first click sets the centre and the second sets a point on the rim. A dot marks the centre.
- **Arc**: the first click sets the centre, the second the start and the third the end. The arc runs the shorter way round. Its radius is the distance from the centre to the start, and it stops in the direction of the end point. A dot marks the centre.

Right-click cancels the shape in progress. Middle-click does nothing. While you draw, guide lines follow the cursor.

### Reloading

- `Left Ctrl+R` is a soft reload. It removes and rebuilds the fixed scene (camera, light and the cone disc), discards the shape in progress and keeps everything you have drawn. It prints `Soft reloaded.`
- `Left Ctrl+Left Shift+R` is a hard reload. It also removes every shape you have drawn. It prints `Hard reloaded.`

Because `R` also picks Rectangle mode, a reload switches you to Rectangle mode as well.

## Using it as a library

You can use the model without opening a window:

```python
from shapesketch.world import World, ReloadLevel
from shapesketch.drawing import Sketcher, DrawMode, MouseButton
from shapesketch.shapes import Vec3, Circle

world = World()
sketcher = Sketcher(world)
sketcher.set_mode(DrawMode.CIRCLE)
sketcher.click(MouseButton.LEFT, Vec3(0.0, 0.0, 0.0))
sketcher.click(MouseButton.LEFT, Vec3(1.0, 0.0, 0.0))

circles = world.of_type(Circle)
assert circles[0].radius == 1.0

world.despawn_up_to(ReloadLevel.HARD)
assert len(world) == 0
```

The package has these modules:

- `shapesketch.shapes`: `Vec3`, and the shapes `Dot`, `Line`, `Circle` and `Arc`. It also has the helpers `rectangle_corners`, `rectangle_edges`, `circle_points` and `arc_points`.
- `shapesketch.world`: `World` stores the spawned shapes in order, each one tagged with a `ReloadLevel` (`SOFT` or `HARD`).
- `shapesketch.drawing`:
  - `Sketcher` turns clicks into shapes, and its `preview` returns the guide shapes for a cursor position.
  - `DrawMode` and `MouseButton` are the modes and buttons it works with.
  - `mode_for_key` maps a key name to a mode.
- `shapesketch.cursor`: `OrthographicCamera` converts between window pixels and points on the ground plane.
- `shapesketch.app`: `Application` connects all of the above to keyboard, mouse and a pygame surface. `main` starts the window.

## What it does not do

Sketches exist only while the window is open. You cannot save or load them. There is no undo, and you cannot select, move or edit a shape once it is placed. The only way to remove shapes is a hard reload.