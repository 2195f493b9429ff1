# shapedraw

`shapedraw` is the model behind a simple vector drawing editor. It keeps an
ordered list of coloured, filled shapes (rectangles, circles and ellipses),
records colour changes and added shapes so the last steps can be undone,
offers a fixed sixteen-colour palette, and saves and loads drawings in a
compact binary `.shape` file. A small command-line front end runs drawing
commands from a script.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `shapedraw.shapes` – `Point`, `Rect` (with `width()`, `height()`,
  `normalized()` and `contains(point)`; right and bottom are exclusive), the
  `rgb(red, green, blue)` helper, which packs a colour as `0x00BBGGRR`, and
  the shapes `RectangleShape(rect, color)`, `CircleShape(center, radius,
  color)` and `EllipseShape(bounds, color)`. Colours default to black. Every
  shape can `write` its record to a binary stream, be read back with the
  class method `read` (which expects the type id to have been consumed
  already), `draw` itself on a canvas and `clone` itself.
- `shapedraw.shape_manager` – `ShapeManager`, the ordered list of shapes in a
  drawing. It supports `len()` and iteration, `add_shape`, `delete_shape`
  (removes the newest shape, `IndexError` when empty), `get_shape(index)`
  (`None` when out of range), `clear`, `draw_all(canvas)`, `write`/`read` on
  binary streams and `save(path)`/`load(path)` on files. `read_shape(stream)`
  reads a single record, type id included. An unknown type id or truncated
  data raises `ShapeFormatError` (a `ValueError`).
- `shapedraw.history` – `HistoryManager`, an undo stack that keeps the ten
  most recent `OperationRecord`s, newest first. Records are made with
  `OperationRecord.change_color(color)` or `OperationRecord.add_shape(shape)`;
  their `type` is an `OpType`. `pop()` returns `None` when the history is
  empty; iterating goes from newest to oldest.
- `shapedraw.palette` – the sixteen `STANDARD_COLORS` laid out on a 4×4 grid
  inside the rectangle (40, 60)–(370, 270). `color_at(x, y)` returns the
  colour under a point or `None`, and `cell_rects()` returns each cell's
  rectangle with its colour, row by row. `ColorPicker(initial_color)` tracks
  a selection: `click(x, y)` selects the colour under the point, `accept()`
  keeps it, and `cancel()` restores the initial colour.
- `shapedraw.paint_view` – `PaintView`, which turns `press`, `move` and
  `release` of the mouse into a shape of the current `ShapeKind` and colour,
  and `build_shape(kind, start, end, color)`, which builds a shape from two
  corner points.
- `shapedraw.app` – `DrawingSession`, which ties the view, the current colour
  and shape type, saving, opening and undo together, and `main`, the command
  line.

## Drawing with the view

```python
from shapedraw.paint_view import PaintView, ShapeKind
from shapedraw.shapes import rgb

view = PaintView()
view.set_current_color(rgb(255, 0, 0), True)   # recorded in the history
view.set_current_shape_type(ShapeKind.ELLIPSE)
view.press(10, 10)
preview = view.move(40, 30)                     # the shape as it would be now
shape = view.release(60, 50)                    # adds a red ellipse
```

`move` and `release` return `None` when no drag is in progress. A circle
takes the centre of the dragged box as its centre and half of the box's
diagonal as its radius.

## Drawing on a surface

Every shape's `draw(canvas)` calls the canvas it is given, so any object with
these two methods can show a drawing:

```python
class Canvas:
    def rectangle(self, rect, color, pen_width): ...
    def ellipse(self, rect, color, pen_width): ...
```

Circles are drawn as ellipses in their bounding square with a pen width of 2;
rectangles and ellipses use a pen width of 1.

## Undo

Each added shape and each recorded colour change goes onto the history.
`DrawingSession.undo()` takes the newest entry off and returns it (or `None`
when there is nothing to undo): an added shape is removed from the drawing,
and a colour change returns to the newest colour still in the history, or
white when none is left (`last_valid_color()`). Only the last ten steps are
kept.

## File format

A `.shape` file starts with the number of shapes as an unsigned 64-bit
integer, followed by each shape: a signed 32-bit type id (0 rectangle,
1 circle, 2 ellipse), its unsigned 32-bit colour, then its geometry as signed
32-bit integers – left, top, right, bottom for rectangles and ellipses; centre
x, centre y and radius for circles. All values are little-endian.

## Command line

```
shapedraw script.txt
shapedraw < script.txt
```

The `shapedraw` command reads commands, one per line, from the file given or
from standard input (`-` or no argument). Blank lines and lines starting with
`#` are skipped. The commands are:

- `color R G B` – switch to a new colour, recorded for undo
- `shape rectangle|circle|ellipse` – choose the shape type
- `drag X1 Y1 X2 Y2` – draw a shape from one corner to the other
- `undo` – undo the newest step
- `save PATH` / `open PATH` – write or read a `.shape` file
- `list` – print every shape in the drawing

The first failing line is reported on standard error and the command exits
with status 1; otherwise it exits with 0.

## What the package does not do

There is no window or screen: nothing is rendered on its own, and the palette
and view are driven by calling their methods with coordinates. To see a
drawing, pass a canvas of your own to `draw`.