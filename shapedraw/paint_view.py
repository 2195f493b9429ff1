"""The drawing area: turns mouse drags into shapes and records history."""

from __future__ import annotations

import math
from enum import IntEnum

from shapedraw.history import HistoryManager, OperationRecord
from shapedraw.shape_manager import ShapeManager
from shapedraw.shapes import (
    BLACK,
    Canvas,
    CircleShape,
    EllipseShape,
    Point,
    Rect,
    RectangleShape,
    Shape,
)


class ShapeKind(IntEnum):
    RECTANGLE = 0
    CIRCLE = 1
    ELLIPSE = 2


def _half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


def build_shape(kind: ShapeKind | int, start: Point, end: Point, color: int) -> Shape:
    """Build the shape of the given kind spanned by a drag from start to end.

    A circle is centred in the dragged rectangle, with half its diagonal
    as radius.
    """
    kind = ShapeKind(kind)
    rect = Rect(start.x, start.y, end.x, end.y).normalized()
    if kind is ShapeKind.RECTANGLE:
        return RectangleShape(rect, color)
    if kind is ShapeKind.CIRCLE:
        radius = int(math.sqrt(rect.width() ** 2 + rect.height() ** 2) / 2)
        center = Point(_half(rect.left + rect.right), _half(rect.top + rect.bottom))
        return CircleShape(center, radius, color)
    return EllipseShape(rect, color)


class PaintView:
    """Collects shapes drawn by press, move and release of the mouse."""

    def __init__(self, shape_manager: ShapeManager | None = None) -> None:
        self.shape_manager = shape_manager if shape_manager is not None else ShapeManager()
        self.history = HistoryManager()
        self.current_color = BLACK
        self.current_shape_type = ShapeKind.RECTANGLE
        self._start = Point(0, 0)
        self._end = Point(0, 0)
        self._old_end = Point(0, 0)
        self._capturing = False

    @property
    def capturing(self) -> bool:
        """Whether a drag is in progress."""
        return self._capturing

    def set_current_color(self, color: int, add: bool) -> None:
        """Set the drawing colour; record the change in history when add is true."""
        self.current_color = color
        if add:
            self.history.push(OperationRecord.change_color(color))

    def set_current_shape_type(self, kind: ShapeKind | int) -> None:
        self.current_shape_type = ShapeKind(kind)

    def press(self, x: int, y: int) -> None:
        """Start a drag at the point."""
        self._start = self._end = self._old_end = Point(x, y)
        self._capturing = True

    def move(self, x: int, y: int) -> Shape | None:
        """Continue a drag; return the preview shape, or None when not dragging."""
        if not self._capturing:
            return None
        point = Point(x, y)
        self._old_end = point
        return self.preview_shape(self._start, point)

    def release(self, x: int, y: int) -> Shape | None:
        """Finish a drag, adding and returning the new shape."""
        if not self._capturing:
            return None
        self._capturing = False
        self._end = Point(x, y)
        shape = build_shape(self.current_shape_type, self._start, self._end, self.current_color)
        self.shape_manager.add_shape(shape)
        self.history.push(OperationRecord.add_shape(shape.clone()))
        return shape

    def draw(self, canvas: Canvas) -> None:
        if len(self.shape_manager):
            self.shape_manager.draw_all(canvas)

    def preview_shape(self, start: Point, end: Point) -> Shape:
        """Return the shape a drag from start to end would currently produce."""
        return build_shape(self.current_shape_type, start, end, self.current_color)