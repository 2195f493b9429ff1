import pytest

from shapedraw.history import OpType
from shapedraw.paint_view import PaintView, ShapeKind, build_shape
from shapedraw.shapes import (
    BLACK,
    CircleShape,
    EllipseShape,
    Point,
    Rect,
    RectangleShape,
    rgb,
)


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def rectangle(self, rect, color, pen_width):
        self.calls.append(("rectangle", rect, color))

    def ellipse(self, rect, color, pen_width):
        self.calls.append(("ellipse", rect, color))


RED = rgb(255, 0, 0)


def test_build_rectangle_is_normalized():
    shape = build_shape(ShapeKind.RECTANGLE, Point(10, 20), Point(0, 5), RED)
    assert shape == RectangleShape(Rect(0, 5, 10, 20), RED)


def test_build_ellipse_is_normalized():
    shape = build_shape(ShapeKind.ELLIPSE, Point(30, 40), Point(10, 20), RED)
    assert shape == EllipseShape(Rect(10, 20, 30, 40), RED)


def test_build_circle_uses_half_diagonal():
    shape = build_shape(ShapeKind.CIRCLE, Point(0, 0), Point(6, 8), RED)
    assert shape == CircleShape(Point(3, 4), 5, RED)


def test_build_circle_is_symmetric_in_drag_direction():
    a = build_shape(ShapeKind.CIRCLE, Point(-7, -3), Point(11, 9), RED)
    b = build_shape(ShapeKind.CIRCLE, Point(11, 9), Point(-7, -3), RED)
    assert a == b


def test_build_shape_accepts_int_kind():
    assert build_shape(2, Point(0, 0), Point(4, 4), RED) == EllipseShape(Rect(0, 0, 4, 4), RED)


def test_build_shape_rejects_unknown_kind():
    with pytest.raises(ValueError):
        build_shape(7, Point(0, 0), Point(1, 1), RED)


def test_drag_adds_shape_and_history():
    view = PaintView()
    view.set_current_color(RED, False)
    view.press(1, 2)
    shape = view.release(11, 22)
    assert shape == RectangleShape(Rect(1, 2, 11, 22), RED)
    assert list(view.shape_manager) == [shape]
    record = view.history.pop()
    assert record.type is OpType.ADD_SHAPE
    assert record.shape == shape
    assert record.shape is not shape
    assert not view.capturing


def test_release_without_press_does_nothing():
    view = PaintView()
    assert view.release(5, 5) is None
    assert len(view.shape_manager) == 0
    assert view.history.is_empty()


def test_move_returns_preview_only_while_dragging():
    view = PaintView()
    assert view.move(3, 3) is None
    view.set_current_shape_type(ShapeKind.ELLIPSE)
    view.press(0, 0)
    preview = view.move(5, 6)
    assert preview == view.preview_shape(Point(0, 0), Point(5, 6))
    assert len(view.shape_manager) == 0


def test_set_current_color_history():
    view = PaintView()
    view.set_current_color(RED, True)
    view.set_current_color(BLACK, False)
    assert view.current_color == BLACK
    assert len(view.history) == 1
    record = view.history.pop()
    assert record.type is OpType.CHANGE_COLOR
    assert record.color == RED


def test_set_current_shape_type_rejects_unknown():
    view = PaintView()
    with pytest.raises(ValueError):
        view.set_current_shape_type(3)


def test_draw_draws_every_shape_in_order():
    view = PaintView()
    view.set_current_shape_type(ShapeKind.RECTANGLE)
    view.press(0, 0)
    view.release(2, 2)
    view.set_current_shape_type(ShapeKind.ELLIPSE)
    view.press(5, 5)
    view.release(9, 9)
    canvas = RecordingCanvas()
    view.draw(canvas)
    assert [call[0] for call in canvas.calls] == ["rectangle", "ellipse"]
    assert canvas.calls[1][1] == Rect(5, 5, 9, 9)


def test_draw_empty_view_draws_nothing():
    canvas = RecordingCanvas()
    PaintView().draw(canvas)
    assert canvas.calls == []