from shapedraw.history import (
    CLR_NONE,
    HISTORY_LIMIT,
    HistoryManager,
    OperationRecord,
    OpType,
)
from shapedraw.shapes import Point, Rect, CircleShape, RectangleShape, rgb


def test_change_color_record():
    record = OperationRecord.change_color(rgb(1, 2, 3))
    assert record.type is OpType.CHANGE_COLOR
    assert record.color == rgb(1, 2, 3)
    assert record.shape is None


def test_add_shape_record_has_no_color():
    shape = RectangleShape(Rect(0, 0, 5, 5))
    record = OperationRecord.add_shape(shape)
    assert record.type is OpType.ADD_SHAPE
    assert record.shape is shape
    assert record.color == CLR_NONE
    assert CLR_NONE == 0xFFFFFFFF


def test_new_history_is_empty():
    history = HistoryManager()
    assert history.is_empty()
    assert len(history) == 0
    assert history.pop() is None


def test_pop_returns_newest_first():
    history = HistoryManager()
    first = OperationRecord.change_color(rgb(1, 0, 0))
    second = OperationRecord.add_shape(CircleShape(Point(1, 1), 3))
    history.push(first)
    history.push(second)
    assert not history.is_empty()
    assert history.pop() is second
    assert history.pop() is first
    assert history.pop() is None
    assert history.is_empty()


def test_iteration_is_newest_to_oldest():
    history = HistoryManager()
    records = [OperationRecord.change_color(rgb(i, 0, 0)) for i in range(4)]
    for record in records:
        history.push(record)
    assert list(history) == list(reversed(records))


def test_limit_drops_oldest_records():
    history = HistoryManager()
    records = [OperationRecord.change_color(rgb(i, i, i)) for i in range(HISTORY_LIMIT + 3)]
    for record in records:
        history.push(record)
    assert len(history) == HISTORY_LIMIT
    assert list(history) == list(reversed(records[3:]))


def test_limit_is_ten():
    history = HistoryManager()
    for i in range(25):
        history.push(OperationRecord.change_color(rgb(i, 0, 0)))
    assert len(history) == 10