"""Undo history of drawing operations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from shapedraw.shapes import Shape

CLR_NONE = 0xFFFFFFFF
HISTORY_LIMIT = 10


class OpType(Enum):
    CHANGE_COLOR = "change_color"
    ADD_SHAPE = "add_shape"


@dataclass(frozen=True)
class OperationRecord:
    """One undoable operation: a colour change or an added shape."""

    type: OpType
    color: int = CLR_NONE
    shape: Shape | None = None

    @classmethod
    def change_color(cls, color: int) -> OperationRecord:
        return cls(OpType.CHANGE_COLOR, color, None)

    @classmethod
    def add_shape(cls, shape: Shape) -> OperationRecord:
        return cls(OpType.ADD_SHAPE, CLR_NONE, shape)


class HistoryManager:
    """The most recent operations, newest first, at most HISTORY_LIMIT kept."""

    def __init__(self) -> None:
        self._records: deque[OperationRecord] = deque(maxlen=HISTORY_LIMIT)

    def push(self, record: OperationRecord) -> None:
        """Add a record; the oldest one is dropped once the limit is passed."""
        self._records.appendleft(record)

    def pop(self) -> OperationRecord | None:
        """Remove and return the newest record, or None when there is none."""
        if not self._records:
            return None
        return self._records.popleft()

    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[OperationRecord]:
        """Iterate from the newest record to the oldest."""
        return iter(self._records)