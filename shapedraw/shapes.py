"""Drawable shapes, the geometry they use, and their binary record format.

Every shape record starts with a little-endian 32-bit type id, followed by
a 32-bit colour value (0x00BBGGRR) and the shape's geometry as signed
32-bit integers.
"""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, ClassVar, Protocol

_INT = struct.Struct("<i")
_COLOR = struct.Struct("<I")
_POINT = struct.Struct("<ii")
_RECT = struct.Struct("<iiii")


def rgb(red: int, green: int, blue: int) -> int:
    """Pack colour components into a 0x00BBGGRR colour value."""
    return (red & 0xFF) | ((green & 0xFF) << 8) | ((blue & 0xFF) << 16)


BLACK = rgb(0, 0, 0)


@dataclass(frozen=True)
class Point:
    """A point in device coordinates."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; right and bottom are exclusive."""

    left: int
    top: int
    right: int
    bottom: int

    def width(self) -> int:
        return self.right - self.left

    def height(self) -> int:
        return self.bottom - self.top

    def normalized(self) -> Rect:
        """Return the rectangle with left <= right and top <= bottom."""
        return Rect(
            min(self.left, self.right),
            min(self.top, self.bottom),
            max(self.left, self.right),
            max(self.top, self.bottom),
        )

    def contains(self, point: Point) -> bool:
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom


class Canvas(Protocol):
    """What a shape needs from a drawing surface."""

    def rectangle(self, rect: Rect, color: int, pen_width: int) -> None: ...

    def ellipse(self, rect: Rect, color: int, pen_width: int) -> None: ...


def _read(stream: BinaryIO, layout: struct.Struct) -> tuple:
    data = stream.read(layout.size)
    if data is None or len(data) != layout.size:
        raise EOFError("shape record is truncated")
    return layout.unpack(data)


def _read_color(stream: BinaryIO) -> int:
    return _read(stream, _COLOR)[0]


def _read_point(stream: BinaryIO) -> Point:
    return Point(*_read(stream, _POINT))


def _read_rect(stream: BinaryIO) -> Rect:
    return Rect(*_read(stream, _RECT))


def _pack_rect(rect: Rect) -> bytes:
    return _RECT.pack(rect.left, rect.top, rect.right, rect.bottom)


class Shape(ABC):
    """A filled shape drawn in a single colour."""

    TYPE_ID: ClassVar[int]
    color: int

    def _header(self) -> bytes:
        return _INT.pack(self.TYPE_ID) + _COLOR.pack(self.color)

    @abstractmethod
    def write(self, stream: BinaryIO) -> None:
        """Write the shape's record, type id first, to a binary stream."""

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Draw the shape filled with its colour."""

    @abstractmethod
    def clone(self) -> Shape:
        """Return an independent copy of the shape."""


@dataclass
class RectangleShape(Shape):
    TYPE_ID: ClassVar[int] = 0

    rect: Rect
    color: int = BLACK

    def write(self, stream: BinaryIO) -> None:
        stream.write(self._header() + _pack_rect(self.rect))

    @classmethod
    def read(cls, stream: BinaryIO) -> RectangleShape:
        """Read the body of a record whose type id was already consumed."""
        color = _read_color(stream)
        return cls(_read_rect(stream), color)

    def draw(self, canvas: Canvas) -> None:
        canvas.rectangle(self.rect, self.color, 1)

    def clone(self) -> RectangleShape:
        return RectangleShape(self.rect, self.color)


@dataclass
class CircleShape(Shape):
    TYPE_ID: ClassVar[int] = 1

    center: Point
    radius: int
    color: int = BLACK

    def write(self, stream: BinaryIO) -> None:
        stream.write(
            self._header()
            + _POINT.pack(self.center.x, self.center.y)
            + _INT.pack(self.radius)
        )

    @classmethod
    def read(cls, stream: BinaryIO) -> CircleShape:
        """Read the body of a record whose type id was already consumed."""
        color = _read_color(stream)
        center = _read_point(stream)
        (radius,) = _read(stream, _INT)
        return cls(center, radius, color)

    def draw(self, canvas: Canvas) -> None:
        c, r = self.center, self.radius
        canvas.ellipse(Rect(c.x - r, c.y - r, c.x + r, c.y + r), self.color, 2)

    def clone(self) -> CircleShape:
        return CircleShape(self.center, self.radius, self.color)


@dataclass
class EllipseShape(Shape):
    TYPE_ID: ClassVar[int] = 2

    bounds: Rect
    color: int = BLACK

    def write(self, stream: BinaryIO) -> None:
        stream.write(self._header() + _pack_rect(self.bounds))

    @classmethod
    def read(cls, stream: BinaryIO) -> EllipseShape:
        """Read the body of a record whose type id was already consumed."""
        color = _read_color(stream)
        return cls(_read_rect(stream), color)

    def draw(self, canvas: Canvas) -> None:
        canvas.ellipse(self.bounds, self.color, 1)

    def clone(self) -> EllipseShape:
        return EllipseShape(self.bounds, self.color)