"""The drawing's shapes and the .shape file format that stores them.

A file holds a little-endian 64-bit shape count followed by that many
shape records.
"""

from __future__ import annotations

import os
import struct
from typing import BinaryIO, Iterator

from shapedraw.shapes import Canvas, CircleShape, EllipseShape, RectangleShape, Shape

_COUNT = struct.Struct("<Q")
_TYPE_ID = struct.Struct("<i")

_SHAPE_TYPES: dict[int, type[RectangleShape] | type[CircleShape] | type[EllipseShape]] = {
    cls.TYPE_ID: cls for cls in (RectangleShape, CircleShape, EllipseShape)
}


class ShapeFormatError(ValueError):
    """Raised when shape data is malformed or truncated."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) != size:
        raise ShapeFormatError("shape data is truncated")
    return data


def read_shape(stream: BinaryIO) -> Shape:
    """Read one shape record, type id included, from a binary stream."""
    (type_id,) = _TYPE_ID.unpack(_read_exact(stream, _TYPE_ID.size))
    shape_type = _SHAPE_TYPES.get(type_id)
    if shape_type is None:
        raise ShapeFormatError("Unknown shape type")
    try:
        return shape_type.read(stream)
    except EOFError as exc:
        raise ShapeFormatError("shape data is truncated") from exc


class ShapeManager:
    """An ordered collection of shapes, drawn first to last."""

    def __init__(self) -> None:
        self._shapes: list[Shape] = []

    def add_shape(self, shape: Shape) -> None:
        self._shapes.append(shape)

    def delete_shape(self) -> None:
        """Remove the most recently added shape."""
        if not self._shapes:
            raise IndexError("no shape to delete")
        self._shapes.pop()

    def draw_all(self, canvas: Canvas) -> None:
        for shape in self._shapes:
            shape.draw(canvas)

    def clear(self) -> None:
        self._shapes.clear()

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def get_shape(self, index: int) -> Shape | None:
        """Return the shape at index, or None when there is none."""
        if 0 <= index < len(self._shapes):
            return self._shapes[index]
        return None

    def write(self, stream: BinaryIO) -> None:
        stream.write(_COUNT.pack(len(self._shapes)))
        for shape in self._shapes:
            shape.write(stream)

    def read(self, stream: BinaryIO) -> None:
        """Replace the current shapes with those read from the stream."""
        self._shapes.clear()
        (count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size))
        for _ in range(count):
            self._shapes.append(read_shape(stream))

    def save(self, path: str | os.PathLike[str]) -> None:
        with open(path, "wb") as stream:
            self.write(stream)

    def load(self, path: str | os.PathLike[str]) -> None:
        with open(path, "rb") as stream:
            self.read(stream)