"""A drawing session and a command-driven front end for it."""

from __future__ import annotations

import argparse
import os
import sys
from typing import TextIO

from shapedraw.history import OperationRecord, OpType
from shapedraw.paint_view import PaintView, ShapeKind
from shapedraw.shape_manager import ShapeFormatError
from shapedraw.shapes import BLACK, rgb

DEFAULT_UNDO_COLOR = rgb(255, 255, 255)


class DrawingSession:
    """The state of one drawing: its view, current colour and shape type."""

    def __init__(self) -> None:
        self.view = PaintView()
        self.current_color = BLACK
        self.current_shape_type = ShapeKind.RECTANGLE

    def change_color(self, color: int) -> None:
        """Switch to a new drawing colour, recording it for undo."""
        self.current_color = color
        self.view.set_current_color(color, True)

    def select_shape_type(self, kind: ShapeKind | int) -> None:
        kind = ShapeKind(kind)
        self.current_shape_type = kind
        self.view.set_current_shape_type(kind)

    def save(self, path: str | os.PathLike[str]) -> None:
        self.view.shape_manager.save(path)

    def open(self, path: str | os.PathLike[str]) -> None:
        self.view.shape_manager.load(path)

    def undo(self) -> OperationRecord | None:
        """Undo the newest operation and return it, or None if there was none."""
        record = self.view.history.pop()
        if record is None:
            return None
        if record.type is OpType.CHANGE_COLOR:
            self.current_color = self.last_valid_color()
            self.view.set_current_color(self.current_color, False)
        elif record.type is OpType.ADD_SHAPE and len(self.view.shape_manager):
            self.view.shape_manager.delete_shape()
        return record

    def last_valid_color(self) -> int:
        """Return the newest recorded colour, or white when none is recorded."""
        return next(
            (rec.color for rec in self.view.history if rec.type is OpType.CHANGE_COLOR),
            DEFAULT_UNDO_COLOR,
        )


class _CommandError(Exception):
    pass


def _ints(words: list[str], count: int) -> list[int]:
    if len(words) != count:
        raise _CommandError(f"expected {count} numbers")
    try:
        return [int(word) for word in words]
    except ValueError as exc:
        raise _CommandError(str(exc)) from exc


def _run_command(session: DrawingSession, words: list[str], out: TextIO) -> None:
    command, args = words[0].lower(), words[1:]
    if command == "color":
        session.change_color(rgb(*_ints(args, 3)))
    elif command == "shape":
        if len(args) != 1:
            raise _CommandError("expected a shape name")
        try:
            session.select_shape_type(ShapeKind[args[0].upper()])
        except KeyError as exc:
            raise _CommandError(f"unknown shape: {args[0]}") from exc
    elif command == "drag":
        x1, y1, x2, y2 = _ints(args, 4)
        session.view.press(x1, y1)
        session.view.move(x2, y2)
        session.view.release(x2, y2)
    elif command == "undo":
        session.undo()
    elif command in ("save", "open"):
        if len(args) != 1:
            raise _CommandError("expected a path")
        getattr(session, command)(args[0])
    elif command == "list":
        for shape in session.view.shape_manager:
            print(repr(shape), file=out)
    else:
        raise _CommandError(f"unknown command: {words[0]}")


def main(argv: list[str] | None = None) -> int:
    """Run drawing commands from a script file or standard input."""
    parser = argparse.ArgumentParser(
        prog="shapedraw",
        description="Draw shapes with commands: color R G B, shape NAME, "
        "drag X1 Y1 X2 Y2, undo, save PATH, open PATH, list.",
    )
    parser.add_argument("script", nargs="?", default="-", help="command file, '-' for stdin")
    args = parser.parse_args(argv)

    session = DrawingSession()
    try:
        if args.script == "-":
            lines = sys.stdin.read().splitlines()
        else:
            with open(args.script, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
    except OSError as exc:
        print(f"shapedraw: {exc}", file=sys.stderr)
        return 1

    for number, line in enumerate(lines, start=1):
        words = line.split()
        if not words or words[0].startswith("#"):
            continue
        try:
            _run_command(session, words, sys.stdout)
        except (_CommandError, ShapeFormatError, OSError) as exc:
            print(f"shapedraw: line {number}: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())