"""The standard colour palette: a 4 x 4 grid of colours to pick from."""

from __future__ import annotations

from shapedraw.shapes import BLACK, Point, Rect, rgb

STANDARD_COLORS: tuple[int, ...] = (
    rgb(0, 0, 0), rgb(128, 0, 0), rgb(0, 128, 0), rgb(128, 128, 0),
    rgb(0, 0, 128), rgb(128, 0, 128), rgb(0, 128, 128), rgb(192, 192, 192),
    rgb(128, 128, 128), rgb(255, 0, 0), rgb(0, 255, 0), rgb(255, 255, 0),
    rgb(0, 0, 255), rgb(255, 0, 255), rgb(0, 255, 255), rgb(255, 255, 255),
)

GRID = Rect(40, 60, 370, 270)
ROWS = 4
COLS = 4
CELL_MARGIN = 5
CELL_WIDTH = (GRID.width() - 10) // COLS
CELL_HEIGHT = (GRID.height() - 10) // ROWS


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def color_at(x: int, y: int) -> int | None:
    """Return the palette colour under the point, or None outside the grid."""
    if not GRID.contains(Point(x, y)):
        return None
    col = _trunc_div(x - GRID.left - CELL_MARGIN, CELL_WIDTH)
    row = _trunc_div(y - GRID.top - CELL_MARGIN, CELL_HEIGHT)
    if 0 <= col < COLS and 0 <= row < ROWS:
        return STANDARD_COLORS[row * COLS + col]
    return None


def cell_rects() -> list[tuple[Rect, int]]:
    """Return each palette cell's rectangle with its colour, row by row."""
    return [
        (
            Rect(
                GRID.left + col * CELL_WIDTH + CELL_MARGIN,
                GRID.top + row * CELL_HEIGHT + CELL_MARGIN,
                GRID.left + (col + 1) * CELL_WIDTH,
                GRID.top + (row + 1) * CELL_HEIGHT,
            ),
            STANDARD_COLORS[row * COLS + col],
        )
        for row in range(ROWS)
        for col in range(COLS)
    ]


class ColorPicker:
    """Chooses a colour from the palette, starting from an initial colour."""

    def __init__(self, initial_color: int = BLACK) -> None:
        self.initial_color = initial_color
        self.selected_color = initial_color

    def click(self, x: int, y: int) -> int:
        """Select the colour under the point, if any; return the selection."""
        color = color_at(x, y)
        if color is not None:
            self.selected_color = color
        return self.selected_color

    def accept(self) -> int:
        """Keep the current selection and return it."""
        return self.selected_color

    def cancel(self) -> int:
        """Restore the initial colour and return it."""
        self.selected_color = self.initial_color
        return self.selected_color