"""A vector drawing model: shapes, undo history, a colour palette, a binary file format and a command line."""

__version__ = "0.1.0"

__all__ = ["app", "history", "palette", "paint_view", "shape_manager", "shapes"]