"""Colours, point/size/rect geometry and translation of window messages into events."""

__version__ = "0.1.0"
__all__ = ["color", "point", "size", "rect", "events", "translate"]