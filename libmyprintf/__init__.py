"""Printf-style formatting with C-like conversions, plus small string and integer helpers."""

__version__ = "0.1.0"

__all__ = [
    "converters",
    "spec",
    "mathutils",
    "numeric",
    "hexadecimal",
    "text",
    "strutils",
    "printf",
]