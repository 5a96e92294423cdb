"""Formatting of the hexadecimal conversions: %x, %X and %p.

As with the other conversions, ``s`` holds the ``%`` at ``s[i]`` and the
conversion letter at ``s[i + 1]``, with the options already removed, and
the result is ``s`` with those two characters replaced by the field.
"""

import string

from .converters import hexa_converter, length_converter_unsigned

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1

_POINTER_DIGITS = frozenset(string.digits + "abcdef")


def _splice(s, i, field, end=None):
    """Replace ``s[i:end]`` (two characters by default) with ``field``."""
    return s[:i] + field + s[(i + 2 if end is None else end):]


def format_hex(s, i, n, precision, modifier, flag, width):
    """Format ``n`` in base 16.

    The letter case follows the conversion letter at ``s[i + 1]``.  A
    negative ``n`` is taken as a 32-bit int.  The ``#`` flag adds a ``0x``
    prefix (lower case for both letters); the ``0`` flag pads with zeros
    unless a precision is given.  A zero value with a precision of 0
    prints no digits.
    """
    n = n & _MASK32 if n < 0 else n & _MASK64
    if flag == "0" and precision > 0:
        flag = None
    n = length_converter_unsigned(n, modifier)
    case = "x" if s[i + 1 : i + 2] == "x" else "X"
    digits = hexa_converter(n, case)
    prefix = "0x" if flag == "#" else ""
    zeros = precision - len(digits)
    width -= len(digits) + len(prefix)
    if zeros > 0:
        width -= zeros
    width = max(width, 0)
    if digits != "0" or precision != 0:
        body = prefix + "0" * max(zeros, 0) + digits
    else:
        body = ""
    if flag == "-":
        field = body + " " * width
    else:
        field = ("0" if flag == "0" else " ") * width + body
    return _splice(s, i, field)


def format_pointer(s, i, flag, width):
    """Pad a pointer already written at ``s[i]`` as ``0x`` and hex digits.

    The pointer is taken to run from ``s[i]`` over every lower-case hex
    digit that follows the ``0x``.  It is padded with spaces to ``width``,
    on the right with the ``-`` flag and on the left otherwise.
    """
    end = i + 2
    while end < len(s) and s[end] in _POINTER_DIGITS:
        end += 1
    pointer = "0x" + s[i + 2 : end]
    pad = " " * max(width - len(pointer), 0)
    field = pointer + pad if flag == "-" else pad + pointer
    return _splice(s, i, field, end)