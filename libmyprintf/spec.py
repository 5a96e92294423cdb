"""Parsing of the flag, width, precision and length parts of a conversion.

Each finder reads the part that follows the ``%`` at index ``i``; each
``strip_*`` function returns the format with that part removed, so the
parts are read and removed in order: flag, width, precision, length.
"""

import re
import string
from dataclasses import dataclass

FLAGS = "#0- +"
LENGTH_LETTERS = "hlq"

_LEADING_DIGITS = re.compile(r"[0-9]*")
_INT32_MAX = 2**31 - 1


@dataclass(frozen=True)
class ConversionSpec:
    """The options read from one conversion; precision -1 means none."""

    flag: str | None = None
    width: int = 0
    precision: int = -1
    modifier: str | None = None


def _wrap_int32(n):
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n >> 31 else n


def _char_at(s, j):
    return s[j] if 0 <= j < len(s) else ""


def _is_letter(c):
    return len(c) == 1 and c in string.ascii_letters


def _skip(s, j, keep):
    while j < len(s) and keep(s[j]):
        j += 1
    return j


def _cut(s, i, end):
    return s[: max(i, 0) + 1] + s[end:]


def _in_precision(c):
    return not _is_letter(c) and c != "%"


def get_number(text):
    """Read an integer at the start of ``text``.

    Any run of leading signs is accepted, an odd count of ``-`` making the
    number negative.  An unsigned number beyond the 32-bit range gives 0.
    """
    signs = len(text) - len(text.lstrip("+-"))
    if signs:
        digits = _LEADING_DIGITS.match(text, signs).group()
        value = int(digits) if digits else 0
        if text.count("-", 0, signs) % 2:
            value = -value
        return _wrap_int32(value)
    digits = _LEADING_DIGITS.match(text).group()
    value = int(digits) if digits else 0
    return 0 if value > _INT32_MAX else value


def length_modifier(s, i):
    """Return the length modifier after ``s[i]``: H, L, h, l or None.

    ``hh`` is reported as ``H``; ``ll`` and ``q`` as ``L``.
    """
    first, second = _char_at(s, i + 1), _char_at(s, i + 2)
    if first == "h" and second == "h":
        return "H"
    if first == "l" and second == "l":
        return "L"
    if first in ("h", "l"):
        return first
    if first == "q":
        return "L"
    return None


def flag_finder(s, i):
    """Return the flag character right after ``s[i]``, or None."""
    c = _char_at(s, i + 1)
    return c if c and c in FLAGS else None


def width_finder(s, i):
    """Return the field width written right after ``s[i]``, or 0."""
    end = _skip(s, i + 1, lambda c: c in string.digits)
    return get_number(s[i + 1 : end])


def precision(s, i):
    """Return the precision after ``s[i]``, or -1 when there is none.

    The precision runs up to the conversion letter or ``%``; the character
    right after ``s[i]`` (the dot) is skipped.
    """
    end = _skip(s, i + 1, _in_precision)
    if end - i > 1:
        return get_number(s[i + 2 : end])
    return -1


def strip_flags(s, i):
    """Return ``s`` without the flag characters that follow ``s[i]``."""
    return _cut(s, i, _skip(s, i + 1, lambda c: c in FLAGS))


def strip_width(s, i):
    """Return ``s`` without the width digits that follow ``s[i]``."""
    return _cut(s, i, _skip(s, i + 1, lambda c: c in string.digits))


def strip_precision(s, i):
    """Return ``s`` without what lies between ``s[i]`` and the next letter."""
    return _cut(s, i, _skip(s, i + 1, _in_precision))


def strip_length(s, i):
    """Return ``s`` without the length letters that follow ``s[i]``."""
    return _cut(s, i, _skip(s, i + 1, lambda c: c in LENGTH_LETTERS))


def parse_spec(s, i):
    """Read the conversion options at ``s[i]``.

    Returns the options and the format with them removed, so that the
    conversion letter follows ``s[i]`` directly.
    """
    flag = flag_finder(s, i)
    s = strip_flags(s, i)
    width = width_finder(s, i)
    s = strip_width(s, i)
    prec = precision(s, i)
    s = strip_precision(s, i)
    modifier = length_modifier(s, i)
    s = strip_length(s, i)
    return ConversionSpec(flag, width, prec, modifier), s