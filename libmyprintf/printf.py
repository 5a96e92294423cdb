"""The formatter itself: walks a format string and expands each conversion.

Supported conversions are ``%c``, ``%s``, ``%d``/``%i``, ``%o``, ``%u``,
``%x``/``%X``, ``%b`` (binary), ``%S`` (string with unprintable
characters as ``\\NNN``), ``%p``, ``%m`` (the text ``Success``) and
``%%``.  Each may carry one flag (``#0- +``), a width, a precision and a
length modifier (``hh``, ``h``, ``l``, ``ll``, ``q``).
"""

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from .hexadecimal import format_hex, format_pointer
from .numeric import format_binary, format_decimal, format_int, format_octal
from .spec import parse_spec
from .text import format_char, format_string, format_string_octal

_MASK32 = (1 << 32) - 1


def _unsigned(n):
    """Take a negative argument as the 32-bit int it would be passed as."""
    if n is None:
        return 0
    return n & _MASK32 if n < 0 else n


@dataclass
class _Cursor:
    """The format being rewritten, the position in it and current options."""

    s: str
    args: Iterator[Any]
    i: int = 0
    width: int = 0
    precision: int = 0
    flag: str | None = None
    modifier: str | None = None

    def at(self, letters):
        pair = self.s[self.i : self.i + 2]
        return len(pair) == 2 and pair[0] == "%" and pair[1] in letters

    def next_arg(self):
        try:
            return next(self.args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def read_options(self):
        self.width = 0
        self.precision = 0
        if self.s[self.i] == "%" and (self.i == 0 or self.s[self.i - 1] != "%"):
            spec, self.s = parse_spec(self.s, self.i)
            self.flag = spec.flag
            self.width = spec.width
            self.precision = spec.precision
            self.modifier = spec.modifier


def _char(c):
    c.s = format_char(c.s, c.i, c.next_arg(), c.flag, c.width)


def _string(c):
    c.s = format_string(c.s, c.i, c.next_arg(), c.flag, c.width)


def _int(c):
    c.s = format_int(
        c.s, c.i, c.next_arg(), c.precision, c.modifier, c.flag, c.width
    )


def _octal(c):
    c.s = format_octal(
        c.s, c.i, _unsigned(c.next_arg()), c.precision, c.modifier, c.flag, c.width
    )


def _decimal(c):
    c.s = format_decimal(
        c.s, c.i, _unsigned(c.next_arg()), c.precision, c.modifier, c.flag, c.width
    )


def _hex(c):
    c.s = format_hex(
        c.s, c.i, _unsigned(c.next_arg()), c.precision, c.modifier, c.flag, c.width
    )


def _binary(c):
    c.s = format_binary(
        c.s, c.i, _unsigned(c.next_arg()), c.precision, c.flag, c.width
    )


def _string_octal(c):
    c.s = format_string_octal(c.s, c.i, c.next_arg(), c.flag, c.width)


def _pointer(c):
    c.s = c.s[: c.i + 1] + "x" + c.s[c.i + 2 :]
    c.s = format_hex(c.s, c.i, _unsigned(c.next_arg()), c.precision, "l", "#", 0)
    c.s = format_pointer(c.s, c.i, c.flag, c.width)


def _errno(c):
    c.s = format_string(c.s, c.i, "Success", c.flag, c.width)


def _percent(c):
    c.s = format_char(c.s, c.i, "%", None, 0)


# Checked in this order at every position, each on the format as the
# previous one left it.
_HANDLERS: tuple[tuple[str, Callable[[_Cursor], None]], ...] = (
    ("c", _char),
    ("s", _string),
    ("di", _int),
    ("o", _octal),
    ("u", _decimal),
    ("xX", _hex),
    ("b", _binary),
    ("S", _string_octal),
    ("p", _pointer),
    ("m", _errno),
    ("%", _percent),
)


def sprintf(fmt, *args):
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Raises TypeError when a conversion finds no argument left.
    """
    cursor = _Cursor(fmt, iter(args))
    while cursor.i < len(cursor.s):
        cursor.read_options()
        for letters, handler in _HANDLERS:
            if cursor.at(letters):
                handler(cursor)
        cursor.i += 1
    return cursor.s


def printf(fmt, *args, file=None):
    """Format like :func:`sprintf`, write the result and return it.

    The text goes to ``file``, or to standard output when none is given.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return text