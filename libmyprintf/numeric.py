"""Formatting of the integer conversions: %d/%i, %u, %o, %b.

Every function takes the format ``s`` with the conversion letter at
``s[i + 1]`` (the ``%`` at ``s[i]``, options already removed) and returns
the format with those two characters replaced by the formatted field.
A precision of -1 means that none was given; ``flag`` is one of
``#``, ``0``, ``-``, `` ``, ``+`` or None.
"""

from .converters import (
    base_converter,
    binary_converter,
    length_converter_int,
    length_converter_unsigned,
    uint_to_str,
)

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1


def _wrap_int32(n):
    n &= _MASK32
    return n - (1 << 32) if n >> 31 else n


def _splice(s, i, field):
    """Replace the two characters at ``s[i]`` with ``field``."""
    return s[:i] + field + s[i + 2 :]


def _place(field, width, flag, pad_char=" "):
    """Pad ``field`` by ``width`` characters, on the right for ``-``."""
    width = max(width, 0)
    if flag == "-":
        return field + " " * width
    return pad_char * width + field


def format_digits(s, i, digits, precision, flag, width):
    """Insert a ready-made string of digits, padded to precision and width.

    A single ``"0"`` with a precision of 0 prints no digits.
    """
    zeros = precision - len(digits)
    width -= len(digits)
    if zeros > 0:
        width -= zeros
    if digits != "0" or precision != 0:
        body = "0" * max(zeros, 0) + digits
    else:
        body = ""
    return _splice(s, i, _place(body, width, flag))


def format_binary(s, i, n, precision, flag, width):
    """Format ``n`` in base 2."""
    return format_digits(s, i, binary_converter(n), precision, flag, width)


def format_unsigned(s, i, n, precision, flag, width):
    """Format ``n`` as an unsigned decimal number.

    With the ``#`` flag a leading ``0`` is added unless the precision
    already supplies leading zeros; the ``0`` flag is ignored when a
    precision is given.
    """
    n &= _MASK64
    if flag == "0" and precision > 0:
        flag = None
    digits = uint_to_str(n)
    zeros = precision - len(digits)
    alternate = flag == "#" and zeros <= 0
    width -= len(digits) + int(alternate)
    if zeros > 0:
        width -= zeros
    body = "0" if alternate else ""
    if n != 0 or precision != 0:
        body += "0" * max(zeros, 0) + digits
    pad_char = "0" if flag == "0" else " "
    return _splice(s, i, _place(body, width, flag, pad_char))


def format_decimal(s, i, n, precision, modifier, flag, width):
    """Format ``n`` as an unsigned 32-bit integer (``%u``).

    Only the ``0`` and ``-`` flags apply; others are dropped.
    """
    n &= _MASK32
    if flag not in ("0", "-"):
        flag = None
    n = length_converter_unsigned(n, modifier) & _MASK32
    return format_unsigned(s, i, n, precision, flag, width)


def format_octal(s, i, n, precision, modifier, flag, width):
    """Format ``n`` in base 8 (``%o``)."""
    n = length_converter_unsigned(n & _MASK64, modifier)
    return format_unsigned(s, i, base_converter(n, 8), precision, flag, width)


def format_int(s, i, n, precision, modifier, flag, width):
    """Format ``n`` as a signed 32-bit integer (``%d`` / ``%i``).

    The ``+`` and space flags add a sign to non-negative numbers; with the
    ``0`` flag a negative number keeps its sign in front of the zeros.
    """
    n = _wrap_int32(n)
    if precision > 0 and flag == "0":
        flag = None
    if flag == " " and width > 0:
        flag = None
    digits = length_converter_int(n, modifier)
    negative = digits.startswith("-")
    if flag in (" ", "+") and negative:
        flag = None
    zeros = precision - len(digits)
    width -= len(digits)
    if flag == "+":
        width -= 1
    width = max(width, 0)
    if negative:
        zeros += 1
    if zeros > 0:
        width -= zeros

    padding = ""
    if flag != "-" and width > 0:
        if flag == "0":
            padding = ("-" if negative else "0") + "0" * (width - 1)
        else:
            padding = " " * width
    sign = flag if flag in (" ", "+") else ""
    body = ""
    if n != 0 or precision != 0:
        if negative:
            body = "0" if flag == "0" else "-"
            digits = digits[1:]
        body += "0" * max(zeros, 0) + digits
    field = padding + sign + body
    if flag == "-":
        field += " " * max(width, 0)
    return _splice(s, i, field)