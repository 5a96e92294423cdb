"""Formatting of the character and string conversions: %c, %s and %S.

``s`` holds the ``%`` at ``s[i]`` and the conversion letter at
``s[i + 1]``; the result is ``s`` with those two characters replaced by
the field, padded with spaces to ``width`` (on the right with ``-``).
"""

from .converters import base_converter, octal_escape_digits


def _splice(s, i, field):
    return s[:i] + field + s[i + 2 :]


def _pad(field, flag, width):
    pad = " " * max(width - len(field), 0)
    return field + pad if flag == "-" else pad + field


def format_char(s, i, c, flag, width):
    """Insert the single character ``c``; an int is taken as a byte value."""
    if isinstance(c, int):
        c = chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return _splice(s, i, _pad(c, flag, width))


def format_string(s, i, text, flag, width):
    """Insert ``text`` as it is."""
    return _splice(s, i, _pad(text, flag, width))


def _escape_codes(ch):
    code = ord(ch)
    if code <= 0xFF:
        return (code,)
    return tuple(ch.encode("utf-8"))


def _escape_unprintable(text):
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    parts = []
    for ch in text:
        if 32 <= ord(ch) <= 127:
            parts.append(ch)
        else:
            parts.extend(
                "\\" + octal_escape_digits(base_converter(code, 8))
                for code in _escape_codes(ch)
            )
    return "".join(parts)


def format_string_octal(s, i, text, flag, width):
    """Insert ``text`` with unprintable characters written as ``\\NNN``.

    Characters below 32 or above 127 are escaped with their three-digit
    octal byte value; a character beyond one byte is escaped byte by byte
    in UTF-8.  ``text`` may also be given as bytes.
    """
    return _splice(s, i, _pad(_escape_unprintable(text), flag, width))