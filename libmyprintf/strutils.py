"""ASCII string helpers: reversal, classification, case and comparison."""

import string

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_LETTERS = _LOWER | _UPPER
_DIGITS = frozenset(string.digits)

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_WORD_BREAKS = " +-"


def revstr(text):
    """Return ``text`` reversed."""
    return text[::-1]


def str_isalpha(text):
    """Return whether every character is an ASCII letter (True if empty)."""
    return all(c in _LETTERS for c in text)


def str_islower(text):
    """Return whether every character is a lower-case ASCII letter."""
    return all(c in _LOWER for c in text)


def str_isnum(text):
    """Return whether every character is an ASCII digit."""
    return all(c in _DIGITS for c in text)


def str_isprintable(text):
    """Return whether every character code lies between 32 and 127."""
    return all(32 <= ord(c) <= 127 for c in text)


def str_isupper(text):
    """Return whether every character is an upper-case ASCII letter."""
    return all(c in _UPPER for c in text)


def strcapitalize(text):
    """Lower-case ``text`` and upper-case the first letter of each word.

    A word starts the text or follows a space, ``+`` or ``-``.
    """
    out = []
    previous = None
    for c in text.translate(_TO_LOWER):
        if c in _LOWER and (previous is None or previous in _WORD_BREAKS):
            c = c.upper()
        out.append(c)
        previous = c
    return "".join(out)


def strcmp(s1, s2):
    """Return the difference of the first differing character codes, or 0.

    The end of a string counts as code 0.
    """
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    if len(s2) > len(s1):
        return -ord(s2[len(s1)])
    return 0


def strncmp(s1, s2, n):
    """Compare at most ``n`` characters; return -1, 0 or 1."""
    i = 0
    while i < n and i < len(s1) and i < len(s2) and s1[i] == s2[i]:
        i += 1
    if i == n or (i >= len(s1) and i >= len(s2)):
        return 0
    a = ord(s1[i]) if i < len(s1) else 0
    b = ord(s2[i]) if i < len(s2) else 0
    return 1 if a > b else -1


def strlowcase(text):
    """Return ``text`` with ASCII capitals turned to lower case."""
    return text.translate(_TO_LOWER)


def strupcase(text):
    """Return ``text`` with ASCII lower-case letters turned to capitals."""
    return text.translate(_TO_UPPER)