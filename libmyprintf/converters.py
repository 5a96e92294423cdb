"""Integer-to-text conversions used by the formatter.

Values are treated the way fixed-width machine integers are: signed
arguments wrap to 32 bits, unsigned ones to 64 bits, and the length
modifiers narrow them further.
"""

_MASK64 = (1 << 64) - 1

# Length modifier -> width in bits of the type the value is narrowed to.
_SIGNED_BITS = {"H": 8, "h": 16, "l": 32, "L": 32, "q": 32}
_UNSIGNED_BITS = {"H": 8, "h": 16, "l": 64, "L": 64, "q": 64}


def _wrap_signed(n, bits):
    """Wrap ``n`` into a two's complement integer of ``bits`` bits."""
    n &= (1 << bits) - 1
    if n >> (bits - 1):
        n -= 1 << bits
    return n


def base_converter(n, base):
    """Return ``n`` written in ``base``, read back as a decimal number.

    ``base_converter(2558, 8)`` gives ``4776``.  A value that is an exact
    power of the base (other than the base itself) keeps the quirk of the
    digit-by-digit algorithm, and 1 converts to 0.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    n &= _MASK64
    if n == base:
        return 10
    scale, place = 1, 1
    while scale < n:
        scale *= base
        place *= 10
    scale //= base
    place //= 10
    result = 0
    rest = n
    while rest and scale:
        digit, rest = divmod(rest, scale)
        result += digit * place
        scale //= base
        place //= 10
    return result & _MASK64


def binary_converter(n):
    """Return the binary digits of ``n``; zero gives an empty string."""
    n &= _MASK64
    return format(n, "b") if n else ""


def hexa_converter(n, case):
    """Return the hexadecimal digits of ``n``.

    ``case`` is ``"x"`` for lower-case letters, anything else for upper
    case.  Trailing zero digits are dropped once the remaining value is
    exhausted, as the digit loop stops on a zero remainder.
    """
    n &= _MASK64
    if n == 0:
        return "0"
    if n == 16:
        return "10"
    letter_offset = 87 if case == "x" else 55
    scale = 1
    while scale < n:
        scale *= 16
    scale //= 16
    if scale == 0:
        raise ValueError(f"cannot convert {n} to hexadecimal")
    digits = []
    while n:
        value, n = divmod(n, scale)
        digits.append(chr(value + (48 if value <= 9 else letter_offset)))
        scale //= 16
    return "".join(digits)


def int_to_str(n):
    """Return the decimal text of ``n`` taken as a 32-bit signed integer."""
    return str(_wrap_signed(n, 32))


def uint_to_str(n):
    """Return the decimal text of ``n`` taken as a 64-bit unsigned integer."""
    return str(n & _MASK64)


def octal_escape_digits(code):
    """Return ``code`` zero-padded to three digits, as used in ``\\NNN``."""
    return f"{code:03d}" if code > 0 else "000"


def length_converter_int(n, modifier):
    """Narrow ``n`` according to a signed length modifier and format it.

    ``modifier`` is one of ``H`` (hh), ``h``, ``l``, ``L`` (ll) or ``q``;
    an empty modifier formats ``n`` as a plain int.
    """
    if not modifier:
        return int_to_str(n)
    try:
        bits = _SIGNED_BITS[modifier]
    except KeyError:
        raise ValueError(f"unknown length modifier {modifier!r}") from None
    return int_to_str(_wrap_signed(_wrap_signed(n, 32), bits))


def length_converter_unsigned(n, modifier):
    """Narrow ``n`` according to an unsigned length modifier.

    An empty modifier leaves the value as a 64-bit unsigned integer.
    """
    if not modifier:
        return n & _MASK64
    try:
        bits = _UNSIGNED_BITS[modifier]
    except KeyError:
        raise ValueError(f"unknown length modifier {modifier!r}") from None
    return n & ((1 << bits) - 1)