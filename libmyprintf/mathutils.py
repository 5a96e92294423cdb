"""Small integer arithmetic helpers working within the 32-bit int range."""

import math

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def compute_power(nb, p):
    """Return ``nb`` to the power ``p``.

    A negative exponent gives 0, and so does a result outside the 32-bit
    signed range.
    """
    if p < 0:
        return 0
    if abs(nb) <= 1:
        return nb**p
    result = 1
    for _ in range(p):
        result *= nb
        if not _INT32_MIN <= result <= _INT32_MAX:
            return 0
    return result


def compute_square_root(nb):
    """Return the integer square root of ``nb`` if it is a perfect square, else 0."""
    if nb <= 0:
        return 0
    root = math.isqrt(nb)
    return root if root * root == nb else 0


def is_prime(nb):
    """Return whether ``nb`` has exactly two positive divisors."""
    if nb < 2:
        return False
    return all(nb % divisor for divisor in range(2, math.isqrt(nb) + 1))


def find_prime_sup(nb):
    """Return the smallest prime greater than or equal to ``nb``."""
    while not is_prime(nb):
        nb += 1
    return nb