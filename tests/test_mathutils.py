import pytest

from libmyprintf.mathutils import (
    compute_power,
    compute_square_root,
    find_prime_sup,
    is_prime,
)


@pytest.mark.parametrize("nb", [-7, -2, 0, 1, 3, 10])
def test_power_zero_exponent_is_one(nb):
    assert compute_power(nb, 0) == 1


@pytest.mark.parametrize("nb", [2, 5, -3])
def test_power_negative_exponent_is_zero(nb):
    assert compute_power(nb, -1) == 0


@pytest.mark.parametrize("nb, p", [(2, 5), (3, 7), (-3, 4), (10, 6), (-2, 9)])
def test_power_recurrence(nb, p):
    assert compute_power(nb, p + 1) == nb * compute_power(nb, p)


def test_power_overflow_is_zero():
    assert compute_power(2, 31) == 0
    assert compute_power(2, 40) == 0
    assert compute_power(46341, 2) == 0


def test_power_reaching_int_min():
    assert compute_power(-2, 31) == -2147483648


def test_power_of_one_with_large_exponent():
    assert compute_power(1, 10**6) == 1
    assert compute_power(-1, 10**6 + 1) == -1


@pytest.mark.parametrize("k", [0, 1, 2, 12, 46340])
def test_square_root_of_perfect_squares(k):
    assert compute_square_root(k * k) == k


@pytest.mark.parametrize("k", [1, 3, 100, 46339])
def test_square_root_of_non_squares_is_zero(k):
    assert compute_square_root(k * k + 1) == 0


def test_square_root_of_negative_is_zero():
    assert compute_square_root(-16) == 0


@pytest.mark.parametrize("nb", [-5, 0, 1])
def test_small_numbers_are_not_prime(nb):
    assert not is_prime(nb)


@pytest.mark.parametrize("a, b", [(2, 2), (3, 5), (7, 11), (13, 17)])
def test_products_are_not_prime(a, b):
    assert not is_prime(a * b)


def test_two_is_prime():
    assert is_prime(2)


@pytest.mark.parametrize("nb", [0, 4, 14, 24, 90, 1000])
def test_find_prime_sup_is_next_prime(nb):
    found = find_prime_sup(nb)
    assert found >= nb
    assert is_prime(found)
    assert not any(is_prime(m) for m in range(nb, found))


@pytest.mark.parametrize("a, b", [(3, 5), (7, 11)])
def test_find_prime_sup_of_prime_is_itself(a, b):
    assert find_prime_sup(a) == a
    assert find_prime_sup(b) == b


def test_find_prime_sup_of_negative():
    assert find_prime_sup(-5) == 2