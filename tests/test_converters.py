import pytest

from libmyprintf.converters import (
    base_converter,
    binary_converter,
    hexa_converter,
    int_to_str,
    length_converter_int,
    length_converter_unsigned,
    octal_escape_digits,
    uint_to_str,
)


def test_base_converter_pos_int_to_base_10():
    assert base_converter(30, 10) == 30


def test_base_converter_to_octal():
    assert base_converter(2558, 8) == 4776


def test_base_converter_large_octal():
    assert base_converter(4294967241, 8) == 37777777711


def test_base_converter_value_equal_to_base():
    assert base_converter(8, 8) == 10


def test_base_converter_zero():
    assert base_converter(0, 8) == 0


@pytest.mark.parametrize("n", [2, 7, 100, 511, 2558, 250890769, 4294967241])
def test_base_converter_octal_round_trip(n):
    assert int(str(base_converter(n, 8)), 8) == n


def test_base_converter_rejects_small_base():
    with pytest.raises(ValueError):
        base_converter(10, 1)


def test_binary_converter_values():
    assert binary_converter(200) == "11001000"
    assert binary_converter(55) == "110111"
    assert binary_converter(2) == "10"


def test_binary_converter_zero_is_empty():
    assert binary_converter(0) == ""


@pytest.mark.parametrize("n", [1, 3, 5, 1023, 4294967295])
def test_binary_converter_round_trip(n):
    assert int(binary_converter(n), 2) == n


def test_hexa_converter_lower_and_upper():
    assert hexa_converter(4294967241, "x") == "ffffffc9"
    assert hexa_converter(4294967241, "X") == "FFFFFFC9"


def test_hexa_converter_known_values():
    assert hexa_converter(987789, "x") == "f128d"
    assert hexa_converter(8766, "x") == "223e"


def test_hexa_converter_special_values():
    assert hexa_converter(0, "x") == "0"
    assert hexa_converter(16, "x") == "10"


def test_hexa_converter_drops_trailing_zero_digits():
    assert hexa_converter(272, "x") == "11"


def test_hexa_converter_exact_power_quirk():
    assert hexa_converter(256, "x") == "g"


def test_hexa_converter_one_is_an_error():
    with pytest.raises(ValueError):
        hexa_converter(1, "x")


@pytest.mark.parametrize("n", [0x1234ABCD, 0xDEADBEEF, 0x7F, 0x223E])
def test_hexa_converter_round_trip(n):
    assert int(hexa_converter(n, "X"), 16) == n


def test_int_to_str_values():
    assert int_to_str(49) == "49"
    assert int_to_str(-500) == "-500"
    assert int_to_str(0) == "0"
    assert int_to_str(2147483647) == "2147483647"


def test_int_to_str_wraps_to_32_bits():
    assert int_to_str(3000000000) == "-1294967296"


def test_uint_to_str_values():
    assert uint_to_str(350000) == "350000"
    assert uint_to_str(0) == "0"


def test_octal_escape_digits():
    assert octal_escape_digits(24) == "024"
    assert octal_escape_digits(6) == "006"
    assert octal_escape_digits(202) == "202"
    assert octal_escape_digits(0) == "000"


def test_length_converter_int_short():
    assert length_converter_int(987560, "h") == "4520"


def test_length_converter_int_char():
    assert length_converter_int(130, "H") == "-126"


def test_length_converter_int_long_keeps_int():
    assert length_converter_int(-500, "l") == "-500"
    assert length_converter_int(-500, "q") == "-500"


def test_length_converter_int_without_modifier():
    assert length_converter_int(49, None) == "49"


def test_length_converter_int_unknown_modifier():
    with pytest.raises(ValueError):
        length_converter_int(1, "z")


def test_length_converter_unsigned_short():
    assert length_converter_unsigned(3000000000000, "h") == 12288


def test_length_converter_unsigned_long_keeps_value():
    assert length_converter_unsigned(3000000000000, "L") == 3000000000000
    assert length_converter_unsigned(3000000000000, "l") == 3000000000000


def test_length_converter_unsigned_char():
    assert length_converter_unsigned(300, "H") == 44


def test_length_converter_unsigned_unknown_modifier():
    with pytest.raises(ValueError):
        length_converter_unsigned(1, "z")