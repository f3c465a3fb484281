import pytest

from dsakit.numbers import greatest, int_to_roman, roman_to_int, to_binary_digits


def test_roman_subtractive():
    assert roman_to_int("IV") == 4


def test_roman_single_symbols():
    assert roman_to_int("M") == 1000
    assert roman_to_int("D") == 500


@pytest.mark.parametrize("n", list(range(1, 200)) + [499, 944, 1994, 3999])
def test_roman_round_trip(n):
    assert roman_to_int(int_to_roman(n)) == n


def test_int_to_roman_is_additive():
    assert int_to_roman(4) == "IIII"


def test_int_to_roman_non_positive():
    assert int_to_roman(0) == ""
    assert int_to_roman(-5) == ""


def test_roman_invalid_character():
    with pytest.raises(ValueError):
        roman_to_int("XIZ")


def test_roman_empty():
    with pytest.raises(ValueError):
        roman_to_int("")


@pytest.mark.parametrize("n", [0, 1, 2, 7, 8, 255, 256, 1023, 123456])
def test_binary_round_trip(n):
    digits = to_binary_digits(n)
    assert int(digits, 2) == n
    assert set(digits) <= {"0", "1"}


def test_binary_example():
    assert to_binary_digits(5) == "101"


def test_binary_zero():
    assert to_binary_digits(0) == "0"


def test_binary_negative():
    with pytest.raises(ValueError):
        to_binary_digits(-1)


@pytest.mark.parametrize("a,b,c", [(1, 2, 3), (3, 2, 1), (2, 3, 1), (3, 3, 1), (-5, -2, -9)])
def test_greatest(a, b, c):
    result = greatest(a, b, c)
    assert result in (a, b, c)
    assert result >= a and result >= b and result >= c