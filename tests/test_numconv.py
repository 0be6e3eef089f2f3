import pytest

from shellkit.numconv import atoi, itoa, ulitoa


@pytest.mark.parametrize("n", [0, 7, -7, 42, -42, 100000, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"
    assert itoa(0) == "0"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)
    with pytest.raises(OverflowError):
        itoa(-2147483649)


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r 42") == 42


def test_atoi_sign_handling():
    assert atoi("-42") == -42
    assert atoi("+42") == 42


def test_atoi_only_one_sign():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_stops_at_non_digit():
    assert atoi("123abc456") == 123
    assert atoi("12 34") == 12


def test_atoi_no_digits():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("   ") == 0


def test_atoi_wraps_like_32_bit():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648
    assert atoi("4294967296") == 0


@pytest.mark.parametrize("n", [0, 9, 10, 18446744073709551615])
def test_ulitoa_round_trip(n):
    assert int(ulitoa(n)) == n


def test_ulitoa_max():
    assert ulitoa(18446744073709551615) == "18446744073709551615"


def test_ulitoa_rejects_negative():
    with pytest.raises(ValueError):
        ulitoa(-1)


def test_ulitoa_rejects_too_large():
    with pytest.raises(OverflowError):
        ulitoa(18446744073709551616)