import io

import pytest

from shellkit.printf import printf, put_endl, put_nbr, put_str, render


def test_plain_text_round_trips():
    assert render("hello world") == "hello world"


def test_string_and_char():
    assert render("%s-%c", "abc", "z") == "abc-z"
    assert render("%c", ord("q")) == "q"


def test_percent_literal():
    assert render("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 7, -42, 2**31 - 1, -(2**31)])
def test_decimal_matches_int(n):
    assert int(render("%d", n)) == n
    assert render("%i", n) == render("%d", n)


def test_decimal_out_of_range():
    with pytest.raises(OverflowError):
        render("%d", 2**31)


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    assert int(render("%x", n), 16) == n
    assert render("%X", n) == render("%x", n).upper()


def test_unsigned_wraps_negative():
    assert int(render("%u", -1)) == 2**32 - 1
    assert int(render("%x", -1), 16) == 2**32 - 1


def test_pointer_values():
    assert render("%p", None) == "(nil)"
    assert render("%p", 0) == "(nil)"
    assert render("%p", 2**63) == "0x8000000000000000"
    assert render("%p", 2**64 - 1) == "0xffffffffffffffff"
    assert int(render("%p", 0x1234), 16) == 0x1234


def test_unknown_conversion_produces_nothing():
    assert render("a%qb", 5) == "ab"


def test_trailing_percent_dropped():
    assert render("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(TypeError):
        render("%d")


def test_string_wrong_type():
    with pytest.raises(TypeError):
        render("%s", 3)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s=%d\n", "x", -12, file=out)
    assert out.getvalue() == "x=-12\n"
    assert count == len(out.getvalue())


def test_printf_null_string_counts_six():
    out = io.StringIO()
    count = printf("[%s]", None, file=out)
    assert out.getvalue() == "[]"
    assert count == 2 + 6


def test_put_str():
    out = io.StringIO()
    assert put_str("abc", out) == 3
    assert out.getvalue() == "abc"
    assert put_str(None, out) == 6
    assert out.getvalue() == "abc"


def test_put_endl():
    out = io.StringIO()
    put_endl("line", out)
    put_endl(None, out)
    assert out.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 9, -2147483648, 2147483647])
def test_put_nbr(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_overflow():
    with pytest.raises(OverflowError):
        put_nbr(2**40, io.StringIO())