import io

import pytest

from raycube.numbers import (
    atoi,
    atol,
    itoa,
    power,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)

EDGE_VALUES = [5, -975100, -73273, 2147483647, -2147483648]


@pytest.mark.parametrize("n", EDGE_VALUES)
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert atol(itoa(n)) == n


@pytest.mark.parametrize("n", EDGE_VALUES)
def test_itoa_matches_int_parse(n):
    assert int(itoa(n)) == n


def test_atoi_skips_whitespace():
    assert atoi(" \t\n\v\f\r-73273") == -73273


def test_atoi_plus_sign():
    assert atoi("+123") == atoi("123")


def test_atoi_plus_then_minus_keeps_sign():
    assert atoi("+-5") == -atoi("5")


def test_atoi_rejects_double_signs():
    assert atoi("--5") == 0
    assert atoi("++5") == atoi("--5")
    assert atoi("-+5") == atoi("--5")


def test_atoi_minus_without_digit_is_not_a_sign():
    assert atoi("-x") == atoi("x")


def test_atoi_stops_at_first_non_digit():
    assert atoi("12abc34") == atoi("12")
    assert atoi("255,0") == atoi("255")


def test_atoi_wraps_like_32_bit():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_atol_signs():
    assert atol("-5") == -atol("5")
    assert atol("+42") == atol("42")
    assert atol("+-5") == atol("x")
    assert atol("  \t-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["0", "17", "-300", "  99", "2147483647"])
def test_atol_agrees_with_atoi_on_plain_numbers(text):
    assert atol(text) == atoi(text)


@pytest.mark.parametrize("num", [-3, 0, 2, 10])
def test_power_zero_exponent(num):
    assert power(num, 0) == 1


def test_power_negative_exponent():
    assert power(3, -1) == 0


@pytest.mark.parametrize("num", [-4, 2, 3, 7])
def test_power_identities(num):
    assert power(num, 1) == num
    assert power(num, 5) == power(num, 2) * power(num, 3)


def test_put_char_writes_character():
    out = io.StringIO()
    put_char("a", out)
    put_char("b", out)
    assert out.getvalue() == "ab"


@pytest.mark.parametrize("bad", ["", "ab", 7])
def test_put_char_rejects_non_character(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_and_put_endl():
    out = io.StringIO()
    put_str("ana", out)
    assert out.getvalue() == "ana"
    out = io.StringIO()
    put_endl("ana", out)
    assert out.getvalue() == "ana\n"


@pytest.mark.parametrize("n", EDGE_VALUES)
def test_put_nbr_matches_itoa(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert out.getvalue() == itoa(n)
    assert atoi(out.getvalue()) == n


def test_put_nbr_extremes():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    put_nbr(2147483647, out)
    assert out.getvalue() == "-2147483648" + "2147483647"


def test_put_defaults_to_stdout(capsys):
    put_str("hello")
    put_nbr(-975100)
    assert capsys.readouterr().out == "hello-975100"