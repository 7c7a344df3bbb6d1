import string

import pytest

from cub3d.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c)
    assert is_alnum(c)
    assert not is_digit(c)


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c)
    assert is_alnum(c)
    assert not is_alpha(c)


@pytest.mark.parametrize("c", [" ", "@", "[", "`", "{", "/", ":", "é"])
def test_non_alnum(c):
    assert not is_alnum(c)


def test_int_and_str_agree():
    for code in range(128):
        ch = chr(code)
        assert is_alpha(code) == is_alpha(ch)
        assert is_digit(code) == is_digit(ch)
        assert is_print(code) == is_print(ch)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


def test_is_print_bounds():
    assert not is_print(31)
    assert is_print(32)
    assert is_print(126)
    assert not is_print(127)


def test_is_print_matches_printable_ascii():
    printable = set(string.printable) - set(string.whitespace) | {" "}
    assert {chr(c) for c in range(128) if is_print(c)} == printable


@pytest.mark.parametrize("lower,upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion(lower, upper):
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower
    assert to_upper(ord(lower)) == ord(upper)
    assert to_lower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("c", ["1", " ", "@", "[", "é", "É"])
def test_case_conversion_leaves_others(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_round_trip():
    for c in string.ascii_lowercase:
        assert to_lower(to_upper(c)) == c


def test_multi_character_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")