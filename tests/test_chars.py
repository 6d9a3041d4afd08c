import string

import pytest

from pushswap.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_CODES = range(256)


def test_is_alpha_accepts_exactly_ascii_letters():
    letters = {ord(ch) for ch in string.ascii_letters}
    assert {code for code in ALL_CODES if is_alpha(code)} == letters


def test_is_digit_accepts_exactly_ascii_digits():
    digits = {ord(ch) for ch in string.digits}
    assert {code for code in ALL_CODES if is_digit(code)} == digits


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in ALL_CODES:
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("ch", list(string.ascii_letters + string.digits))
def test_string_and_code_agree(ch):
    assert is_alnum(ch) is True
    assert is_alpha(ch) == is_alpha(ord(ch))
    assert is_digit(ch) == is_digit(ord(ch))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert all(is_print(ch) for ch in string.ascii_letters + string.digits + string.punctuation)
    assert not any(is_print(ch) for ch in "\t\n\r\x0b\x0c")


def test_to_upper_maps_lowercase_alphabet():
    assert "".join(to_upper(ch) for ch in string.ascii_lowercase) == string.ascii_uppercase


def test_to_lower_maps_uppercase_alphabet():
    assert "".join(to_lower(ch) for ch in string.ascii_uppercase) == string.ascii_lowercase


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " é"))
def test_converters_leave_non_letters_alone(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_converters_keep_integer_kind():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(ord("5")) == ord("5")


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)