import string

import pytest

from philosophers.libft.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)


@pytest.mark.parametrize("code", range(-5, 300))
def test_isalpha_matches_ascii_letters(code):
    expected = 0 <= code < 0x110000 and chr(code) in string.ascii_letters
    assert isalpha(code) == expected


@pytest.mark.parametrize("code", range(-5, 300))
def test_isdigit_matches_ascii_digits(code):
    expected = 0 <= code < 0x110000 and chr(code) in string.digits
    assert isdigit(code) == expected


@pytest.mark.parametrize("code", range(-5, 300))
def test_isalnum_is_union_of_alpha_and_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_isprint_matches_printable_set():
    printable = set(string.ascii_letters + string.digits + string.punctuation + " ")
    for code in range(128):
        assert isprint(code) == (chr(code) in printable)


@pytest.mark.parametrize(
    "lower,upper", zip(string.ascii_lowercase, string.ascii_uppercase)
)
def test_case_conversion_letters(lower, upper):
    assert toupper(lower) == upper
    assert tolower(upper) == lower
    assert toupper(ord(lower)) == ord(upper)
    assert tolower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_non_letters(ch):
    assert toupper(ch) == ch
    assert tolower(ch) == ch


def test_case_conversion_round_trip():
    for code in range(256):
        if isalpha(code):
            assert tolower(toupper(code)) == tolower(code)
            assert toupper(tolower(code)) == toupper(code)
        else:
            assert toupper(code) == code
            assert tolower(code) == code


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)