import string

import pytest

from printfmt.chars import isalnum, isalpha, isascii, isdigit, isprint, tolower, toupper

ALL_CODES = range(-5, 300)


@pytest.mark.parametrize("char", string.ascii_letters)
def test_letters_are_alpha(char):
    assert isalpha(char) is True
    assert isalpha(ord(char)) is True
    assert isdigit(char) is False


@pytest.mark.parametrize("char", string.digits)
def test_digits(char):
    assert isdigit(ord(char)) is True
    assert isalpha(ord(char)) is False
    assert isalnum(ord(char)) is True


@pytest.mark.parametrize("char", string.punctuation + " \t\n")
def test_punctuation_is_not_alnum(char):
    assert isalnum(char) is False


def test_alnum_is_union_of_alpha_and_digit():
    for code in ALL_CODES:
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_ascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_print_bounds():
    assert isprint(32) is True
    assert isprint(126) is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_printable_codes_are_ascii():
    for code in ALL_CODES:
        if isprint(code):
            assert isascii(code)


@pytest.mark.parametrize("char", string.ascii_uppercase)
def test_case_round_trip_upper(char):
    lowered = tolower(char)
    assert lowered == char.lower()
    assert toupper(lowered) == char
    assert toupper(tolower(ord(char))) == ord(char)


def test_non_letters_unchanged_by_case_mapping():
    for code in ALL_CODES:
        if not isalpha(code):
            assert tolower(code) == code
            assert toupper(code) == code


def test_case_mapping_keeps_type():
    assert tolower("Q") == "q"
    assert toupper(ord("q")) == ord("Q")


@pytest.mark.parametrize("bad", ["ab", "", 1.5, None])
def test_rejects_bad_input(bad):
    with pytest.raises(TypeError):
        isalpha(bad)