import pytest

from minichain.strutil import (
    contains,
    is_all_letters,
    is_all_zero,
    make_lower,
    number_to_string,
    string_to_number,
)


@pytest.mark.parametrize("n", [1, 7, 10, 42, 100, 123456, 2147483647])
def test_number_string_round_trip(n):
    assert string_to_number(number_to_string(n)) == n


def test_zero_is_written_as_empty_string():
    assert number_to_string(0) == ""
    assert string_to_number("") == 0


def test_string_to_number_reads_digits():
    assert string_to_number("123") == 123
    assert string_to_number("007") == 7


def test_number_to_string_positive_matches_str():
    for n in (5, 90, 31337):
        assert number_to_string(n) == str(n)


def test_negative_number_uses_characters_below_zero():
    assert number_to_string(-12) == "/."


@pytest.mark.parametrize("text", ["", "0", "0000"])
def test_is_all_zero_true(text):
    assert is_all_zero(text) is True


@pytest.mark.parametrize("text", ["1", "00a0", " 0"])
def test_is_all_zero_false(text):
    assert is_all_zero(text) is False


@pytest.mark.parametrize("text", ["", "abc", "Hello World", "Z a"])
def test_is_all_letters_true(text):
    assert is_all_letters(text) is True


@pytest.mark.parametrize("text", ["abc1", "tab\there", "dash-ed", "é"])
def test_is_all_letters_false(text):
    assert is_all_letters(text) is False


def test_make_lower_inner_letters():
    assert make_lower("B") == "b"
    assert make_lower("Y") == "y"


@pytest.mark.parametrize("c", ["A", "Z", "a", "q", "5", " "])
def test_make_lower_leaves_others(c):
    assert make_lower(c) == c


def test_contains():
    assert contains("blockchain", "chain") is True
    assert contains("blockchain", "") is True
    assert contains("blockchain", "chains") is False
    assert contains("ab", "abc") is False