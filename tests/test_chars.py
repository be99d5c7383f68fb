import string

import pytest

from cub3d.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    memchr,
    memcmp,
    to_lower,
    to_upper,
)


def test_memcmp_orders_buffers():
    assert memcmp(b"abc", b"abd", 3) == -1
    assert memcmp(b"abd", b"abc", 3) == 1
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_only_looks_at_first_n_bytes():
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_zero_count_is_equal():
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\x80", b"\x01", 1) == 1


def test_memcmp_rejects_short_buffer():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memchr_finds_byte():
    assert memchr(b"sofia", 102, 5) == b"fia"


def test_memchr_respects_count():
    assert memchr(b"sofia", ord("a"), 4) is None


def test_memchr_uses_low_byte():
    assert memchr(b"sofia", 0x100 + ord("s"), 5) == b"sofia"


def test_memchr_rejects_count_past_end():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 5)


@pytest.mark.parametrize("char", string.ascii_letters)
def test_letters(char):
    code = ord(char)
    assert is_alpha(code) is True
    assert is_alnum(code) is True
    assert is_digit(code) is False


@pytest.mark.parametrize("char", string.digits)
def test_digits(char):
    code = ord(char)
    assert is_digit(code) is True
    assert is_alnum(code) is True
    assert is_alpha(code) is False


@pytest.mark.parametrize("code", [0, 31, 127, 128, -1, ord("@"), ord("[")])
def test_non_alnum_codes(code):
    assert is_alnum(code) is False


def test_ascii_range_bounds():
    assert is_ascii(0) and is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_print_range_bounds():
    assert is_print(32) and is_print(126)
    assert not is_print(31)
    assert not is_print(127)


def test_case_conversion_matches_ascii_tables():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_lower(ord(upper)) == ord(lower)
        assert to_upper(ord(lower)) == ord(upper)


@pytest.mark.parametrize("char", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_others(char):
    code = ord(char)
    assert to_lower(code) == code
    assert to_upper(code) == code


def test_case_round_trip():
    for char in string.ascii_lowercase:
        assert to_lower(to_upper(ord(char))) == ord(char)