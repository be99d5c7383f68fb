import io

import pytest

from cub3d.printf import (
    HEX_LOWER,
    HEX_UPPER,
    NULL_POINTER,
    NULL_STRING,
    ft_format,
    ft_printf,
    to_base,
)


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 4096, 123456789])
def test_to_base_hex_round_trip(number):
    assert int(to_base(number, HEX_LOWER), 16) == number
    assert int(to_base(number, HEX_UPPER), 16) == number


def test_to_base_binary_round_trip():
    for number in range(0, 64):
        assert int(to_base(number, "01"), 2) == number


def test_to_base_zero():
    assert to_base(0, HEX_LOWER) == "0"


def test_to_base_rejects_bad_input():
    with pytest.raises(ValueError):
        to_base(5, "0")
    with pytest.raises(ValueError):
        to_base(-1, HEX_LOWER)


def test_plain_text_passes_through():
    assert ft_format("hello world") == "hello world"


def test_percent_literal():
    assert ft_format("100%%") == "100%"


@pytest.mark.parametrize("number", [0, 7, -42, 2147483647, -2147483648])
def test_signed_decimal(number):
    assert ft_format("%d", number) == str(number)
    assert ft_format("%i", number) == str(number)


def test_signed_wraps_to_32_bits():
    assert ft_format("%d", 2147483648) == str(-2147483648)


def test_unsigned_of_negative():
    assert ft_format("%u", -1) == str(4294967295)


def test_hex_of_negative_is_unsigned():
    assert ft_format("%x", -1) == format(4294967295, "x")
    assert ft_format("%X", -1) == format(4294967295, "X")


@pytest.mark.parametrize("number", [0, 10, 255, 3735928559])
def test_hex_matches_builtin(number):
    assert ft_format("%x", number) == format(number, "x")
    assert ft_format("%X", number) == format(number, "X")


def test_string_and_null_string():
    assert ft_format("[%s]", "abc") == "[abc]"
    assert ft_format("%s", None) == NULL_STRING


def test_char_from_int_and_str():
    assert ft_format("%c%c", ord("A"), "z") == "Az"


def test_pointer():
    assert ft_format("%p", None) == NULL_POINTER
    assert ft_format("%p", 0) == NULL_POINTER
    assert ft_format("%p", 0x1F) == "0x1f"


def test_unknown_conversion_is_dropped():
    assert ft_format("a%qb") == "ab"


def test_trailing_percent_is_dropped():
    assert ft_format("end%") == "end"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        ft_format("%d %d", 1)


def test_ft_printf_writes_and_counts():
    out = io.StringIO()
    count = ft_printf("%s=%d\n", "x", 12, file=out)
    assert out.getvalue() == "x=12\n"
    assert count == len(out.getvalue())


def test_ft_printf_null_counts(capsys):
    count = ft_printf("%s", None)
    assert capsys.readouterr().out == NULL_STRING
    assert count == len(NULL_STRING)