import pytest

from cub3d.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_atoi_source_example():
    assert atoi("       -4222lala") == -4222


def test_atoi_skips_all_c_whitespace():
    assert atoi("\t\n\v\f\r 42") == 42


def test_atoi_plus_sign():
    assert atoi("+7") == 7


@pytest.mark.parametrize("text", ["", "abc", "--5", "+-3", " - 4"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == atoi("-2147483648")
    assert atoi("2147483647") == 2147483647


@pytest.mark.parametrize("number", [0, 1, -1, 42, 2147483647, -2147483648])
def test_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


@pytest.mark.parametrize("text", ["", ",,,"])
def test_split_only_separators(text):
    assert split(text, ",") == []


def test_split_parts_have_no_separator():
    parts = split("a,b,,c,", ",")
    assert all("," not in part and part for part in parts)
    assert ",".join(parts) == "a,b,c"


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strtrim_source_example():
    assert strtrim("riaaair", "ri") == "aaa"


def test_strtrim_everything_trimmed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  abc  ", "") == "  abc  "


def test_strnstr_source_example():
    assert strnstr("lalaoiela", "ela", 15) == "ela"


def test_strnstr_respects_length():
    assert strnstr("lalaoiela", "ela", 8) is None
    assert strnstr("lalaoiela", "ela", 9) == "ela"


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == "abc"


def test_strnstr_needle_longer_than_haystack():
    assert strnstr("abc", "abcd", 10) is None


def test_strncmp_source_example():
    assert strncmp("oba", "ola", 2) < 0
    assert strncmp("oba", "ola", 1) == 0


def test_strncmp_zero_length():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_prefix_sorts_first():
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0


@pytest.mark.parametrize("a,b", [("oba", "ola"), ("map.cub", "map.cux"), ("", "a")])
def test_strncmp_antisymmetric(a, b):
    assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


def test_substr_length_clamped():
    assert substr("hello", 3, 100) == "lo"


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin_source_example():
    joined = strjoin(strjoin("my favorite animal is", " "), "the nyancat")
    assert joined == "my favorite animal is the nyancat"


def test_strjoin_missing_argument():
    assert strjoin(None, "abc") == ""
    assert strjoin("abc", None) == ""


def test_strchr_source_example():
    assert strchr("sofia", "i") == "ia"


def test_strchr_accepts_code():
    assert strchr("sofia", ord("i")) == "ia"


def test_strchr_missing():
    assert strchr("sofia", "z") is None


def test_strchr_nul_is_end():
    assert strchr("sofia", "\0") == ""
    assert strchr("sofia", 0) == ""


def test_strrchr_source_example():
    assert strrchr("melancias", "a") == "as"


def test_strrchr_missing_and_nul():
    assert strrchr("melancias", "z") is None
    assert strrchr("melancias", "\0") == ""


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strmapi_upper():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"


def test_strmapi_passes_indices():
    seen = []

    def record(index, char):
        seen.append((index, char))
        return char

    assert strmapi("cub", record) == "cub"
    assert seen == list(enumerate("cub"))


def test_strmapi_empty():
    assert strmapi("", lambda i, c: "x") == ""