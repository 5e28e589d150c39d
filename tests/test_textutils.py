import pytest

from pipex.textutils import (
    atoi,
    atoi_base,
    has_duplicates,
    int_overflows,
    itoa,
    split_words,
    strnstr,
    strtrim,
)

LONG_MAX = 2**63 - 1
INT_MIN_TEXT = "-2147483648"


def test_split_words_command():
    assert split_words("ls -l  -a", " ") == ["ls", "-l", "-a"]


def test_split_words_path():
    assert split_words("/usr/bin::/bin:", ":") == ["/usr/bin", "/bin"]


@pytest.mark.parametrize("text", ["", "    ", None])
def test_split_words_empty(text):
    assert split_words(text, " ") == []


@pytest.mark.parametrize("text", ["a b c", "  x  y ", "one"])
def test_split_words_has_no_empty_or_separator(text):
    words = split_words(text, " ")
    assert all(words)
    assert all(" " not in word for word in words)
    assert "".join(words) == text.replace(" ", "")


@pytest.mark.parametrize("text", ["42", "-17", "+5", "0", "2147483647", INT_MIN_TEXT])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text)


def test_atoi_skips_whitespace_and_stops_at_garbage():
    assert atoi("\t\n\v\f\r 12abc") == 12


@pytest.mark.parametrize("text", ["abc", "--5", "+-5", ""])
def test_atoi_no_number(text):
    assert atoi(text) == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == int(INT_MIN_TEXT)


def test_atoi_64_bit_overflow():
    assert atoi("9223372036854775808") == -1
    assert atoi("-9223372036854775808") == 0


@pytest.mark.parametrize(
    "text,base,digits",
    [("ff", 16, "ff"), ("  1010", 2, "1010"), ("12z", 16, "12"), ("777", 8, "777"), ("Zz", 36, "Zz")],
)
def test_atoi_base_matches_int(text, base, digits):
    assert atoi_base(text, base) == int(digits, base)


def test_atoi_base_stops_at_digit_out_of_base():
    assert atoi_base("129", 2) == 1


def test_atoi_base_saturates():
    assert atoi_base("f" * 17, 16) == LONG_MAX
    assert atoi_base(str(LONG_MAX), 10) == LONG_MAX


def test_atoi_base_no_digits():
    assert atoi_base("-5", 10) == 0


@pytest.mark.parametrize("text", ["2147483647", INT_MIN_TEXT, " 42", "+7", "-0"])
def test_int_overflows_false(text):
    assert int_overflows(text) is False


@pytest.mark.parametrize(
    "text", ["2147483648", "-2147483649", "", "+", "12a", "abc", "99999999999"]
)
def test_int_overflows_true(text):
    assert int_overflows(text) is True


def test_has_duplicates_found():
    assert has_duplicates(2, ["1", "2", "1"]) is True
    assert has_duplicates(1, ["05", "5"]) is True


def test_has_duplicates_not_found():
    assert has_duplicates(2, ["1", "2", "3"]) is False
    assert has_duplicates(0, ["5"]) is False


@pytest.mark.parametrize("n", [0, 7, -7, 123456, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == INT_MIN_TEXT


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("  a b  ", " ") == "a b"
    assert strtrim("abc", "abc") == ""
    assert strtrim("", "x") == ""
    assert strtrim("keep", "") == "keep"


def test_strnstr_found():
    haystack = "hello world"
    assert strnstr(haystack, "world", len(haystack)) == haystack.index("world")
    assert strnstr("abc", "bc", 3) == "abc".index("bc")


def test_strnstr_outside_limit():
    assert strnstr("abc", "c", 2) is None
    assert strnstr("abc", "x", 3) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)