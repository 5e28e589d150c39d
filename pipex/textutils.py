"""Small string and number helpers used by the pipeline and its tools."""

from __future__ import annotations

from typing import Optional, Sequence

__all__ = [
    "split_words",
    "atoi",
    "atoi_base",
    "int_overflows",
    "has_duplicates",
    "itoa",
    "strtrim",
    "strnstr",
]

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

_LONG_MAX = 2**63 - 1
_INT_MAX = 2**31 - 1

# Results of narrowing the 64-bit extremes to a 32-bit int.
_POSITIVE_OVERFLOW = -1
_NEGATIVE_OVERFLOW = 0


def _is_digit(char: str) -> bool:
    return len(char) == 1 and char in _DIGITS


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _sign_of(char: str) -> int:
    if char == "-":
        return -1
    if char == "+" or _is_digit(char):
        return 1
    return 0


def _leading_digits(text: str) -> str:
    digits = []
    for char in text:
        if not _is_digit(char):
            break
        digits.append(char)
    return "".join(digits)


def split_words(text: Optional[str], sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    if not text:
        return []
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer, narrowed to a signed 32-bit value.

    Values that overflow a 64-bit long give -1 when positive and 0 when
    negative; other out-of-range values wrap around.
    """
    rest = text.lstrip(_WHITESPACE)
    head = rest[:1]
    sign = _sign_of(head)
    if sign and not _is_digit(head):
        rest = rest[1:]
    if not sign:
        return 0
    value = 0
    for char in _leading_digits(rest):
        digit = int(char)
        if value > _LONG_MAX // 10 or (value == _LONG_MAX // 10 and digit > 7):
            return _POSITIVE_OVERFLOW if sign == 1 else _NEGATIVE_OVERFLOW
        value = value * 10 + digit
    return _to_int32(value * sign)


def _digit_value(char: str) -> int:
    if _is_digit(char):
        return int(char)
    if len(char) == 1 and char in _ASCII_LETTERS:
        return ord(char.lower()) - ord("a") + 10
    return -1


def atoi_base(text: str, base: int) -> int:
    """Parse a leading unsigned number in ``base``, saturating at 2**63 - 1."""
    value = 0
    for char in text.lstrip(_WHITESPACE):
        digit = _digit_value(char)
        if digit == -1 or digit >= base:
            break
        if value > _LONG_MAX // base or (
            value == _LONG_MAX // base and digit > _LONG_MAX % base
        ):
            return _LONG_MAX
        value = value * base + digit
    return value


def int_overflows(text: str) -> bool:
    """Tell whether ``text`` is not a well-formed 32-bit signed integer."""
    rest = text.lstrip(_WHITESPACE)
    head = rest[:1]
    sign = _sign_of(head)
    if sign and not _is_digit(head):
        rest = rest[1:]
    if not _is_digit(rest[:1]):
        return True
    value = 0
    limit_digit = 7 if sign == 1 else 8
    digits = _leading_digits(rest)
    for char in digits:
        digit = int(char)
        if value > _INT_MAX // 10 or (
            value == _INT_MAX // 10 and digit > limit_digit
        ):
            return True
        value = value * 10 + digit
    return len(rest) > len(digits)


def has_duplicates(index: int, args: Sequence[str]) -> bool:
    """Tell whether ``args[index]`` parses to the same number as an earlier item."""
    if index == 0:
        return False
    current = atoi(args[index])
    return any(atoi(other) == current for other in args[index - 1 :: -1])


def itoa(n: int) -> str:
    """Format ``n`` in decimal."""
    return str(n)


def strtrim(text: str, chars: str) -> str:
    """Remove every character of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    found = haystack.find(needle, 0, min(length, len(haystack)))
    return None if found < 0 else found