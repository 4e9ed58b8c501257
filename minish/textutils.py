"""String and number helpers used throughout the shell."""

from __future__ import annotations

import re
import string
from itertools import islice, zip_longest

_WHITESPACE = " \t\n\v\f\r"
_DECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_HEXADECIMAL = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9a-fA-F]*)")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _parse(pattern: re.Pattern[str], text: str, base: int, bits: int) -> int:
    match = pattern.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits, base) if digits else 0
    if sign == "-":
        value = -value
    return _wrap(value, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. Text with no digits yields 0.
    """
    return _parse(_DECIMAL, text, 10, 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 64-bit signed value."""
    return _parse(_DECIMAL, text, 10, 64)


def hex_digit(char: str) -> int | None:
    """Return the value of a single hexadecimal digit, or None if it is not one."""
    if len(char) == 1 and char in string.hexdigits:
        return int(char, 16)
    return None


def atoi_base(text: str) -> int:
    """Parse a leading hexadecimal integer, wrapping to a 32-bit signed value."""
    return _parse(_HEXADECIMAL, text, 16, 32)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields.

    The number of words is counted only up to the first newline; that many
    words are then taken from the whole text, so the last counted word may
    run across the newline.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    head = text.split("\n", 1)[0]
    count = sum(1 for word in head.split(sep) if word)
    words = (word for word in text.split(sep) if word)
    return list(islice(words, count))


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    Returns the index of the first match, or None. An empty needle matches at 0.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Return the index of the first occurrence of ``needle``, or None."""
    index = haystack.find(needle)
    return None if index < 0 else index


def strcmp(a: str, b: str) -> int:
    """Compare two strings, returning the code difference at the first mismatch."""
    for x, y in zip_longest(a, b, fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    for x, y in islice(zip_longest(a, b, fillvalue="\0"), max(n, 0)):
        if x != y:
            return ord(x) - ord(y)
    return 0