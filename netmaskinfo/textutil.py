"""String helpers: bounded search, comparison, trimming, slicing and copying."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Tuple

_NUL = "\0"


def _check_count(name: str, value: int) -> int:
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def find_substring(haystack: str, needle: str, limit: int) -> Optional[str]:
    """Find ``needle`` wholly inside the first ``limit`` characters of ``haystack``.

    Returns the suffix of ``haystack`` starting at the match, or None. An empty
    ``needle`` matches at the start and returns ``haystack`` itself.
    """
    limit = _check_count("limit", limit)
    if not needle:
        return haystack
    pos = haystack.find(needle, 0, limit)
    return haystack[pos:] if pos >= 0 else None


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first differing code points, treating the end
    of a string as code point 0, or 0 when the compared parts are equal.
    """
    n = _check_count("n", n)
    for ca, cb in islice(zip_longest(a, b, fillvalue=_NUL), n):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == _NUL:
            return 0
    if n > max(len(a), len(b)):
        # Both strings ended together within the limit.
        return 0
    return 0


def trim_left(text: str, chars: str) -> str:
    """Strip leading characters that appear in ``chars``."""
    return text.lstrip(chars)


def trim_right(text: str, chars: str) -> str:
    """Strip trailing characters that appear in ``chars``."""
    return text.rstrip(chars)


def trim(text: str, chars: str) -> str:
    """Strip characters in ``chars`` from both ends of ``text``."""
    return trim_right(trim_left(text, chars), chars)


def substring(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``.

    A ``start`` at or beyond the end yields an empty string.
    """
    start = _check_count("start", start)
    length = _check_count("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]


def join(a: str, b: str) -> str:
    """Concatenate two strings."""
    return a + b


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def char_sum(text: str, n: int) -> int:
    """Sum of the code points of the first ``n`` characters of ``text``."""
    n = _check_count("n", n)
    return sum(map(ord, text[:n]))


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``, so truncation shows
    as a returned length of ``size`` or more.
    """
    size = _check_count("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``dst`` is already longer than ``size`` nothing is appended and the
    returned length is ``len(src) + size``.
    """
    size = _check_count("size", size)
    dst_len = len(dst)
    if dst_len > size:
        return dst, len(src) + size
    appended, src_len = bounded_copy(src, size - dst_len)
    return dst + appended, dst_len + src_len