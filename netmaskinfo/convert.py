"""Integer parsing and formatting, and the string searches used on addresses."""

from __future__ import annotations

import re
from typing import List, Optional

_LEADING = re.compile(r"[\t\n\x0b\x0c\r ]*([+-]?)([0-9]*)")
_LONG_MAX = 2**63 - 1
_U64 = 2**64


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value & 0x80000000 else value


def _check_char(ch: str) -> None:
    if not isinstance(ch, str) or len(ch) > 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def parse_int(text: str) -> int:
    """Parse a leading decimal integer with C ``int`` semantics.

    Leading whitespace and one optional sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0. A magnitude above the range
    of a 64-bit signed long yields -1 when positive and 0 when negative;
    otherwise the result wraps to a 32-bit signed integer.
    """
    match = _LEADING.match(text)
    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2)
    result = int(digits) % _U64 if digits else 0
    if result > _LONG_MAX:
        return -1 if sign == 1 else 0
    return _to_int32(_to_int32(result) * sign)


def format_int(n: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    return str(int(n))


def split_fields(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [field for field in text.split(sep) if field]


def index_of(text: str, ch: str) -> int:
    """Index of the first ``ch`` in ``text``, or -1 when absent."""
    _check_char(ch)
    if not ch:
        return -1
    return text.find(ch)


def after_char(text: str, ch: str) -> Optional[str]:
    """The part of ``text`` after the first ``ch``, or None when absent."""
    _check_char(ch)
    if not ch:
        return None
    head, found, tail = text.partition(ch)
    return tail if found else None


def find_char(text: str, ch: str) -> Optional[str]:
    """The suffix of ``text`` starting at the first ``ch``, or None.

    An empty ``ch`` stands for the string terminator and matches at the end.
    """
    _check_char(ch)
    if not ch:
        return ""
    pos = text.find(ch)
    return text[pos:] if pos >= 0 else None


def rfind_char(text: str, ch: str) -> Optional[str]:
    """The suffix of ``text`` starting at the last ``ch``, or None.

    An empty ``ch`` stands for the string terminator and matches at the end.
    """
    _check_char(ch)
    if not ch:
        return ""
    pos = text.rfind(ch)
    return text[pos:] if pos >= 0 else None