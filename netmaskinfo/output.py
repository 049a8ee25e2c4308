"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from netmaskinfo.convert import format_int


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(ch: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a code point."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        text = ch
    else:
        text = chr(int(ch))
    _target(stream).write(text)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; nothing is written when it is None."""
    if text is not None:
        _target(stream).write(text)


def put_line(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; nothing is written when it is None."""
    if text is not None:
        _target(stream).write(text + "\n")


def put_number(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(format_int(n))