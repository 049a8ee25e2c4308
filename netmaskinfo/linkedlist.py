"""A singly ordered list of values with append, prepend, mapping and printing."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Deque, Iterable, Iterator, Optional, TextIO

from netmaskinfo.output import put_char, put_str

Release = Optional[Callable[[Any], Any]]


class LinkedList:
    """An ordered sequence of values that grows at either end."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._items: Deque[Any] = deque(() if items is None else items)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self._items.append(value)

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._items.appendleft(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def last(self) -> Any:
        """The last value, or None when the list is empty."""
        return self._items[-1] if self._items else None

    def pop_first(self, release: Release = None) -> Any:
        """Remove and return the first value, handing it to ``release`` if given.

        Raises IndexError when the list is empty.
        """
        if not self._items:
            raise IndexError("pop from an empty list")
        value = self._items.popleft()
        if release is not None:
            release(value)
        return value

    def clear(self, release: Release = None) -> None:
        """Remove every value, handing each to ``release`` in order if given."""
        while self._items:
            value = self._items.popleft()
            if release is not None:
                release(value)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value in order."""
        for value in self._items:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func`` applied to every value; this one is unchanged."""
        return LinkedList(func(value) for value in self._items)

    def write_lines(self, stream: Optional[TextIO] = None) -> None:
        """Write every value on its own line; a None value gives an empty line."""
        for value in self._items:
            put_str(None if value is None else str(value), stream)
            put_char("\n", stream)