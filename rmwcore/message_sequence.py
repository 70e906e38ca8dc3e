"""Bounded sequences of messages and of message info records."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from rmwcore.ret import InvalidArgumentError, RmwError


class _BoundedSequence:
    """Storage shared by the bounded sequences: items up to a fixed capacity."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self.capacity = 0

    @property
    def size(self) -> int:
        return len(self._items)

    def _reserve(self, size: int) -> None:
        if size < 0:
            raise InvalidArgumentError("size must not be negative")
        self._items = []
        self.capacity = size

    def _push(self, item: Any) -> None:
        if len(self._items) >= self.capacity:
            raise RmwError("sequence is full")
        self._items.append(item)

    def _clear(self) -> None:
        self._items = []
        self.capacity = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, capacity={self.capacity})"


class MessageSequence(_BoundedSequence):
    """A bounded sequence of messages."""

    def init(self, size: int) -> None:
        """Make room for ``size`` messages and empty the sequence."""
        self._reserve(size)

    def append(self, item: Any) -> None:
        """Add a message; fails once the capacity is reached."""
        self._push(item)

    def fini(self) -> None:
        """Drop all messages and the capacity."""
        self._clear()


class MessageInfoSequence(_BoundedSequence):
    """A bounded sequence of message info records."""

    def init(self, size: int) -> None:
        """Make room for ``size`` info records and empty the sequence."""
        self._reserve(size)

    def append(self, item: Any) -> None:
        """Add an info record; fails once the capacity is reached."""
        self._push(item)

    def fini(self) -> None:
        """Drop all info records and the capacity."""
        self._clear()