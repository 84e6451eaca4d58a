"""Singly linked FIFO queue."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class _Element:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: Optional[_Element] = None


class Queue:
    """First-in-first-out queue; ``peek``/``poll`` return None when empty."""

    def __init__(self) -> None:
        self.clear()

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        element = self._head
        while element is not None:
            yield element.value
            element = element.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    @property
    def is_empty(self) -> bool:
        return self._len == 0

    def clear(self) -> None:
        self._head: Optional[_Element] = None
        self._tail: Optional[_Element] = None
        self._len = 0

    def add(self, value: Any) -> None:
        """Append ``value`` to the tail."""
        element = _Element(value)
        if self._tail is None:
            self._head = self._tail = element
        else:
            self._tail.next = element
            self._tail = element
        self._len += 1

    def peek(self) -> Any:
        return None if self._head is None else self._head.value

    def poll(self) -> Any:
        if self._head is None:
            return None
        element = self._head
        self._head = element.next
        if self._head is None:
            self._tail = None
        self._len -= 1
        return element.value
