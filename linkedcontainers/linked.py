"""Generic doubly linked list with positional and comparator-based access."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional

from .comparator import Comparator, equal, sort_key, validate
from .errors import IndexOutOfRangeError


class _Node:
    """A node in the list; the list's sentinel is a node too."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class LinkedList:
    """Doubly linked list around a circular sentinel node.

    Positional operations raise :class:`IndexOutOfRangeError` for an index
    outside the list. Value lookups (``contains``, ``index_of``,
    ``remove_value``) and ``sort`` use the comparator given at construction,
    falling back to ``==`` and ``<``.

    Args:
        comparator: Optional three-way comparator ``cmp(a, b) -> int``.
    """

    def __init__(self, comparator: Optional[Comparator] = None):
        self._cmp = validate(comparator)
        self._root = _Node()
        self._len = 0

    @property
    def comparator(self) -> Optional[Comparator]:
        return self._cmp

    @property
    def is_empty(self) -> bool:
        return self._len == 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        node = self._root.next
        while node is not self._root:
            following = node.next
            yield node.value
            node = following

    def __reversed__(self) -> Iterator[Any]:
        node = self._root.prev
        while node is not self._root:
            preceding = node.prev
            yield node.value
            node = preceding

    def __contains__(self, value: Any) -> bool:
        return self.index_of(value) >= 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self) -> None:
        self._root = _Node()
        self._len = 0

    def values(self) -> List[Any]:
        return list(self)

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def push_front(self, *values: Any) -> None:
        """Insert ``values`` at the front, keeping their given order."""
        for value in reversed(values):
            self._insert_after(self._root, value)

    def push_back(self, *values: Any) -> None:
        for value in values:
            self._insert_after(self._root.prev, value)

    def push_front_list(self, other: "LinkedList") -> None:
        """Copy ``other``'s values onto the front; ``other`` is not modified.

        Passing the list itself doubles its current contents once.
        """
        self.push_front(*list(other))

    def push_back_list(self, other: "LinkedList") -> None:
        self.push_back(*list(other))

    def add(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if index < 0 or index > self._len:
            raise IndexOutOfRangeError(
                f"Index {index} out of range for insert into list of length {self._len}"
            )
        anchor = self._root if index == self._len else self._node_at(index)
        self._insert_after(anchor.prev, value)

    # ------------------------------------------------------------------
    # Positional access
    # ------------------------------------------------------------------

    def get(self, index: int) -> Any:
        return self._checked_node(index).value

    def set(self, index: int, value: Any) -> Any:
        """Replace the value at ``index`` and return the old one."""
        node = self._checked_node(index)
        old, node.value = node.value, value
        return old

    def remove_at(self, index: int) -> Any:
        node = self._checked_node(index)
        self._unlink(node)
        return node.value

    def peek_front(self) -> Any:
        return None if self._len == 0 else self._root.next.value

    def peek_back(self) -> Any:
        return None if self._len == 0 else self._root.prev.value

    def poll_front(self) -> Any:
        if self._len == 0:
            return None
        node = self._root.next
        self._unlink(node)
        return node.value

    def poll_back(self) -> Any:
        if self._len == 0:
            return None
        node = self._root.prev
        self._unlink(node)
        return node.value

    # ------------------------------------------------------------------
    # Value access
    # ------------------------------------------------------------------

    def contains(self, value: Any) -> bool:
        return self.index_of(value) >= 0

    def index_of(self, value: Any) -> int:
        """Position of the first value equal to ``value``, or -1."""
        for i, item in enumerate(self):
            if equal(item, value, self._cmp):
                return i
        return -1

    def remove_value(self, value: Any) -> bool:
        """Remove the first value equal to ``value``; False if none matched."""
        node = self._root.next
        while node is not self._root:
            if equal(node.value, value, self._cmp):
                self._unlink(node)
                return True
            node = node.next
        return False

    def sort(self, reverse: bool = False) -> None:
        """Stable in-place sort; nodes keep their identity, values move."""
        if self._len < 2:
            return
        ordered = sorted(self, key=sort_key(self._cmp), reverse=reverse)
        node = self._root.next
        for value in ordered:
            node.value = value
            node = node.next

    # ------------------------------------------------------------------
    # Callback traversal
    # ------------------------------------------------------------------

    def iterator(self, callback: Optional[Callable[[Any], bool]]) -> None:
        """Visit values front -> back until ``callback`` returns falsy."""
        self._visit(callback, iter(self))

    def reverse_iterator(self, callback: Optional[Callable[[Any], bool]]) -> None:
        self._visit(callback, reversed(self))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _visit(callback, values: Iterable[Any]) -> None:
        if callback is None:
            return
        for value in values:
            if not callback(value):
                return

    def _insert_after(self, at: _Node, value: Any) -> _Node:
        node = _Node(value)
        node.prev = at
        node.next = at.next
        at.next.prev = node
        at.next = node
        self._len += 1
        return node

    def _unlink(self, node: _Node) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = node.next = node
        self._len -= 1

    def _checked_node(self, index: int) -> _Node:
        if index < 0 or index >= self._len:
            raise IndexOutOfRangeError(
                f"Index {index} out of range for list of length {self._len}"
            )
        return self._node_at(index)

    def _node_at(self, index: int) -> _Node:
        # walk from whichever end is closer
        if index < self._len // 2:
            node = self._root.next
            for _ in range(index):
                node = node.next
        else:
            node = self._root.prev
            for _ in range(self._len - 1 - index):
                node = node.prev
        return node
