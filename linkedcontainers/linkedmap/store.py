"""Arena-backed doubly linked store of key/value entries.

Entries live in parallel slot arrays and are addressed by integer handles
(slot indices). Links are kept in numpy ``intp`` arrays so a handle stays
valid until its entry is removed, no matter how the arena grows. Removed
slots go on a free list and are handed out again by later insertions.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Tuple

import numpy as np

from ..constants import ARENA_GROWTH_FACTOR, ARENA_INITIAL_SLOTS, NIL

logger = logging.getLogger(__name__)


class OrderedStore:
    """Doubly linked sequence of entries with O(1) handle-based operations."""

    def __init__(self, initial_slots: int = ARENA_INITIAL_SLOTS):
        self._initial_slots = max(1, int(initial_slots))
        self._reset()

    def _reset(self) -> None:
        n = self._initial_slots
        self._prev = np.full(n, NIL, dtype=np.intp)
        self._next = np.full(n, NIL, dtype=np.intp)
        self._keys: List[Any] = [None] * n
        self._values: List[Any] = [None] * n
        # popped from the end, so slot 0 is handed out first
        self._free: List[int] = list(range(n - 1, -1, -1))
        self._head = NIL
        self._tail = NIL
        self._len = 0

    def __len__(self) -> int:
        return self._len

    @property
    def slots(self) -> int:
        """Number of allocated arena slots, live or free."""
        return len(self._keys)

    @property
    def front(self) -> int:
        return self._head

    @property
    def back(self) -> int:
        return self._tail

    def clear(self) -> None:
        self._reset()

    # ------------------------------------------------------------------
    # Slot access
    # ------------------------------------------------------------------

    def key(self, handle: int) -> Any:
        return self._keys[handle]

    def value(self, handle: int) -> Any:
        return self._values[handle]

    def entry(self, handle: int) -> Tuple[Any, Any]:
        return self._keys[handle], self._values[handle]

    def set_value(self, handle: int, value: Any) -> Any:
        """Replace the value stored at ``handle`` and return the old one."""
        old = self._values[handle]
        self._values[handle] = value
        return old

    def next(self, handle: int) -> int:
        return int(self._next[handle])

    def prev(self, handle: int) -> int:
        return int(self._prev[handle])

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def push_front(self, key: Any, value: Any) -> int:
        handle = self._alloc(key, value)
        self._link_front(handle)
        self._len += 1
        return handle

    def push_back(self, key: Any, value: Any) -> int:
        handle = self._alloc(key, value)
        self._link_back(handle)
        self._len += 1
        return handle

    def remove(self, handle: int) -> Tuple[Any, Any]:
        """Unlink the entry at ``handle``, free its slot and return it."""
        self._unlink(handle)
        key, value = self._keys[handle], self._values[handle]
        self._keys[handle] = None
        self._values[handle] = None
        self._free.append(handle)
        self._len -= 1
        return key, value

    def move_to_front(self, handle: int) -> None:
        if handle == self._head:
            return
        self._unlink(handle)
        self._link_front(handle)

    def move_to_back(self, handle: int) -> None:
        if handle == self._tail:
            return
        self._unlink(handle)
        self._link_back(handle)

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def handles(self, reverse: bool = False) -> Iterator[int]:
        """Yield live handles front -> back (or back -> front).

        The successor is read before yielding, so the caller may remove the
        handle it was just given.
        """
        links = self._prev if reverse else self._next
        handle = self._tail if reverse else self._head
        while handle != NIL:
            following = int(links[handle])
            yield handle
            handle = following

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _alloc(self, key: Any, value: Any) -> int:
        if not self._free:
            self._grow()
        handle = self._free.pop()
        self._keys[handle] = key
        self._values[handle] = value
        return handle

    def _grow(self) -> None:
        old = self.slots
        new = old * ARENA_GROWTH_FACTOR
        pad = np.full(new - old, NIL, dtype=np.intp)
        self._prev = np.concatenate([self._prev, pad])
        self._next = np.concatenate([self._next, pad])
        self._keys.extend([None] * (new - old))
        self._values.extend([None] * (new - old))
        self._free.extend(range(new - 1, old - 1, -1))
        logger.debug("Grew ordered store arena from %d to %d slots", old, new)

    def _link_front(self, handle: int) -> None:
        self._prev[handle] = NIL
        self._next[handle] = self._head
        if self._head != NIL:
            self._prev[self._head] = handle
        else:
            self._tail = handle
        self._head = handle

    def _link_back(self, handle: int) -> None:
        self._next[handle] = NIL
        self._prev[handle] = self._tail
        if self._tail != NIL:
            self._next[self._tail] = handle
        else:
            self._head = handle
        self._tail = handle

    def _unlink(self, handle: int) -> None:
        prev, nxt = int(self._prev[handle]), int(self._next[handle])
        if prev != NIL:
            self._next[prev] = nxt
        else:
            self._head = nxt
        if nxt != NIL:
            self._prev[nxt] = prev
        else:
            self._tail = prev
        self._prev[handle] = NIL
        self._next[handle] = NIL
