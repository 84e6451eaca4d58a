"""Order-preserving map with optional capacity-bounded eviction."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..comparator import Comparator, equal
from ..constants import DEFAULT_CAPACITY, NIL
from ..specs import MapOptions
from .store import OrderedStore

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


class LinkedMap(Generic[K, V]):
    """Hash index over a doubly linked store of entries.

    Iteration order is front -> back. ``push_back`` and ``get`` place an entry
    at the back; ``push_front`` places it at the front. With ``capacity > 0`` a
    new key pushed into a full map first evicts the entry at the opposite end,
    so ``push_back`` drops the front entry and ``push_front`` drops the back.

    Misses are never errors: ``poll*``/``peek*`` return ``(None, None, False)``
    and ``remove`` returns ``(None, False)`` when there is nothing to return.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        comparator: Optional[Comparator] = None,
    ):
        self._options = MapOptions(capacity=capacity, comparator=comparator)
        self._index: Dict[K, int] = {}
        self._store = OrderedStore()

    @classmethod
    def from_options(cls, options: MapOptions) -> "LinkedMap[K, V]":
        return cls(capacity=options.capacity, comparator=options.comparator)

    @property
    def options(self) -> MapOptions:
        return self._options

    @property
    def capacity(self) -> int:
        """Configured limit, 0 meaning unbounded."""
        return self._options.capacity

    @property
    def size(self) -> int:
        return len(self._store)

    @property
    def is_empty(self) -> bool:
        return len(self._store) == 0

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: K) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        for handle in self._store.handles():
            yield self._store.entry(handle)

    def __reversed__(self) -> Iterator[Tuple[K, V]]:
        for handle in self._store.handles(reverse=True):
            yield self._store.entry(handle)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self)
        return f"{type(self).__name__}({{{body}}}, capacity={self.capacity})"

    def clear(self) -> None:
        self._index = {}
        self._store.clear()
        logger.debug("Cleared %s", type(self).__name__)

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def push(self, key: K, value: V) -> Optional[V]:
        return self.push_back(key, value)

    def push_front(self, key: K, value: V) -> Optional[V]:
        """Associate ``value`` with ``key`` and place the entry at the front.

        Returns the previous value for an existing key, otherwise None. A
        None return can also mean the key was previously mapped to None.
        """
        handle = self._index.get(key, NIL)
        if handle != NIL:
            old = self._store.set_value(handle, value)
            self._store.move_to_front(handle)
            return old
        if self._full():
            self._evict(self._store.back)
        self._index[key] = self._store.push_front(key, value)
        return None

    def push_back(self, key: K, value: V) -> Optional[V]:
        """Associate ``value`` with ``key`` and place the entry at the back.

        Same return convention as :meth:`push_front`.
        """
        handle = self._index.get(key, NIL)
        if handle != NIL:
            old = self._store.set_value(handle, value)
            self._store.move_to_back(handle)
            return old
        if self._full():
            self._evict(self._store.front)
        self._index[key] = self._store.push_back(key, value)
        return None

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def poll(self) -> Tuple[Optional[K], Optional[V], bool]:
        return self.poll_front()

    def poll_front(self) -> Tuple[Optional[K], Optional[V], bool]:
        return self._take(self._store.front)

    def poll_back(self) -> Tuple[Optional[K], Optional[V], bool]:
        return self._take(self._store.back)

    def remove(self, key: K) -> Tuple[Optional[V], bool]:
        handle = self._index.pop(key, NIL)
        if handle == NIL:
            return None, False
        _, value = self._store.remove(handle)
        return value, True

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def peek(self) -> Tuple[Optional[K], Optional[V], bool]:
        return self.peek_front()

    def peek_front(self) -> Tuple[Optional[K], Optional[V], bool]:
        return self._look(self._store.front)

    def peek_back(self) -> Tuple[Optional[K], Optional[V], bool]:
        return self._look(self._store.back)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for ``key`` and mark the entry most recently used.

        A hit moves the entry to the back. A miss returns ``default`` and
        leaves the map untouched.
        """
        handle = self._index.get(key, NIL)
        if handle == NIL:
            return default
        self._store.move_to_back(handle)
        return self._store.value(handle)

    def contains_key(self, key: K) -> bool:
        return key in self._index

    def contains_value(self, value: V) -> bool:
        cmp = self._options.comparator
        for handle in self._store.handles():
            if equal(self._store.value(handle), value, cmp):
                return True
        return False

    def keys(self) -> List[K]:
        return [k for k, _ in self]

    def values(self) -> List[V]:
        return [v for _, v in self]

    def items(self) -> List[Tuple[K, V]]:
        return list(self)

    # ------------------------------------------------------------------
    # Callback traversal
    # ------------------------------------------------------------------

    def iterator(self, callback: Optional[Callable[[K, V], bool]]) -> None:
        """Visit entries front -> back until ``callback`` returns falsy."""
        self._visit(callback, reverse=False)

    def reverse_iterator(self, callback: Optional[Callable[[K, V], bool]]) -> None:
        """Visit entries back -> front until ``callback`` returns falsy."""
        self._visit(callback, reverse=True)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _visit(self, callback, reverse: bool) -> None:
        if callback is None:
            return
        for handle in self._store.handles(reverse=reverse):
            key, value = self._store.entry(handle)
            if not callback(key, value):
                return

    def _full(self) -> bool:
        return self._options.bounded and len(self._store) >= self._options.capacity

    def _evict(self, handle: int) -> None:
        key, _ = self._store.entry(handle)
        del self._index[key]
        self._store.remove(handle)
        logger.debug("Evicted key %r at capacity %d", key, self._options.capacity)

    def _take(self, handle: int) -> Tuple[Optional[K], Optional[V], bool]:
        if handle == NIL:
            return None, None, False
        key, value = self._store.remove(handle)
        del self._index[key]
        return key, value, True

    def _look(self, handle: int) -> Tuple[Optional[K], Optional[V], bool]:
        if handle == NIL:
            return None, None, False
        key, value = self._store.entry(handle)
        return key, value, True
