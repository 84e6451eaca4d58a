"""Typed hash sets with set algebra.

Each set is pinned to a numpy dtype. Members are checked against that dtype
on the way in (integers must fit ``np.iinfo``, floats are rounded through the
dtype's scalar type, strings must be ``str``) and stored as plain Python
scalars, so hashing and equality are those of ordinary Python values.

Query operations (``contains``, ``delete``, ``intersection``, ...) treat a
value the dtype cannot represent as simply absent. Operations that add
members (``insert``, ``union``) raise :class:`ElementTypeError` instead.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .errors import ConfigError, ElementTypeError

_SUPPORTED_KINDS = "iufU"


class TypedSet:
    """Hash set whose members all fit a single numpy dtype.

    Args:
        items: Initial members.
        dtype: Element dtype; subclasses pin it through the ``dtype`` class
            attribute.
    """

    dtype: Optional[np.dtype] = None

    def __init__(self, items: Iterable[Any] = (), dtype: Any = None):
        resolved = dtype if dtype is not None else type(self).dtype
        if resolved is None:
            raise ConfigError(f"{type(self).__name__} requires a dtype")
        self._dtype = np.dtype(resolved)
        if self._dtype.kind not in _SUPPORTED_KINDS:
            raise ConfigError(f"Unsupported set dtype: {self._dtype}")
        self._items: Set[Any] = set()
        self.insert(items)

    @property
    def element_dtype(self) -> np.dtype:
        return self._dtype

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (TypedSet, set, frozenset)):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sorted_list()!r})"

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, items: Iterable[Any]) -> "TypedSet":
        self._items.update(self._coerce(item) for item in items)
        return self

    def delete(self, items: Iterable[Any]) -> "TypedSet":
        for item in items:
            coerced = self._try_coerce(item)
            if coerced is not None:
                self._items.discard(coerced)
        return self

    def pop_any(self) -> Tuple[Any, bool]:
        if not self._items:
            return None, False
        return self._items.pop(), True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, item: Any) -> bool:
        coerced = self._try_coerce(item)
        return coerced is not None and coerced in self._items

    def contains_all(self, items: Iterable[Any]) -> bool:
        return all(self.contains(item) for item in items)

    def contains_any(self, items: Iterable[Any]) -> bool:
        return any(self.contains(item) for item in items)

    def is_superset(self, other: Iterable[Any]) -> bool:
        return self.contains_all(other)

    def equal(self, other: Iterable[Any]) -> bool:
        """Order-independent, duplicate-insensitive equality."""
        raw = other._items if isinstance(other, TypedSet) else set(other)
        members = self._lenient(raw)
        return len(members) == len(raw) and members == self._items

    # ------------------------------------------------------------------
    # Algebra (new sets, operands untouched)
    # ------------------------------------------------------------------

    def union(self, other: Iterable[Any]) -> "TypedSet":
        result = self._copy()
        result.insert(other)
        return result

    def intersection(self, other: Iterable[Any]) -> "TypedSet":
        members = self._lenient(other)
        # walk the smaller side
        if len(members) < len(self._items):
            kept = {item for item in members if item in self._items}
        else:
            kept = {item for item in self._items if item in members}
        return self._copy(kept)

    def difference(self, other: Iterable[Any]) -> "TypedSet":
        members = self._lenient(other)
        return self._copy(item for item in self._items if item not in members)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def sorted_list(self) -> List[Any]:
        return sorted(self._items)

    def unsorted_list(self) -> List[Any]:
        return list(self._items)

    def to_array(self) -> np.ndarray:
        """Members in ascending order as an array of the set's dtype."""
        dtype = str if self._dtype.kind == "U" else self._dtype
        return np.array(self.sorted_list(), dtype=dtype)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _copy(self, items: Optional[Iterable[Any]] = None) -> "TypedSet":
        return type(self)(self._items if items is None else items, dtype=self._dtype)

    def _lenient(self, items: Iterable[Any]) -> Set[Any]:
        if isinstance(items, TypedSet) and items._dtype == self._dtype:
            return items._items
        coerced = (self._try_coerce(item) for item in items)
        return {item for item in coerced if item is not None}

    def _try_coerce(self, item: Any) -> Any:
        try:
            return self._coerce(item)
        except ElementTypeError:
            return None

    def _coerce(self, item: Any) -> Any:
        kind = self._dtype.kind
        if kind == "U":
            if not isinstance(item, str):
                raise ElementTypeError(f"Expected str member, got {type(item)!r}")
            return str(item)
        if isinstance(item, (bool, np.bool_)):
            raise ElementTypeError(f"Boolean member not allowed in {self._dtype} set")
        if kind in "iu":
            if not isinstance(item, (int, np.integer)):
                raise ElementTypeError(
                    f"Expected integer member for {self._dtype} set, got {type(item)!r}"
                )
            info = np.iinfo(self._dtype)
            value = int(item)
            if value < info.min or value > info.max:
                raise ElementTypeError(
                    f"{value} is out of range for {self._dtype} [{info.min}, {info.max}]"
                )
            return value
        if not isinstance(item, (int, float, np.integer, np.floating)):
            raise ElementTypeError(
                f"Expected numeric member for {self._dtype} set, got {type(item)!r}"
            )
        try:
            value = float(item)
        except (OverflowError, ValueError) as e:
            raise ElementTypeError(f"{item!r} is not representable in {self._dtype}") from e
        info = np.finfo(self._dtype)
        # inf/nan pass through; finite values must not overflow the dtype
        if np.isfinite(value) and abs(value) > info.max:
            raise ElementTypeError(
                f"{value} is out of range for {self._dtype} [{info.min}, {info.max}]"
            )
        return float(self._dtype.type(value))


class IntSet(TypedSet):
    dtype = np.dtype(np.int64)


class Int8Set(TypedSet):
    dtype = np.dtype(np.int8)


class Int16Set(TypedSet):
    dtype = np.dtype(np.int16)


class Int32Set(TypedSet):
    dtype = np.dtype(np.int32)


class Int64Set(TypedSet):
    dtype = np.dtype(np.int64)


class UintSet(TypedSet):
    dtype = np.dtype(np.uint64)


class Uint8Set(TypedSet):
    dtype = np.dtype(np.uint8)


class Uint16Set(TypedSet):
    dtype = np.dtype(np.uint16)


class Uint32Set(TypedSet):
    dtype = np.dtype(np.uint32)


class Uint64Set(TypedSet):
    dtype = np.dtype(np.uint64)


class Float32Set(TypedSet):
    dtype = np.dtype(np.float32)


class Float64Set(TypedSet):
    dtype = np.dtype(np.float64)


class StringSet(TypedSet):
    dtype = np.dtype(str)
