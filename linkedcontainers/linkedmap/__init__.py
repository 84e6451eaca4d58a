"""Order-preserving bounded map and its backing store."""

from .core import LinkedMap
from .store import OrderedStore

__all__ = ["LinkedMap", "OrderedStore"]
