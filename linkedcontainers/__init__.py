"""linkedcontainers - Linked in-memory collections: ordered bounded map, list, queue and typed sets."""

# --- Core ---
from .linkedmap import LinkedMap, OrderedStore

# --- Collections ---
from .linked import LinkedList
from .queue import Queue
from .sets import (
    TypedSet,
    IntSet, Int8Set, Int16Set, Int32Set, Int64Set,
    UintSet, Uint8Set, Uint16Set, Uint32Set, Uint64Set,
    Float32Set, Float64Set, StringSet,
)

# --- Infrastructure ---
from .errors import ContainerError, ConfigError, IndexOutOfRangeError, ElementTypeError
from .specs import MapOptions
from .comparator import Comparator, default_compare
from . import constants

__version__ = "0.1.0"

__all__ = [
    "LinkedMap", "OrderedStore",
    "LinkedList", "Queue",
    "TypedSet", "IntSet", "Int8Set", "Int16Set", "Int32Set", "Int64Set",
    "UintSet", "Uint8Set", "Uint16Set", "Uint32Set", "Uint64Set",
    "Float32Set", "Float64Set", "StringSet",
    "ContainerError", "ConfigError", "IndexOutOfRangeError", "ElementTypeError",
    "MapOptions", "Comparator", "default_compare",
    "constants",
]
