"""Construction options for containers, fixed for an instance's lifetime."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .comparator import Comparator, validate
from .constants import DEFAULT_CAPACITY
from .errors import ConfigError


@dataclass(frozen=True)
class MapOptions:
    capacity: int = DEFAULT_CAPACITY
    comparator: Optional[Comparator] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "capacity", normalize_capacity(self.capacity))
        validate(self.comparator)

    @property
    def bounded(self) -> bool:
        return self.capacity > 0


def normalize_capacity(capacity: int) -> int:
    # bool is an int subclass but never a meaningful capacity
    if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
        raise ConfigError(f"Capacity must be an int, got {type(capacity)!r}")
    if capacity < 0:
        raise ConfigError(f"Capacity must be >= 0 (0 = unbounded), got {capacity}")
    return int(capacity)
