"""Shared error types for linkedcontainers."""

from __future__ import annotations


class ContainerError(Exception):
    """Base error type for linkedcontainers."""


class ConfigError(ContainerError, ValueError):
    """Raised when a container is constructed with invalid options."""


class IndexOutOfRangeError(ContainerError, IndexError):
    """Raised when a positional operation gets an index outside the list."""


class ElementTypeError(ContainerError, TypeError):
    """Raised when a set member does not fit the set's element type."""
