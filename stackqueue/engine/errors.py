from __future__ import annotations


class ContainerError(Exception):
    """Base for errors raised by the bounded containers."""


class CapacityExceeded(ContainerError):
    """Insertion would push the container past its maxsize."""


class EmptyContainer(ContainerError, IndexError):
    """Removal attempted on an empty container."""


class ItemNotFound(ContainerError, ValueError):
    """search() found no matching element."""
