"""Protocol definition for Tree."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Tree(Protocol[T]):
    """A container of values arranged as a tree."""

    def size(self) -> int:
        """Return the number of nodes in this tree."""
        ...

    def add(self, value: T) -> None:
        """Insert a new node holding value."""
        ...

    def is_empty(self) -> bool:
        """Return True if this tree contains no nodes."""
        ...

    def remove(self, value: T) -> None:
        """Remove one node holding value, if any."""
        ...

    def contains(self, value: T) -> bool:
        """Return True if any node holds value."""
        ...
