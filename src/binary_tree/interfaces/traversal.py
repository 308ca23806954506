"""Protocol definition for TraversalPath."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..core.tree import BinaryTree

T = TypeVar("T")


@runtime_checkable
class TraversalPath(Protocol[T]):
    """Produces the values of a tree in a fixed visiting order.

    Both variants must return identical sequences for the same tree.
    """

    def recursive(self, tree: BinaryTree[T] | None) -> list[T]:
        """Return the path using call recursion."""
        ...

    def iterative(self, tree: BinaryTree[T] | None) -> list[T]:
        """Return the path using an explicit stack."""
        ...
