"""Binary tree node."""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class BinaryTreeNode(Generic[T]):
    """
    A node holds a value, its two children, a back reference to its parent
    and the cached number of nodes in the subtree rooted here.

    Two nodes compare equal when their values do; structure and identity
    are ignored.
    """

    __slots__ = ("value", "left", "right", "parent", "size")

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional[BinaryTreeNode[T]] = None
        self.right: Optional[BinaryTreeNode[T]] = None
        self.parent: Optional[BinaryTreeNode[T]] = None  # not owned
        self.size: int = 1

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def refresh(self) -> None:
        """Recompute the cached size and re-point the children at this node."""
        if self.left is not None:
            self.left.parent = self
        if self.right is not None:
            self.right.parent = self
        self.size = 1 + size_of(self.left) + size_of(self.right)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, BinaryTreeNode):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)


def size_of(node: Optional[BinaryTreeNode[Any]]) -> int:
    """Cached subtree size, 0 for an empty subtree."""
    return 0 if node is None else node.size
