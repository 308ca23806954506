"""
Depth-first traversal paths over a BinaryTree.

Each order comes in two independent implementations:
    recursive: direct call recursion, O(h) call stack
    iterative: explicit pending-node stack, safe for deep trees
Both return every value exactly once, so for any tree the two variants of
the same order produce identical lists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, List, Optional, TypeVar

from .node import BinaryTreeNode

if TYPE_CHECKING:
    from ..core.tree import BinaryTree

T = TypeVar("T")


def _root(tree: Optional[BinaryTree[T]]) -> Optional[BinaryTreeNode[T]]:
    return None if tree is None else tree.root


class InOrderPath(Generic[T]):
    """Left, self, right."""

    def recursive(self, tree: Optional[BinaryTree[T]]) -> List[T]:
        path: List[T] = []

        def _walk(node: Optional[BinaryTreeNode[T]]) -> None:
            if node is not None:
                _walk(node.left)  # go left
                path.append(node.value)  # go up
                _walk(node.right)  # go right

        _walk(_root(tree))
        return path

    def iterative(self, tree: Optional[BinaryTree[T]]) -> List[T]:
        path: List[T] = []
        stack: List[BinaryTreeNode[T]] = []
        node = _root(tree)
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left  # go left
            else:
                node = stack.pop()  # go up
                path.append(node.value)
                node = node.right  # go right
        return path


class PreOrderPath(Generic[T]):
    """Self, left, right."""

    def recursive(self, tree: Optional[BinaryTree[T]]) -> List[T]:
        path: List[T] = []

        def _walk(node: Optional[BinaryTreeNode[T]]) -> None:
            if node is not None:
                path.append(node.value)
                _walk(node.left)
                _walk(node.right)

        _walk(_root(tree))
        return path

    def iterative(self, tree: Optional[BinaryTree[T]]) -> List[T]:
        path: List[T] = []
        root = _root(tree)
        if root is None:
            return path
        stack: List[BinaryTreeNode[T]] = [root]
        while stack:
            node = stack.pop()
            path.append(node.value)
            # right first so that left is popped first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return path


class PostOrderPath(Generic[T]):
    """Left, right, self."""

    def recursive(self, tree: Optional[BinaryTree[T]]) -> List[T]:
        path: List[T] = []

        def _walk(node: Optional[BinaryTreeNode[T]]) -> None:
            if node is not None:
                _walk(node.left)
                _walk(node.right)
                path.append(node.value)

        _walk(_root(tree))
        return path

    def iterative(self, tree: Optional[BinaryTree[T]]) -> List[T]:
        """Visits self, right, left and reverses the result."""
        path: List[T] = []
        root = _root(tree)
        if root is None:
            return path
        stack: List[BinaryTreeNode[T]] = [root]
        while stack:
            node = stack.pop()
            path.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        path.reverse()
        return path
