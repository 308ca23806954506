"""Weight-balanced binary tree.

Values are placed by subtree size, never by ordering: a new value always
descends into the lighter child. Deletion swaps the doomed value down into
the lighter child until it sits in a leaf, then drops that leaf.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Generic, Iterable, Iterator, List, Optional, Protocol, Tuple, TypeVar

from ..components.node import BinaryTreeNode, size_of
from ..components.plot import plot_tree
from ..components.render import render
from ..components.traversal import InOrderPath
from .errors import InvalidValueError

if TYPE_CHECKING:
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)

T = TypeVar("T")


# Values merge() can sum: with each other, and with 0 where one side is missing
class SupportsAdd(Protocol):
    def __add__(self, other: Any) -> Any: ...
    def __radd__(self, other: Any) -> Any: ...


N = TypeVar("N", bound=SupportsAdd)

Node = BinaryTreeNode


class BinaryTree(Generic[T]):
    """Binary tree kept weight-balanced on insertion.

    Public API:
        - size() / is_empty(): cached node count
        - add(value): balanced insertion
        - remove(value): swap-down deletion of one matching node
        - contains(value): membership by value equality
        - find_lca(v0, v1): lowest common ancestor of two values
        - is_balanced() / is_symmetric(): shape predicates
        - invert(): mirror in place
        - merge(first, second): position-wise sum of two trees

    Invariants:
        - Every node's cached size equals 1 + size(left) + size(right)
        - Every child's parent points at the node owning it; the root has none
        - Trees built only through add() have 0 <= size(left) - size(right) <= 1
          at every node

    Not safe for concurrent mutation: there is no internal locking.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[Node[T]] = None
        if values is not None:
            for value in values:
                self.add(value)

    @property
    def root(self) -> Optional[Node[T]]:
        return self._root

    def size(self) -> int:
        return size_of(self._root)

    def is_empty(self) -> bool:
        return self.size() == 0

    # -------------------------------
    # Insert
    # -------------------------------
    def add(self, value: T) -> None:
        """Insert value as a new leaf on the lighter side, preferring left."""
        if value is None:
            raise InvalidValueError("BinaryTree does not store None")

        def _add(node: Optional[Node[T]]) -> Node[T]:
            if node is None:
                return Node(value)
            if node.left is None or (node.right is not None and node.left.size <= node.right.size):
                node.left = _add(node.left)
            else:
                node.right = _add(node.right)
            node.refresh()
            return node

        self._root = _add(self._root)
        self._root.parent = None
        logger.debug(f"Added {value!r}, size={self.size()}")

    # -------------------------------
    # Delete
    # -------------------------------
    def remove(self, value: T) -> None:
        """
        Remove one node holding value, if any.
        The value is swapped into the lighter child repeatedly until it reaches
        a leaf, which is then unlinked. Sizes are re-derived for the whole tree
        afterwards. With duplicates, which occurrence goes is not guaranteed.
        """
        node = self._find_first(self._root, value)
        if node is None:
            logger.debug(f"Remove {value!r}: not found")
            return

        while True:
            left, right = node.left, node.right
            if right is not None and (left is None or right.size < left.size):
                child = right
            elif left is not None:
                child = left
            else:
                break  # reached a leaf
            node.value, child.value = child.value, node.value
            node = child

        parent = node.parent
        if parent is None:
            self._root = None
        elif parent.left is node:
            parent.left = None
        else:
            parent.right = None
        node.parent = None

        self._update_sizes()
        logger.debug(f"Removed {value!r}, size={self.size()}")

    def _update_sizes(self) -> None:
        """Full post-order pass recomputing every cached size and parent link."""
        if self._root is None:
            return
        self._root.parent = None
        stack: List[Tuple[Node[T], bool]] = [(self._root, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                node.refresh()
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    # -------------------------------
    # Search
    # -------------------------------
    def contains(self, value: T) -> bool:
        """Return True if any node holds value; depth-first, left before right."""
        return self._find_first(self._root, value) is not None

    @staticmethod
    def _find_first(root: Optional[Node[T]], value: T) -> Optional[Node[T]]:
        """First node holding value in pre-order, or None."""
        stack: List[Node[T]] = [] if root is None else [root]
        while stack:
            node = stack.pop()
            if node.value == value:
                return node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return None

    def find_lca(self, v0: T, v1: T) -> Optional[T]:
        """
        Return the value at the lowest common ancestor of the first nodes
        holding v0 and v1, or None when either value is absent.
        Time Complexity: O(n), a single bottom-up pass once both nodes are located
        """
        n0 = self._find_first(self._root, v0)
        n1 = self._find_first(self._root, v1)
        if n0 is None or n1 is None:
            logger.debug(f"LCA({v0!r}, {v1!r}): value not in tree")
            return None

        def _lca(node: Optional[Node[T]]) -> Tuple[Optional[Node[T]], int]:
            """Return (ancestor, number of targets found) for this subtree."""
            if node is None:
                return None, 0
            left = _lca(node.left)
            if left[1] == 2:
                return left
            right = _lca(node.right)
            if right[1] == 2:
                return right
            found = (node is n0) + (node is n1) + left[1] + right[1]
            return (node if found == 2 else None), found

        ancestor, _ = _lca(self._root)
        return None if ancestor is None else ancestor.value

    # -------------------------------
    # Shape
    # -------------------------------
    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""

        def _height(node: Optional[Node[T]]) -> int:
            if node is None:
                return -1
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self._root)

    def is_balanced(self) -> bool:
        """True if at every node the child heights differ by at most one."""

        def _check(node: Optional[Node[T]]) -> Tuple[bool, int]:
            if node is None:
                return True, -1  # one level below the lowest leaf
            left = _check(node.left)
            if not left[0]:
                return left
            right = _check(node.right)
            if not right[0]:
                return right
            return abs(left[1] - right[1]) <= 1, 1 + max(left[1], right[1])

        return _check(self._root)[0]

    def is_symmetric(self) -> bool:
        """True if the tree is its own mirror image, comparing values."""

        def _mirror(a: Optional[Node[T]], b: Optional[Node[T]]) -> bool:
            if a is None and b is None:
                return True
            return (
                a is not None
                and b is not None
                and a == b
                and _mirror(a.left, b.right)
                and _mirror(a.right, b.left)
            )

        return self._root is None or _mirror(self._root.left, self._root.right)

    def invert(self) -> None:
        """Swap the children of every node, in place."""

        def _invert(node: Optional[Node[T]]) -> Optional[Node[T]]:
            if node is None:
                return None
            right = node.right
            node.right = _invert(node.left)
            node.left = _invert(right)
            return node

        self._root = _invert(self._root)

    # -------------------------------
    # Merge
    # -------------------------------
    @staticmethod
    def merge(first: Optional[BinaryTree[N]], second: Optional[BinaryTree[N]]) -> Optional[BinaryTree[N]]:
        """
        Overlay two trees position by position, summing the values.
        A position present in only one tree keeps that tree's value, so values
        must be numeric, or at least support + with each other and with 0.
        Returns None if either tree is missing or empty; inputs are not modified.
        """
        if first is None or first.is_empty() or second is None or second.is_empty():
            return None

        def _merge(a: Optional[Node[N]], b: Optional[Node[N]]) -> Optional[Node[N]]:
            if a is None and b is None:
                return None
            merged = Node((0 if a is None else a.value) + (0 if b is None else b.value))
            merged.left = _merge(None if a is None else a.left, None if b is None else b.left)
            merged.right = _merge(None if a is None else a.right, None if b is None else b.right)
            merged.refresh()
            return merged

        tree: BinaryTree[N] = BinaryTree()
        tree._root = _merge(first._root, second._root)
        logger.debug(f"Merged trees of size {first.size()} and {second.size()} into {tree.size()}")
        return tree

    # -------------------------------
    # Utility
    # -------------------------------
    def to_list(self) -> List[T]:
        """Return all values in in-order."""
        return InOrderPath().iterative(self)

    def plot(self, output: Optional[Path | str] = None, dpi: int = 100, title: Optional[str] = None) -> Figure:
        return plot_tree(self, output=output, dpi=dpi, title=title)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"BinaryTree({self.to_list()})"

    def __str__(self) -> str:
        return render(self._root)
