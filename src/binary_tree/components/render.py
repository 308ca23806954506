"""Text diagram of a binary tree, right subtree above and left below."""

from __future__ import annotations

from typing import Any, List, Optional

from .node import BinaryTreeNode

EMPTY_TREE = "Empty Tree."


def render(root: Optional[BinaryTreeNode[Any]]) -> str:
    """
    Render the subtree rooted at root as an indented diagram, e.g. for 1..7:

        │       ┌── 7
        │   ┌── 3
        │   │   └── 5
        └── 1
            │   ┌── 6
            └── 2
                └── 4
    """
    if root is None:
        return EMPTY_TREE
    lines: List[str] = []

    def _render(node: BinaryTreeNode[Any], prefix: str, is_left: bool) -> None:
        if node.right is not None:
            _render(node.right, prefix + ("│   " if is_left else "    "), False)
        lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node}\n")
        if node.left is not None:
            _render(node.left, prefix + ("    " if is_left else "│   "), True)

    _render(root, "", True)
    return "".join(lines)
