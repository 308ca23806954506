"""Matplotlib figure of a binary tree.

Uses the backend-independent Figure API so it works without a display.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from matplotlib.figure import Figure

from .node import BinaryTreeNode
from .render import EMPTY_TREE

if TYPE_CHECKING:
    from ..core.tree import BinaryTree

logger = logging.getLogger(__name__)

Position = Tuple[float, float]


def layout(tree: BinaryTree[Any]) -> Dict[int, Tuple[BinaryTreeNode[Any], Position]]:
    """Map id(node) to (node, (x, y)): x is the in-order index, y is -depth."""
    positions: Dict[int, Tuple[BinaryTreeNode[Any], Position]] = {}
    stack: list[Tuple[BinaryTreeNode[Any], int]] = []
    node = tree.root
    depth = 0
    index = 0
    while stack or node is not None:
        if node is not None:
            stack.append((node, depth))
            node = node.left
            depth += 1
        else:
            node, depth = stack.pop()
            positions[id(node)] = (node, (float(index), float(-depth)))
            index += 1
            node = node.right
            depth += 1
    return positions


def plot_tree(
    tree: BinaryTree[Any],
    output: Optional[Path | str] = None,
    dpi: int = 100,
    title: Optional[str] = None,
) -> Figure:
    """Draw the tree and optionally save it to output."""
    positions = layout(tree)
    width = max(4.0, 0.8 * len(positions))
    height = max(3.0, 1.0 * (tree.height() + 2))
    fig = Figure(figsize=(width, height), dpi=dpi)
    ax = fig.add_subplot(1, 1, 1)
    ax.set_axis_off()
    if title:
        ax.set_title(title)

    if not positions:
        ax.text(0.5, 0.5, EMPTY_TREE, ha="center", va="center", transform=ax.transAxes)
    else:
        for node, (x, y) in positions.values():
            for child in (node.left, node.right):
                if child is not None:
                    _, (cx, cy) = positions[id(child)]
                    ax.plot([x, cx], [y, cy], color="gray", linewidth=1, zorder=1)
        xs = [p[0] for _, p in positions.values()]
        ys = [p[1] for _, p in positions.values()]
        ax.scatter(xs, ys, s=600, color="lightsteelblue", edgecolors="navy", zorder=2)
        for node, (x, y) in positions.values():
            ax.annotate(str(node), (x, y), ha="center", va="center", fontsize=9, zorder=3)
        ax.margins(0.15)

    if output is not None:
        fig.savefig(output, dpi=dpi, bbox_inches="tight")
        logger.info(f"Saved tree plot ({len(positions)} nodes) to {output}")
    return fig
