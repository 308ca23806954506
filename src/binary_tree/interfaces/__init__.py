"""Protocol definitions for the binary tree package."""

from .traversal import TraversalPath
from .tree import Tree

__all__ = ["Tree", "TraversalPath"]
