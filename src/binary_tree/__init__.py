"""Binary Tree - weight-balanced binary tree with classic tree algorithms."""

from .components.node import BinaryTreeNode
from .components.traversal import InOrderPath, PostOrderPath, PreOrderPath
from .core.config import TreeConfig, load_config
from .core.errors import ConfigError, InvalidValueError, TreeError
from .core.tree import BinaryTree
from .interfaces import TraversalPath, Tree

__all__ = [
    "BinaryTree",
    "BinaryTreeNode",
    "InOrderPath",
    "PreOrderPath",
    "PostOrderPath",
    "TraversalPath",
    "Tree",
    "TreeConfig",
    "load_config",
    "TreeError",
    "InvalidValueError",
    "ConfigError",
]
