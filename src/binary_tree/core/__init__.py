"""Binary tree core package."""

from .config import TreeConfig, load_config
from .tree import BinaryTree

__all__ = ["BinaryTree", "TreeConfig", "load_config"]
