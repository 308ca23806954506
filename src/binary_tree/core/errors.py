"""Exception hierarchy for the binary tree package.

Looking up a value that is not in the tree is never an error; these cover
invalid input and configuration only.
"""

from __future__ import annotations


class TreeError(Exception):
    """Base exception for all binary tree errors."""
    pass


class InvalidValueError(TreeError, ValueError):
    """Raised when a value cannot be stored in the tree (e.g. None)."""
    pass


class ConfigError(TreeError):
    """Raised when a configuration file is missing, malformed or invalid."""
    pass
