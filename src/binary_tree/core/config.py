"""Configuration for the binary tree demo.

Defines the tunable parameters of the demonstration entry point and loads
them from TOML.
"""

from __future__ import annotations

import logging
import tomllib  # Python 3.11+
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigError

logger = logging.getLogger(__name__)

VARIANTS = ("iterative", "recursive")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TreeConfig:
    """Configuration parameters for the demonstration run.

    Attributes:
        values: Sequence inserted into both demo trees
        variant: Traversal variant to print, "iterative" or "recursive"
        log_level: Name of the root logging level
        plot_path: Where to save a rendered figure, or None to skip plotting
        plot_dpi: Resolution of the saved figure
    """

    values: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5, 6, 7])
    variant: str = "iterative"
    log_level: str = "WARNING"
    plot_path: str | None = None
    plot_dpi: int = 100

    def __post_init__(self) -> None:
        if self.variant not in VARIANTS:
            raise ConfigError(f"variant must be one of {VARIANTS}, got {self.variant!r}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        if not isinstance(self.values, list) or any(
            isinstance(v, bool) or not isinstance(v, int) for v in self.values
        ):
            raise ConfigError(f"values must be a list of integers, got {self.values!r}")
        if isinstance(self.plot_dpi, bool) or not isinstance(self.plot_dpi, int) or self.plot_dpi <= 0:
            raise ConfigError(f"plot_dpi must be a positive integer, got {self.plot_dpi!r}")
        if self.plot_path is not None and not isinstance(self.plot_path, str):
            raise ConfigError(f"plot_path must be a string, got {self.plot_path!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TreeConfig:
        """Build a config from a parsed TOML document.

        Keys are read from a ``[tree]`` table when present, otherwise from
        the top level. Unknown keys are rejected, as are top-level keys
        next to a ``[tree]`` table.
        """
        section = data.get("tree", data)
        if not isinstance(section, dict):
            raise ConfigError("[tree] must be a table")
        if section is not data:
            stray = sorted(set(data) - {"tree"})
            if stray:
                raise ConfigError(f"Keys outside the [tree] table: {', '.join(stray)}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**section)


def load_config(path: Path) -> TreeConfig:
    """Load a TreeConfig from a TOML file."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
        data = tomllib.loads(raw)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e
    cfg = TreeConfig.from_dict(data)
    logger.debug(f"Loaded config from {path}: {cfg}")
    return cfg
