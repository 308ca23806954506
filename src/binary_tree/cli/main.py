# Demonstration CLI: builds two trees, prints the diagram, the three
# traversals and the merged tree.
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from binary_tree.components.render import EMPTY_TREE
from binary_tree.components.traversal import InOrderPath, PostOrderPath, PreOrderPath
from binary_tree.core.config import LOG_LEVELS, VARIANTS, TreeConfig, load_config
from binary_tree.core.errors import ConfigError
from binary_tree.core.tree import BinaryTree

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Send log records to stderr so stdout stays the demo output."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="binary-tree-demo",
        description="Build weight-balanced binary trees and print their traversals",
    )
    p.add_argument("--config", type=Path, help="TOML config file (optional)")
    p.add_argument(
        "--values", type=int, nargs="+", help="Values inserted into both trees (default: 1..7)"
    )
    p.add_argument("--variant", choices=VARIANTS, help="Traversal implementation to print")
    p.add_argument("--plot", type=Path, help="Save a figure of the first tree to this file")
    p.add_argument("--log-level", choices=LOG_LEVELS, help="Logging level (default: WARNING)")
    return p


def resolve_config(args: argparse.Namespace) -> TreeConfig:
    """Config file first, then command-line flags on top."""
    cfg = load_config(args.config) if args.config else TreeConfig()
    overrides = {}
    if args.values is not None:
        overrides["values"] = args.values
    if args.variant is not None:
        overrides["variant"] = args.variant
    if args.plot is not None:
        overrides["plot_path"] = str(args.plot)
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return replace(cfg, **overrides) if overrides else cfg


def run_demo(cfg: TreeConfig) -> None:
    tree = BinaryTree(cfg.values)
    other = BinaryTree(cfg.values)
    logger.info(f"Built two trees of {tree.size()} nodes from {cfg.values}")

    print(str(tree).rstrip("\n"))
    for path in (PreOrderPath(), PostOrderPath(), InOrderPath()):
        walk = path.iterative if cfg.variant == "iterative" else path.recursive
        print(walk(tree))

    merged = BinaryTree.merge(tree, other)
    print(str(merged).rstrip("\n") if merged is not None else EMPTY_TREE)

    if cfg.plot_path:
        tree.plot(cfg.plot_path, dpi=cfg.plot_dpi, title=f"{tree.size()} nodes")
        print(f"Wrote plot to {cfg.plot_path}")


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cfg = resolve_config(args)
    except ConfigError as e:
        print(f"Error loading config: {e}")
        return 2

    setup_logging(cfg.log_level)
    run_demo(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
