"""
CLI Generate Command

Generate random leaves and build their Merkle root.

Usage:
    merkleforge generate 75 --algorithm sha256
    merkleforge generate --trace --levels --json
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field
from typing import Any

from merkleforge.crypto.hashing import to_hex
from merkleforge.merkle import (
    LeafSet,
    LevelRecorder,
    LoggingObserver,
    build_merkle_root,
    compute_tree_depth,
    generate_random_leaves,
)
from merkleforge.schemas.errors import MerkleForgeException


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_INVALID_INPUT = 2


@dataclass
class TreeSummary:
    """Summary of a tree build for CLI output."""
    algorithm: str = ""
    leaf_count: int = 0
    tree_height: int = 0
    root: str = ""
    leaves: list[str] = field(default_factory=list)
    levels: list[list[str]] | None = None
    success: bool = False
    error: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if d["error"] is None:
            del d["error"]
        if d["levels"] is None:
            del d["levels"]
        return d


def wants_json(args: Namespace) -> bool:
    """JSON output if requested by flag or by configuration."""
    if getattr(args, "json", False):
        return True
    config = getattr(args, "cli_config", None)
    return config is not None and config.default_output_format == "json"


def wants_trace(args: Namespace) -> bool:
    if getattr(args, "trace", False):
        return True
    config = getattr(args, "cli_config", None)
    return config is not None and config.trace


def build_tree_summary(leaves: LeafSet, trace: bool = False, levels: bool = False) -> TreeSummary:
    """Build the root of `leaves`, attaching the requested observers."""
    observers = []
    recorder = LevelRecorder(leaves) if levels else None
    if recorder is not None:
        observers.append(recorder)
    if trace:
        observers.append(LoggingObserver())

    def observe(event):
        for observer in observers:
            observer(event)

    root = build_merkle_root(leaves, observer=observe if observers else None)

    return TreeSummary(
        algorithm=leaves.algorithm.value,
        leaf_count=len(leaves),
        tree_height=compute_tree_depth(len(leaves)),
        root=to_hex(root),
        leaves=leaves.hex_hashes(),
        levels=recorder.hex_levels() if recorder is not None else None,
        success=True,
    )


def print_summary_human(summary: TreeSummary) -> None:
    """Print summary in human-readable format."""
    if not summary.success:
        print("Failed to build Merkle tree", file=sys.stderr)
        if summary.error:
            print(f"Error: {summary.error['message']}", file=sys.stderr)
        return

    print(f"algorithm: {summary.algorithm}")
    print(f"leaves: {summary.leaf_count}")
    for i, leaf in enumerate(summary.leaves):
        print(f"  [{i}] {leaf}")

    if summary.levels is not None:
        for number, level in enumerate(summary.levels[1:], start=1):
            print(f"level {number}:")
            for i, node in enumerate(level):
                print(f"  [{i}] {node}")

    print(f"tree_height: {summary.tree_height}")
    print(f"merkle_root: {summary.root}")


def print_summary_json(summary: TreeSummary) -> None:
    """Print summary as JSON."""
    print(json.dumps(summary.to_dict(), indent=2))


def print_summary(summary: TreeSummary, args: Namespace) -> None:
    if wants_json(args):
        print_summary_json(summary)
    else:
        print_summary_human(summary)


def generate_cmd(args: Namespace) -> int:
    """
    Execute the generate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.cli_config
    count = args.count if args.count is not None else config.leaf_count
    algorithm = args.algorithm or config.algorithm

    summary = TreeSummary()

    try:
        leaves = generate_random_leaves(count, algorithm)
        logger.info(f"Using {leaves.algorithm.value} for {len(leaves)} leaves")
        summary = build_tree_summary(leaves, trace=wants_trace(args), levels=args.levels)
    except MerkleForgeException as e:
        summary.error = e.to_error_model().model_dump()
        print_summary(summary, args)
        return EXIT_INVALID_INPUT

    print_summary(summary, args)
    return EXIT_SUCCESS
