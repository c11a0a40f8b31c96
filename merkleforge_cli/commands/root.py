"""
CLI Root Command

Build a Merkle root from caller-supplied leaves.

Usage:
    merkleforge root 0xab.. 0xcd.. --algorithm sha256
    merkleforge root --text tx1 --text tx2 --text tx3 --algorithm keccak256

Hex leaves always need --algorithm: the CLI will not guess which
family produced them. Text leaves fall back to the configured algorithm.
"""

from __future__ import annotations

from argparse import Namespace

from merkleforge.merkle import LeafSet, hash_texts
from merkleforge.schemas.errors import InvalidInputException, MerkleForgeException

from merkleforge_cli.commands.generate import (
    EXIT_INVALID_INPUT,
    EXIT_SUCCESS,
    TreeSummary,
    build_tree_summary,
    print_summary,
    wants_trace,
)


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.cli_config
    summary = TreeSummary()

    try:
        if args.leaves and args.texts:
            raise InvalidInputException(
                "Give either hex leaves or --text values, not both",
                field_path="leaves",
            )

        if args.texts:
            leaves = hash_texts(args.texts, args.algorithm or config.algorithm)
        else:
            leaves = LeafSet.from_hashes(args.leaves or [], args.algorithm)

        summary = build_tree_summary(leaves, trace=wants_trace(args), levels=args.levels)
    except MerkleForgeException as e:
        summary.error = e.to_error_model().model_dump()
        print_summary(summary, args)
        return EXIT_INVALID_INPUT

    print_summary(summary, args)
    return EXIT_SUCCESS
