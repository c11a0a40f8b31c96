"""
CLI Hash Command

Hash a UTF-8 string with the selected algorithm.

Usage:
    merkleforge hash "tx1" --algorithm sha256 --json
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace

from merkleforge.crypto.hashing import to_hex
from merkleforge.merkle import hash_text
from merkleforge.schemas.errors import MerkleForgeException

from merkleforge_cli.commands.generate import (
    EXIT_INVALID_INPUT,
    EXIT_SUCCESS,
    wants_json,
)


def hash_cmd(args: Namespace) -> int:
    """Execute the hash command."""
    algorithm = args.algorithm or args.cli_config.algorithm

    try:
        value, algo = hash_text(args.text, algorithm)
    except MerkleForgeException as e:
        if wants_json(args):
            print(json.dumps({"success": False, "error": e.to_error_model().model_dump()}, indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if wants_json(args):
        print(json.dumps({
            "success": True,
            "algorithm": algo.value,
            "text": args.text,
            "hash": to_hex(value),
        }, indent=2))
    else:
        print(f"algorithm: {algo.value}")
        print(f"hash: {to_hex(value)}")

    return EXIT_SUCCESS
