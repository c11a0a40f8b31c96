"""
Merkle Tree Implementation
Deterministic Merkle root construction over a LeafSet.

This module provides:
- combine: canonical parent of an unordered sibling pair
- build_merkle_root: level-by-level reduction to a single root
- compute_tree_depth: number of levels for a given leaf count
- ReductionEvent: per-step event passed to an optional observer

Commitment Rules (Hard Contracts):
1. Parent hashing: parent = H(min(a, b) || max(a, b)), bytewise order
2. Odd node: the last unpaired node is promoted unchanged to the next level
3. Single leaf: root = leaf (no hashing at all)
4. Empty leaves: rejected with EmptyInputException
5. One algorithm per tree, taken from the LeafSet

Determinism Notes:
- Leaf order is defined by the caller and never re-sorted
- Only sibling pairs are sorted, inside combine()
- No diagnostic output is produced here; attach an observer instead
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from merkleforge.crypto.hashing import (
    HashAlgorithm,
    from_hex,
    hash_concat,
    resolve_algorithm,
    to_hex,
)
from merkleforge.merkle.models import LeafSet
from merkleforge.schemas.errors import EmptyInputException, InvalidInputException


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReductionEvent:
    """
    One step of tree reduction.

    Attributes:
        level: 1-based index of the level being produced (leaves are level 0)
        index: Position of `parent` within the produced level
        left: First node of the pair, or the promoted node
        right: Second node of the pair, None when promoted
        parent: Node placed in the produced level
        promoted: True when `left` was carried up unchanged
    """
    level: int
    index: int
    left: bytes
    right: Optional[bytes]
    parent: bytes
    promoted: bool = False


ReductionObserver = Callable[[ReductionEvent], None]


def _as_digest(value: bytes | str, name: str) -> bytes:
    if isinstance(value, str):
        try:
            return from_hex(value)
        except ValueError as e:
            raise InvalidInputException(
                f"{name} is not a valid hex digest: {e}",
                field_path=name,
            ) from e
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise InvalidInputException(
        f"{name} must be bytes or a 0x-hex string, got {type(value).__name__}",
        field_path=name,
    )


def combine(a: bytes | str, b: bytes | str, algorithm: HashAlgorithm | str) -> bytes:
    """
    Compute the parent of two sibling digests.

    The pair is sorted bytewise before hashing, so argument order
    does not matter: combine(a, b) == combine(b, a).

    Args:
        a: Sibling digest (bytes or 0x-hex)
        b: Sibling digest (bytes or 0x-hex)
        algorithm: Algorithm of the tree

    Returns:
        Parent digest H(lo || hi)

    Raises:
        UnsupportedAlgorithmException: If algorithm is not supported
        InvalidInputException: If a digest is malformed
    """
    algo = resolve_algorithm(algorithm)
    first = _as_digest(a, "a")
    second = _as_digest(b, "b")

    lo, hi = (first, second) if first <= second else (second, first)
    return hash_concat(lo, hi, algo)


def build_merkle_root(
    leaves: LeafSet,
    observer: ReductionObserver | None = None,
) -> bytes:
    """
    Build a Merkle root from a LeafSet.

    Algorithm:
    1. If single leaf: return the leaf itself
    2. Otherwise, iteratively build levels:
       - Combine consecutive pairs (0,1), (2,3), ...
       - If odd number of nodes, promote the last one unchanged
       - Repeat until a single root remains

    Promotion Rule: [a, b, c] -> [combine(a, b), c] -> [root]

    Args:
        leaves: LeafSet carrying the digests and their algorithm
        observer: Optional callable receiving one ReductionEvent per
                  combination or promotion

    Returns:
        Root digest

    Raises:
        InvalidInputException: If leaves is not a LeafSet
        EmptyInputException: If leaves holds no digests
    """
    if not isinstance(leaves, LeafSet):
        raise InvalidInputException(
            f"Expected a LeafSet, got {type(leaves).__name__}; "
            "use LeafSet.from_hashes(hashes, algorithm) for a bare sequence",
            field_path="leaves",
        )

    if len(leaves.hashes) == 0:
        raise EmptyInputException("Cannot build Merkle tree from empty leaf set")

    algorithm = leaves.algorithm

    # Handle single leaf case - root is the leaf itself
    if len(leaves.hashes) == 1:
        return leaves.hashes[0]

    current_level: list[bytes] = list(leaves.hashes)
    level_number = 1

    while len(current_level) > 1:
        next_level: list[bytes] = []

        for i in range(0, len(current_level), 2):
            left = current_level[i]
            if i + 1 < len(current_level):
                right = current_level[i + 1]
                parent = combine(left, right, algorithm)
                event = ReductionEvent(
                    level=level_number,
                    index=len(next_level),
                    left=left,
                    right=right,
                    parent=parent,
                )
            else:
                parent = left
                event = ReductionEvent(
                    level=level_number,
                    index=len(next_level),
                    left=left,
                    right=None,
                    parent=parent,
                    promoted=True,
                )

            next_level.append(parent)
            if observer is not None:
                observer(event)

        logger.debug(
            f"Level {level_number}: {len(current_level)} nodes -> {len(next_level)} parents"
        )
        current_level = next_level
        level_number += 1

    root = current_level[0]
    logger.debug(f"Merkle root ({algorithm.value}, {len(leaves.hashes)} leaves): {to_hex(root)}")
    return root


# Short name used by callers that think in terms of "the root"
build_root = build_merkle_root


def compute_tree_depth(leaf_count: int) -> int:
    """
    Number of levels from leaves to root, both included.

    Odd levels are not padded, so each level has ceil(n / 2) nodes.

    Examples:
        0 -> 0, 1 -> 1, 2 -> 2, 3 -> 3, 4 -> 3, 5 -> 4, 75 -> 8
    """
    if leaf_count < 0:
        raise InvalidInputException(
            f"Leaf count must be non-negative, got {leaf_count}",
            field_path="leaf_count",
        )
    if leaf_count == 0:
        return 0

    depth = 1
    nodes = leaf_count
    while nodes > 1:
        nodes = (nodes + 1) // 2
        depth += 1
    return depth


__all__ = [
    "ReductionEvent",
    "ReductionObserver",
    "combine",
    "build_merkle_root",
    "build_root",
    "compute_tree_depth",
]
