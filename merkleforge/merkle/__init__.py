"""
Merkle Tree Construction
Sorted-pair Merkle roots over a LeafSet.

This module provides:
- LeafSet: leaf digests tagged with their algorithm
- generate_random_leaves / hash_text / hash_texts: leaf source
- combine: sorted sibling-pair hashing
- build_merkle_root (build_root): level-by-level reduction
- compute_tree_depth: levels for a given leaf count
- LoggingObserver / LevelRecorder: optional reduction observers

Commitment Rules:
1. Parent hashing: H(min(a, b) || max(a, b))
2. Odd node: promoted unchanged to the next level
3. Single leaf: root = leaf
4. Empty tree: EmptyInputException

Usage:
    from merkleforge.merkle import generate_random_leaves, build_merkle_root

    leaves = generate_random_leaves(7, "keccak256")
    root = build_merkle_root(leaves)
"""
from .models import LeafSet

from .leaf_source import (
    generate_random_leaves,
    hash_text,
    hash_texts,
)

from .merkle_tree import (
    ReductionEvent,
    ReductionObserver,
    combine,
    build_merkle_root,
    build_root,
    compute_tree_depth,
)

from .observers import (
    LoggingObserver,
    LevelRecorder,
)


__all__ = [
    # Core types
    "LeafSet",
    "ReductionEvent",
    "ReductionObserver",
    # Leaf source
    "generate_random_leaves",
    "hash_text",
    "hash_texts",
    # Tree
    "combine",
    "build_merkle_root",
    "build_root",
    "compute_tree_depth",
    # Observers
    "LoggingObserver",
    "LevelRecorder",
]
