"""
Leaf Source
Produces the initial ordered leaf digests of a tree.

This module provides:
- generate_random_leaves: hash fresh random 32-byte blocks
- hash_text: hash one UTF-8 encoded text
- hash_texts: hash a sequence of texts into a LeafSet

The algorithm is chosen here, once, and carried by the returned
LeafSet into the tree reducer.
"""
from __future__ import annotations

import logging
from typing import Sequence

from merkleforge.crypto.hashing import (
    HashAlgorithm,
    RANDOM_BLOCK_SIZE,
    digest,
    encode_text,
    random_bytes,
    resolve_algorithm,
)
from merkleforge.merkle.models import LeafSet
from merkleforge.schemas.errors import InvalidInputException


logger = logging.getLogger(__name__)


def generate_random_leaves(count: int, algorithm: HashAlgorithm | str) -> LeafSet:
    """
    Generate `count` leaves, each the digest of an independent random block.

    Every call yields a fresh, non-reproducible leaf set.

    Args:
        count: Number of leaves (>= 1)
        algorithm: Hash algorithm for every leaf and, later, every parent

    Returns:
        LeafSet of `count` digests tagged with the algorithm

    Raises:
        UnsupportedAlgorithmException: If algorithm is not supported
        InvalidInputException: If count is not a positive integer
    """
    algo = resolve_algorithm(algorithm)

    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidInputException(
            f"Leaf count must be an integer, got {type(count).__name__}",
            field_path="count",
        )
    if count < 1:
        raise InvalidInputException(
            f"Leaf count must be at least 1, got {count}",
            field_path="count",
        )

    hashes = [digest(random_bytes(RANDOM_BLOCK_SIZE), algo) for _ in range(count)]
    logger.debug(f"Generated {count} random leaves with {algo.value}")

    return LeafSet(hashes=hashes, algorithm=algo)


def hash_text(text: str, algorithm: HashAlgorithm | str) -> tuple[bytes, HashAlgorithm]:
    """
    Hash UTF-8 encoded text.

    Pure: the same text and algorithm always give the same digest.

    Returns:
        (digest, algorithm) pair

    Raises:
        UnsupportedAlgorithmException: If algorithm is not supported
        InvalidInputException: If text is not a str
    """
    algo = resolve_algorithm(algorithm)
    return digest(encode_text(text), algo), algo


def hash_texts(texts: Sequence[str], algorithm: HashAlgorithm | str) -> LeafSet:
    """
    Hash each text under one algorithm, preserving order.

    Example:
        >>> leaves = hash_texts(["tx1", "tx2", "tx3", "tx4"], "sha256")
        >>> len(leaves)
        4
    """
    algo = resolve_algorithm(algorithm)

    if isinstance(texts, (str, bytes)):
        raise InvalidInputException(
            "Expected a sequence of texts, got a single string",
            field_path="texts",
        )

    hashes = [hash_text(text, algo)[0] for text in texts]
    return LeafSet(hashes=hashes, algorithm=algo)


__all__ = [
    "generate_random_leaves",
    "hash_text",
    "hash_texts",
]
