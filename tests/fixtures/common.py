"""
Common test fixtures shared by all modules.

Provides factory functions for the tree builder's data structures:
- digests for a label under a given algorithm
- LeafSet built from text labels
"""

from merkleforge.crypto.hashing import HashAlgorithm, digest
from merkleforge.merkle.models import LeafSet


def make_digest(label: str, algorithm: HashAlgorithm | str = HashAlgorithm.SHA256) -> bytes:
    """Digest of a UTF-8 label, usable as a leaf."""
    return digest(label.encode("utf-8"), algorithm)


def make_leaf_set(
    count: int = 4,
    algorithm: HashAlgorithm | str = HashAlgorithm.SHA256,
    prefix: str = "leaf",
) -> LeafSet:
    """
    Create a deterministic LeafSet for testing.

    Leaves are digests of "<prefix>0", "<prefix>1", ...
    """
    return LeafSet(
        hashes=[make_digest(f"{prefix}{i}", algorithm) for i in range(count)],
        algorithm=algorithm,
    )
