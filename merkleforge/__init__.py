"""
merkleforge - sorted-pair Merkle roots over SHA-256 or Keccak-256 leaves.

The algorithm is picked once, when leaves are produced, and travels
with them (LeafSet) to every parent hash. Digests are bytes; to_hex()
gives the 0x-prefixed lowercase form used for display and JSON.
"""

__version__ = "0.1.0"

from merkleforge.crypto.hashing import HashAlgorithm, from_hex, to_hex
from merkleforge.merkle import (
    LeafSet,
    build_merkle_root,
    build_root,
    combine,
    compute_tree_depth,
    generate_random_leaves,
    hash_text,
    hash_texts,
)
from merkleforge.schemas.errors import (
    EmptyInputException,
    InvalidInputException,
    MerkleForgeException,
    UnsupportedAlgorithmException,
)

__all__ = [
    "HashAlgorithm",
    "LeafSet",
    "generate_random_leaves",
    "hash_text",
    "hash_texts",
    "combine",
    "build_merkle_root",
    "build_root",
    "compute_tree_depth",
    "to_hex",
    "from_hex",
    "MerkleForgeException",
    "UnsupportedAlgorithmException",
    "EmptyInputException",
    "InvalidInputException",
]
