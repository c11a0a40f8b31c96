"""
Schemas shared across the tree builder.

Only the error taxonomy lives here; the leaf set model sits next to
the tree code in merkleforge.merkle.models.
"""

from .errors import (
    ErrorCodes,
    MerkleForgeError,
    MerkleForgeException,
    UnsupportedAlgorithmException,
    EmptyInputException,
    InvalidInputException,
)

__all__ = [
    "ErrorCodes",
    "MerkleForgeError",
    "MerkleForgeException",
    "UnsupportedAlgorithmException",
    "EmptyInputException",
    "InvalidInputException",
]
