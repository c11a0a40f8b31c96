"""
Test fixtures package for merkleforge tests.

Usage:
    from fixtures import make_leaf_set, make_digest

    def test_something():
        leaves = make_leaf_set(count=5, algorithm="keccak256")
"""

from .common import (
    make_digest,
    make_leaf_set,
)

__all__ = [
    "make_digest",
    "make_leaf_set",
]
