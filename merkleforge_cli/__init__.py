"""
merkleforge CLI

Command-line interface for building Merkle roots.

Usage:
    python -m merkleforge_cli generate 75 --algorithm sha256
    python -m merkleforge_cli hash "tx1"
    python -m merkleforge_cli root --text tx1 --text tx2 --algorithm keccak256
"""

__version__ = "0.1.0"
