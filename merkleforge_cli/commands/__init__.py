"""
CLI command modules.
"""

from merkleforge_cli.commands import generate, digest, root

__all__ = ["generate", "digest", "root"]
