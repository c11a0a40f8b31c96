"""
Reduction observers.

Callables that receive ReductionEvents from build_merkle_root.
The tree code itself does no I/O; narration and level capture
happen here.
"""
from __future__ import annotations

import logging

from merkleforge.crypto.hashing import to_hex
from merkleforge.merkle.merkle_tree import ReductionEvent
from merkleforge.merkle.models import LeafSet


class LoggingObserver:
    """Narrate each reduction step through the logging module."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ) -> None:
        self.logger = logger or logging.getLogger("merkleforge.merkle.trace")
        self.level = level

    def __call__(self, event: ReductionEvent) -> None:
        if event.promoted:
            self.logger.log(
                self.level,
                f"Level {event.level} [{event.index}] promoted {to_hex(event.left)}",
            )
            return

        self.logger.log(
            self.level,
            f"Level {event.level} [{event.index}] {to_hex(event.left)} + "
            f"{to_hex(event.right)} -> {to_hex(event.parent)}",
        )


class LevelRecorder:
    """
    Rebuild the tree's levels from the event stream.

    Level 0 is the leaf level; the last level holds only the root.
    Use one recorder per build_merkle_root call.
    """

    def __init__(self, leaves: LeafSet) -> None:
        self.levels: list[list[bytes]] = [list(leaves.hashes)]

    def __call__(self, event: ReductionEvent) -> None:
        while len(self.levels) <= event.level:
            self.levels.append([])
        self.levels[event.level].append(event.parent)

    @property
    def depth(self) -> int:
        return len(self.levels)

    def hex_levels(self) -> list[list[str]]:
        return [[to_hex(node) for node in level] for level in self.levels]


__all__ = [
    "LoggingObserver",
    "LevelRecorder",
]
