"""
Leaf Set Model

A LeafSet pairs an ordered sequence of leaf digests with the one
algorithm that produced them. The algorithm travels with the digests
through every stage of tree building; nothing downstream takes it
as a separate argument.

Two construction paths:
- generate_random_leaves() / hash_texts() in leaf_source.py
- LeafSet.from_hashes(hashes, algorithm) for caller-supplied digests
"""
from __future__ import annotations

from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from merkleforge.crypto.hashing import (
    DIGEST_SIZE,
    HashAlgorithm,
    from_hex,
    resolve_algorithm,
    to_hex,
)
from merkleforge.schemas.errors import InvalidInputException


class LeafSet(BaseModel):
    """
    Ordered leaf digests tagged with their hash algorithm.

    Immutable. Elements of `hashes` may be given as raw bytes or as
    0x-prefixed hex strings; they are stored as bytes.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    hashes: tuple[bytes, ...] = Field(
        ...,
        description="Leaf digests in tree order",
    )
    algorithm: HashAlgorithm = Field(
        ...,
        description="Algorithm that produced every digest in `hashes`",
    )

    @field_validator("algorithm", mode="before")
    @classmethod
    def _resolve_algorithm(cls, value: Any) -> HashAlgorithm:
        return resolve_algorithm(value)

    @field_validator("hashes", mode="before")
    @classmethod
    def _normalize_hashes(cls, value: Any) -> tuple[bytes, ...]:
        if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
            raise InvalidInputException(
                f"Leaf hashes must be a sequence of digests, got {type(value).__name__}",
                field_path="hashes",
            )

        normalized: list[bytes] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                try:
                    item = from_hex(item)
                except ValueError as e:
                    raise InvalidInputException(
                        f"Leaf {i} is not a valid hex digest: {e}",
                        field_path=f"hashes[{i}]",
                    ) from e
            elif isinstance(item, (bytes, bytearray)):
                item = bytes(item)
            else:
                raise InvalidInputException(
                    f"Leaf {i} must be bytes or a 0x-hex string, got {type(item).__name__}",
                    field_path=f"hashes[{i}]",
                )

            if len(item) != DIGEST_SIZE:
                raise InvalidInputException(
                    f"Leaf {i} is {len(item)} bytes, expected a {DIGEST_SIZE}-byte digest",
                    field_path=f"hashes[{i}]",
                )
            normalized.append(item)

        return tuple(normalized)

    @classmethod
    def from_hashes(
        cls,
        hashes: Sequence[bytes | str],
        algorithm: HashAlgorithm | str | None,
    ) -> "LeafSet":
        """
        Wrap caller-supplied digests with the algorithm that produced them.

        There is no default algorithm: a bare digest sequence without one
        is rejected rather than guessed.

        Raises:
            InvalidInputException: If algorithm is None or hashes are malformed
            UnsupportedAlgorithmException: If algorithm is not supported
        """
        if algorithm is None:
            raise InvalidInputException(
                "A bare leaf sequence needs an explicit algorithm",
                field_path="algorithm",
            )
        return cls(hashes=hashes, algorithm=algorithm)

    def __len__(self) -> int:
        return len(self.hashes)

    def hex_hashes(self) -> list[str]:
        """Leaf digests as 0x-prefixed lowercase hex strings."""
        return [to_hex(h) for h in self.hashes]
