"""
Hashing Utilities
Digest provider, random byte source and hex encoding for tree building.

This module provides:
- HashAlgorithm: the two supported digest families
- SHA-256 (hashlib) and Keccak-256 (eth_utils) over raw bytes
- digest(): algorithm-dispatched hashing
- Random leaf material from the OS CSPRNG
- UTF-8 text encoding and hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- Always hash raw bytes exactly as given
- Keccak-256 is the Ethereum variant, not NIST SHA3-256
- Everything except random_bytes() is deterministic
"""
from __future__ import annotations

import hashlib
import secrets
from enum import Enum

from eth_utils import keccak

from merkleforge.schemas.errors import (
    InvalidInputException,
    UnsupportedAlgorithmException,
)


# Both supported families produce 32-byte digests
DIGEST_SIZE: int = 32

# Width of each random block hashed into a generated leaf
RANDOM_BLOCK_SIZE: int = 32

TEXT_ENCODING: str = "utf-8"


class HashAlgorithm(str, Enum):
    """Digest family in effect for an entire tree."""
    SHA256 = "sha256"
    KECCAK256 = "keccak256"


SUPPORTED_ALGORITHMS: tuple[str, ...] = tuple(a.value for a in HashAlgorithm)


def resolve_algorithm(algorithm: HashAlgorithm | str) -> HashAlgorithm:
    """
    Resolve an algorithm identifier to a HashAlgorithm member.

    Accepts the enum itself or its string value (case-insensitive).

    Raises:
        UnsupportedAlgorithmException: For anything outside the supported set
    """
    if isinstance(algorithm, HashAlgorithm):
        return algorithm
    if isinstance(algorithm, str):
        try:
            return HashAlgorithm(algorithm.strip().lower())
        except ValueError:
            pass
    raise UnsupportedAlgorithmException(
        f"Unsupported algorithm {algorithm!r}. "
        f"Use one of: {', '.join(SUPPORTED_ALGORITHMS)}",
        algorithm=algorithm,
    )


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def keccak256(data: bytes) -> bytes:
    """
    Compute Ethereum Keccak-256 hash of raw bytes.

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    return keccak(primitive=data)


_PROVIDERS = {
    HashAlgorithm.SHA256: sha256,
    HashAlgorithm.KECCAK256: keccak256,
}


def digest(data: bytes, algorithm: HashAlgorithm | str) -> bytes:
    """
    Hash raw bytes with the selected algorithm.

    Args:
        data: Raw bytes to hash
        algorithm: HashAlgorithm member or its string value

    Returns:
        32-byte digest

    Raises:
        UnsupportedAlgorithmException: If algorithm is not supported
    """
    return _PROVIDERS[resolve_algorithm(algorithm)](data)


def random_bytes(size: int = RANDOM_BLOCK_SIZE) -> bytes:
    """Return `size` cryptographically secure random bytes."""
    return secrets.token_bytes(size)


def encode_text(text: str) -> bytes:
    """
    Encode text as UTF-8 bytes.

    Raises:
        InvalidInputException: If text is not a str
    """
    if not isinstance(text, str):
        raise InvalidInputException(
            f"Expected text as str, got {type(text).__name__}",
            field_path="text",
        )
    return text.encode(TEXT_ENCODING)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    # Validate 0x prefix
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


def hash_concat(left: bytes, right: bytes, algorithm: HashAlgorithm | str) -> bytes:
    """Hash the concatenation left || right with the selected algorithm."""
    return digest(left + right, algorithm)


__all__ = [
    "DIGEST_SIZE",
    "RANDOM_BLOCK_SIZE",
    "TEXT_ENCODING",
    "HashAlgorithm",
    "SUPPORTED_ALGORITHMS",
    "resolve_algorithm",
    "sha256",
    "keccak256",
    "digest",
    "random_bytes",
    "encode_text",
    "to_hex",
    "from_hex",
    "hash_concat",
]
