"""
Core cryptographic utilities.

Digest provider, random byte source and encoding helpers.
"""
from .hashing import (
    DIGEST_SIZE,
    RANDOM_BLOCK_SIZE,
    HashAlgorithm,
    SUPPORTED_ALGORITHMS,
    resolve_algorithm,
    sha256,
    keccak256,
    digest,
    random_bytes,
    encode_text,
    to_hex,
    from_hex,
    hash_concat,
)

__all__ = [
    "DIGEST_SIZE",
    "RANDOM_BLOCK_SIZE",
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
