"""
Core cryptographic utilities.

SHA-256 primitives for leaf and node hashing.
"""
from .hashing import (
    HASH_SIZE,
    ZERO_HASH,
    sha256,
    new_hasher,
    hash_concat,
    to_hex,
    from_hex,
)

__all__ = [
    "HASH_SIZE",
    "ZERO_HASH",
    "sha256",
    "new_hasher",
    "hash_concat",
    "to_hex",
    "from_hex",
]
