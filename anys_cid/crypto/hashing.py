"""
Hashing Utilities
SHA-256 primitives shared by the Merkle builder and the CID codec.

Leaves are the SHA-256 of one block of content, inner nodes are the
SHA-256 of their two children concatenated, and unused leaf slots hold
ZERO_HASH. Nothing here is salted or domain-separated: a single-block
CID hash is exactly the plain SHA-256 of the content.
"""
from __future__ import annotations

import hashlib


# Width of every leaf, node and root hash
HASH_SIZE: int = 32

# Padding value for empty leaf slots
ZERO_HASH: bytes = bytes(HASH_SIZE)


def sha256(data: bytes) -> bytes:
    """
    One-shot SHA-256 of a block or buffer.

    Example:
        >>> sha256(b"helloworld").hex()[:16]
        '936a185caaa266bb'
    """
    return hashlib.sha256(data).digest()


def new_hasher() -> "hashlib._Hash":
    """Return a fresh incremental SHA-256 accumulator."""
    return hashlib.sha256()


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Merkle parent of two child hashes: sha256(left || right).

    Args:
        left: Left child (32 bytes)
        right: Right child (32 bytes)
    """
    hasher = hashlib.sha256(left)
    hasher.update(right)
    return hasher.digest()


def to_hex(data: bytes) -> str:
    """
    Render bytes as 0x-prefixed lowercase hex.

    Example:
        >>> to_hex(b"A\\x0a")
        '0x410a'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Parse hex into bytes. The 0x prefix is optional, since binary CIDs
    are often copied around as bare hex.

    Raises:
        ValueError: Odd length or non-hex characters
    """
    digits = hex_string[2:] if hex_string.startswith(("0x", "0X")) else hex_string

    if len(digits) % 2:
        raise ValueError(f"Hex string must have even length, got length {len(digits)}")

    try:
        return bytes.fromhex(digits)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in {hex_string!r}: {e}") from e


__all__ = [
    "HASH_SIZE",
    "ZERO_HASH",
    "sha256",
    "new_hasher",
    "hash_concat",
    "to_hex",
    "from_hex",
]
