"""
Schemas
File: versioning.py

Purpose: Centralize CID format version tags and layout constants.
This file must stay tiny and import nothing from the rest of the package
to avoid circular dependencies.
"""

# Raw content, chunked Merkle-SHA-256
VERSION_RAW: int = ord("A")

# Leaf granularity of the hash tree. Changing it changes every identifier.
BLOCK_SIZE: int = 16 * 1024

# Version tag + varint size + root hash
MAX_ENCODED_SIZE: int = 1 + 9 + 32

# Largest value the size field can carry
MAX_CID_SIZE: int = 2**64 - 1

# Tags the decoder accepts
SUPPORTED_VERSIONS: frozenset[int] = frozenset({VERSION_RAW})


def is_supported_version(version: int) -> bool:
    """Return whether the decoder implements the given version tag."""
    return version in SUPPORTED_VERSIONS


def version_char(version: int) -> str:
    """Render a version tag as the character used in the string form."""
    return chr(version)
