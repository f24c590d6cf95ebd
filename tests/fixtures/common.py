"""
Common test fixtures shared by all modules.

Provides factory functions for:
- deterministic payloads of any length
- Cid values
- temporary files on disk
"""

import os
import tempfile

from anys_cid.schemas.cid import Cid
from anys_cid.schemas.versioning import BLOCK_SIZE, VERSION_RAW


def make_payload(length: int, seed: int = 7) -> bytes:
    """Deterministic non-repeating-per-block byte pattern of the given length."""
    return bytes((i * 31 + seed + i // BLOCK_SIZE) % 256 for i in range(length))


def make_cid(
    version: int = VERSION_RAW,
    size: int = 10,
    hash_byte: int = 1,
) -> Cid:
    """Cid with a hash made of one repeated byte."""
    return Cid(version, size, bytes([hash_byte]) * 32)


def write_temp_file(data: bytes) -> str:
    """Write data to a new temporary file and return its path. Caller removes it."""
    fd, path = tempfile.mkstemp(prefix="anys_test_", suffix=".bin")
    with os.fdopen(fd, "wb") as f:
        f.write(data)
    return path
