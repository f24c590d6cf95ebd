"""
Schemas
File: cid.py

Purpose: The immutable content identifier value and its summary model.

A Cid is (version, size, hash). Equality and hashing are defined over
those three fields only, so copies can be shared freely between readers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from anys_cid.crypto.hashing import HASH_SIZE

from .versioning import BLOCK_SIZE, MAX_CID_SIZE, VERSION_RAW, version_char

if TYPE_CHECKING:
    from anys_cid.merkle.builder import CidBuilder


@dataclass(frozen=True)
class Cid:
    """
    Content identifier of a byte stream.

    Attributes:
        version: Format tag, 0-255 (VERSION_RAW is the only implemented one)
        size: Total number of bytes hashed
        hash: 32-byte Merkle root over the input's blocks
    """
    version: int
    size: int
    hash: bytes

    VERSION_RAW = VERSION_RAW

    def __post_init__(self) -> None:
        """Validate field ranges."""
        if not 0 <= self.version <= 0xFF:
            raise ValueError(f"Version must fit in one byte, got {self.version}")
        if not 0 <= self.size <= MAX_CID_SIZE:
            raise ValueError(f"Size must fit in 64 bits, got {self.size}")
        if not isinstance(self.hash, (bytes, bytearray, memoryview)):
            raise TypeError(f"Hash must be bytes, got {type(self.hash).__name__}")
        if len(self.hash) != HASH_SIZE:
            raise ValueError(f"Hash must be {HASH_SIZE} bytes, got {len(self.hash)}")
        if not isinstance(self.hash, bytes):
            object.__setattr__(self, "hash", bytes(self.hash))

    # --- construction shortcuts -------------------------------------------

    @staticmethod
    def builder(version: int = VERSION_RAW) -> CidBuilder:
        """Start an incremental builder."""
        from anys_cid.merkle.builder import CidBuilder

        return CidBuilder(version)

    @staticmethod
    def from_data(version: int, data: bytes) -> Cid:
        """Compute the CID of an in-memory buffer."""
        from anys_cid.merkle.builder import from_data

        return from_data(version, data)

    @staticmethod
    def from_reader(version: int, reader: IO[bytes], chunk_size: int = BLOCK_SIZE) -> Cid:
        """Compute the CID of everything readable from a binary stream."""
        from anys_cid.merkle.builder import from_reader

        return from_reader(version, reader, chunk_size)

    @staticmethod
    def from_file(
        version: int,
        file: IO[bytes],
        chunk_size: int = BLOCK_SIZE,
    ) -> tuple[Cid, int]:
        """Compute the CID of an open file, guarding against concurrent modification."""
        from anys_cid.merkle.builder import from_file

        return from_file(version, file, chunk_size)

    @staticmethod
    def from_bytes(data: bytes) -> Cid:
        """Decode the binary form."""
        from anys_cid.codec.cid_codec import decode

        return decode(data)

    @staticmethod
    def from_string(text: str) -> Cid:
        """Parse the string form."""
        from anys_cid.codec.cid_codec import from_string

        return from_string(text)

    # --- encodings ----------------------------------------------------------

    def to_bytes(self) -> bytes:
        """Encode to the canonical binary form."""
        from anys_cid.codec.cid_codec import encode

        return encode(self)

    def __str__(self) -> str:
        from anys_cid.codec.cid_codec import to_string

        return to_string(self)

    def __repr__(self) -> str:
        return f"Cid(version={self.version}, size={self.size}, hash={self.hash.hex()!r})"

    # --- derived properties -------------------------------------------------

    @property
    def num_blocks(self) -> int:
        """Number of leaf blocks the content was split into."""
        return -(-self.size // BLOCK_SIZE)

    @property
    def is_raw(self) -> bool:
        return self.version == VERSION_RAW

    @property
    def hash_hex(self) -> str:
        return self.hash.hex()

    def summary(self) -> CidSummary:
        """Build the machine-readable summary of this CID."""
        return CidSummary(
            cid=str(self),
            version=version_char(self.version),
            size=self.size,
            hash=self.hash_hex,
            num_blocks=self.num_blocks,
            is_raw=self.is_raw,
        )


class CidSummary(BaseModel):
    """Serializable view of a Cid for JSON output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    cid: str = Field(..., description="String form of the CID")
    version: str = Field(..., min_length=1, max_length=1, description="Version tag character")
    size: int = Field(..., ge=0, le=MAX_CID_SIZE, description="Content length in bytes")
    hash: str = Field(..., min_length=64, max_length=64, description="Merkle root, hex")
    num_blocks: int = Field(..., ge=0)
    is_raw: bool
