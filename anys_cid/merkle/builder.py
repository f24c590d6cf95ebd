"""
CID Builder
Incremental block chunking and hashing that finishes in a Cid.

Usage:
    builder = CidBuilder(VERSION_RAW)
    builder.update(b"hello")
    builder.update(b"world")
    cid = builder.finalize()

Block boundaries are aligned to absolute byte offsets (multiples of
BLOCK_SIZE), never to update() call boundaries, so any split of the same
input gives the same Cid.
"""
from __future__ import annotations

import logging
import os
from typing import IO, Union

from anys_cid.crypto.hashing import new_hasher
from anys_cid.merkle.merkle_tree import build_block_proof, build_merkle_root, BlockProof
from anys_cid.schemas.cid import Cid
from anys_cid.schemas.errors import BuilderFinalizedException, FileModifiedException
from anys_cid.schemas.versioning import BLOCK_SIZE, VERSION_RAW


logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class CidBuilder:
    """
    Single-pass accumulator for a Cid.

    Holds the running size, the hasher for the block being filled and the
    leaf hashes of every completed block. A builder is consumed by
    finalize(); it cannot be reused afterwards.
    """

    def __init__(self, version: int = VERSION_RAW) -> None:
        self.version = version
        self.size = 0
        self.block_cursor = 0
        self._hasher = new_hasher()
        self._leaves: list[bytes] = []
        self._finalized = False

    def set_version(self, version: int) -> None:
        """Change the version tag the finished Cid will carry."""
        self._check_open()
        self.version = version

    @property
    def leaves(self) -> tuple[bytes, ...]:
        """Leaf hashes of the blocks completed so far."""
        return tuple(self._leaves)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def update(self, data: BytesLike) -> None:
        """
        Append bytes to the logical input stream.

        The active block is topped up to BLOCK_SIZE; each time it fills,
        its hash is appended to the leaves and a fresh hasher starts the
        next block.
        """
        self._check_open()
        view = memoryview(data).cast("B")
        self.size += len(view)

        while view:
            n = min(len(view), BLOCK_SIZE - self.block_cursor)
            self._hasher.update(view[:n])
            view = view[n:]
            self.block_cursor += n
            if self.block_cursor == BLOCK_SIZE:
                self._leaves.append(self._hasher.digest())
                self._hasher = new_hasher()
                self.block_cursor = 0

    def finalize(self) -> Cid:
        """
        Hash any partial block, reduce the leaves to a root and return the Cid.

        Zero bytes of input leave no leaves at all, which yields the
        all-zero root of a single padding slot.
        """
        self._check_open()
        self._finalized = True
        if self.block_cursor != 0:
            self._leaves.append(self._hasher.digest())
        root = build_merkle_root(self._leaves)
        return Cid(self.version, self.size, root)

    def finalize_with_leaves(self) -> tuple[Cid, tuple[bytes, ...]]:
        """Finalize and also return the leaf hashes, for building block proofs."""
        cid = self.finalize()
        return cid, tuple(self._leaves)

    def _check_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedException()


def from_data(version: int, data: BytesLike) -> Cid:
    """Compute the Cid of an in-memory buffer."""
    builder = CidBuilder(version)
    builder.update(data)
    return builder.finalize()


def _pump(builder: CidBuilder, reader: IO[bytes], chunk_size: int) -> None:
    """Feed a reader into a builder until EOF."""
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    buf = bytearray(chunk_size)
    view = memoryview(buf)
    readinto = getattr(reader, "readinto", None)
    while True:
        if readinto is not None:
            n = readinto(buf)
            if not n:
                break
            builder.update(view[:n])
        else:
            chunk = reader.read(chunk_size)
            if not chunk:
                break
            builder.update(chunk)


def from_reader(version: int, reader: IO[bytes], chunk_size: int = BLOCK_SIZE) -> Cid:
    """
    Compute the Cid of everything readable from a binary stream.

    Read errors propagate unchanged.
    """
    builder = CidBuilder(version)
    _pump(builder, reader, chunk_size)
    return builder.finalize()


def _modified_ns(file: IO[bytes]) -> int:
    return os.fstat(file.fileno()).st_mtime_ns


def from_file(
    version: int,
    file: IO[bytes],
    chunk_size: int = BLOCK_SIZE,
) -> tuple[Cid, int]:
    """
    Compute the Cid of an open file and return it with the file's mtime.

    The modification time is sampled before and after the read. If it
    changed, the computed Cid may not match the file's current contents
    and FileModifiedException is raised instead.

    Args:
        version: Version tag for the Cid
        file: File opened in binary mode
        chunk_size: Read buffer size

    Returns:
        (cid, modified_ns) with the modification time in nanoseconds

    Raises:
        FileModifiedException: If the file changed during the read
        OSError: If reading or stat-ing the file fails
    """
    name = getattr(file, "name", None)
    path = name if isinstance(name, str) else None

    modified = _modified_ns(file)
    logger.debug("Hashing %s", path or "<file>")
    cid = from_reader(version, file, chunk_size)
    new_modified = _modified_ns(file)

    if modified != new_modified:
        raise FileModifiedException(path=path, before_ns=modified, after_ns=new_modified)

    logger.debug("Hashed %s: %d bytes in %d blocks", path or "<file>", cid.size, cid.num_blocks)
    return cid, modified


def from_path(
    version: int,
    path: str | os.PathLike[str],
    chunk_size: int = BLOCK_SIZE,
) -> tuple[Cid, int]:
    """Open a path in binary mode and hash it with from_file()."""
    with open(path, "rb") as f:
        return from_file(version, f, chunk_size)


def build_proofs_for_data(version: int, data: BytesLike) -> tuple[Cid, list[BlockProof]]:
    """Compute a Cid and one block proof per leaf of the data."""
    builder = CidBuilder(version)
    builder.update(data)
    cid, leaves = builder.finalize_with_leaves()
    return cid, [build_block_proof(leaves, i) for i in range(len(leaves))]


__all__ = [
    "CidBuilder",
    "from_data",
    "from_reader",
    "from_file",
    "from_path",
    "build_proofs_for_data",
]
