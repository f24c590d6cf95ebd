"""
Merkle Tree Implementation
Padded complete binary tree over block hashes, plus block inclusion proofs.

This module provides:
- Deterministic Merkle root computation over a power-of-two tree
- Block proof generation for any leaf index
- Block proof verification

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = sha256(block), one leaf per BLOCK_SIZE slice
   (the last block may be shorter)
2. Parent hashing: parent = sha256(left + right)
3. Padding rule: the tree has next_power_of_two(n) leaf slots; the real
   leaves fill the first n slots in input order and the remaining slots
   hold ZERO_HASH
4. Empty leaves: build_merkle_root([]) returns ZERO_HASH (one padding slot)
5. Single leaf: root = leaf (the leaf hash itself)

Rules 4 and 5 fall out of rule 3; neither is special-cased. Both are part
of the identifier format and must not change.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from anys_cid.crypto.hashing import HASH_SIZE, ZERO_HASH, hash_concat
from anys_cid.schemas.errors import BlockProofException


@dataclass(frozen=True)
class BlockProof:
    """
    Inclusion proof for a single block in a CID's Merkle tree.

    Lets a holder of one block check it against a CID root without the
    other blocks.

    Attributes:
        leaf: The leaf hash being proven (sha256 of the block)
        index: The 0-based block index
        siblings: Sibling hashes from the leaf level up to the root
        root: The Merkle root this proof is against
    """
    leaf: bytes
    index: int
    siblings: list[bytes]
    root: bytes

    def __post_init__(self) -> None:
        """Validate proof structure."""
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")
        if self.index >= 1 << len(self.siblings):
            raise ValueError(
                f"Leaf index {self.index} does not fit a tree of depth {len(self.siblings) + 1}"
            )


def next_power_of_two(n: int) -> int:
    """
    Smallest power of two >= n, with next_power_of_two(0) == 1.

    Example:
        >>> [next_power_of_two(n) for n in range(6)]
        [1, 1, 2, 4, 4, 8]
    """
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def merkle_parent(left: bytes, right: bytes) -> bytes:
    """Compute the parent hash of two child nodes: sha256(left + right)."""
    return hash_concat(left, right)


def pad_leaves(leaves: Sequence[bytes]) -> list[bytes]:
    """Return the leaf slots of the padded tree: real leaves, then ZERO_HASH filler."""
    width = next_power_of_two(len(leaves))
    return list(leaves) + [ZERO_HASH] * (width - len(leaves))


def build_merkle_root(leaves: Sequence[bytes]) -> bytes:
    """
    Build a Merkle root from a sequence of leaf hashes.

    The tree is stored as a flat array of 2m - 1 nodes, where m is the
    padded leaf count. Node i has children 2i + 1 and 2i + 2, so the leaf
    slots start at index m - 1. Internal nodes are filled in decreasing
    index order, which visits every child before its parent.

    Args:
        leaves: Sequence of 32-byte leaf hashes, in input order

    Returns:
        32-byte Merkle root

    Example:
        >>> build_merkle_root([]) == ZERO_HASH
        True
    """
    width = next_power_of_two(len(leaves))
    nodes = [ZERO_HASH] * (width - 1) + pad_leaves(leaves)

    for i in range(width - 2, -1, -1):
        nodes[i] = merkle_parent(nodes[2 * i + 1], nodes[2 * i + 2])

    return nodes[0]


def build_block_proof(leaves: Sequence[bytes], index: int) -> BlockProof:
    """
    Generate a proof for the leaf at the given index.

    Algorithm:
    1. Pad the leaves to a power of two
    2. At each level, record the sibling (index XOR 1) and move up:
       index = index // 2
    3. Continue until the root level

    Args:
        leaves: Sequence of leaf hashes
        index: 0-based index of the leaf to prove

    Returns:
        BlockProof with leaf, index, siblings (bottom-up), and root

    Raises:
        IndexError: If index is out of range
        ValueError: If leaves is empty
    """
    if len(leaves) == 0:
        raise ValueError("Cannot generate proof for empty leaf list")

    if index < 0 or index >= len(leaves):
        raise IndexError(
            f"Leaf index {index} out of range for {len(leaves)} leaves"
        )

    siblings: list[bytes] = []
    current_level = pad_leaves(leaves)
    current_index = index

    while len(current_level) > 1:
        siblings.append(current_level[current_index ^ 1])
        current_level = [
            merkle_parent(current_level[i], current_level[i + 1])
            for i in range(0, len(current_level), 2)
        ]
        current_index //= 2

    return BlockProof(
        leaf=leaves[index],
        index=index,
        siblings=siblings,
        root=current_level[0],
    )


def compute_proof_root(proof: BlockProof) -> bytes:
    """Recompute the root implied by a proof's leaf and siblings."""
    current_hash = proof.leaf
    current_index = proof.index

    for sibling in proof.siblings:
        if current_index % 2 == 0:
            current_hash = merkle_parent(current_hash, sibling)
        else:
            current_hash = merkle_parent(sibling, current_hash)
        current_index //= 2

    return current_hash


def verify_block_proof(proof: BlockProof, root: bytes | None = None) -> bool:
    """
    Verify a block proof.

    Args:
        proof: BlockProof to verify
        root: Root to check against (defaults to the proof's own root,
              pass a CID's hash to check membership in that CID)

    Returns:
        True if proof is valid, False otherwise
    """
    if len(proof.leaf) != HASH_SIZE or any(len(s) != HASH_SIZE for s in proof.siblings):
        return False
    expected = proof.root if root is None else root
    return compute_proof_root(proof) == expected == proof.root


def check_block_proof(proof: BlockProof, root: bytes | None = None) -> None:
    """
    Raise BlockProofException unless the proof verifies.

    Strict counterpart of verify_block_proof() for callers that treat a
    bad proof as an error rather than a boolean.
    """
    if not verify_block_proof(proof, root):
        raise BlockProofException(
            f"Block proof for leaf {proof.index} does not reach the expected root",
            leaf_index=proof.index,
        )


def compute_tree_depth(num_leaves: int) -> int:
    """
    Number of levels in the padded tree, leaves and root included.

    Zero leaves still produce one padding slot, so the minimum depth is 1.
    """
    return next_power_of_two(num_leaves).bit_length()


__all__ = [
    "BlockProof",
    "next_power_of_two",
    "merkle_parent",
    "pad_leaves",
    "build_merkle_root",
    "build_block_proof",
    "compute_proof_root",
    "verify_block_proof",
    "check_block_proof",
    "compute_tree_depth",
]
