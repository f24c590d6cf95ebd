"""
Merkle Tree and CID Builder

This package provides:
- build_merkle_root: Compute the padded-tree root from leaf hashes
- BlockProof / build_block_proof / verify_block_proof: block inclusion proofs
- CidBuilder: incremental chunking and hashing into a Cid
- from_data / from_reader / from_file / from_path: one-shot helpers

Canonical Commitment Rules:
1. Leaf hashing: sha256(block), BLOCK_SIZE bytes per block
2. Parent hashing: sha256(left + right)
3. Padding: next_power_of_two(n) slots, real leaves first, ZERO_HASH after
4. Empty tree: ZERO_HASH
5. Single leaf: root = leaf

Usage:
    from anys_cid.merkle import CidBuilder

    builder = CidBuilder()
    for chunk in chunks:
        builder.update(chunk)
    cid = builder.finalize()
"""
from .merkle_tree import (
    BlockProof,
    next_power_of_two,
    merkle_parent,
    pad_leaves,
    build_merkle_root,
    build_block_proof,
    compute_proof_root,
    verify_block_proof,
    check_block_proof,
    compute_tree_depth,
)

from .builder import (
    CidBuilder,
    from_data,
    from_reader,
    from_file,
    from_path,
    build_proofs_for_data,
)


__all__ = [
    # Tree
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
    # Builder
    "CidBuilder",
    "from_data",
    "from_reader",
    "from_file",
    "from_path",
    "build_proofs_for_data",
]
