"""
Module 03 - Merkle Proof Verification
Index-directed Merkle inclusion proof checking.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- merkle_parent: the node hash, keccak256(left || right)
- verify_proof: recompute a root from leaf + siblings + index
- MerkleProof: frozen bundle of the four verification inputs

Commitment Rules (Hard Contracts, shared with the off-chain tree builder):
1. Parent hashing: parent = keccak256(left || right), no domain separation
2. Siblings are ordered bottom of the tree to the top
3. The leaf index selects the side at every level:
   - even index: the running hash is the LEFT child
   - odd index:  the running hash is the RIGHT child
   then index = index // 2
4. No depth check: a proof of the wrong length just yields a different hash

Trees are never built here. Roots and proofs come from an external builder.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from core.crypto.hashing import HASH_LENGTH, from_hex, hash_pair, to_hex


def merkle_parent(left: bytes, right: bytes) -> bytes:
    """
    Compute the parent hash of two child nodes.

    Args:
        left: Left child hash
        right: Right child hash

    Returns:
        Parent hash (32 bytes)
    """
    return hash_pair(left, right)


def _is_hash(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray)) and len(value) == HASH_LENGTH


def verify_proof(
    leaf: bytes,
    proof: Sequence[bytes],
    index: int,
    root: bytes,
) -> bool:
    """
    Verify that a leaf is committed under a root.

    Algorithm:
    1. Start with the leaf hash
    2. For each sibling (bottom-up):
       - If current index is even: hash = parent(hash, sibling)
       - If current index is odd: hash = parent(sibling, hash)
       - Move up: index = index // 2
    3. Compare the result with the root

    The function is total: malformed inputs (negative index, hashes that
    are not 32 bytes) produce False rather than an exception.

    Args:
        leaf: The 32-byte leaf hash
        proof: Sibling hashes from bottom to top
        index: 0-based position of the leaf in the tree
        root: The expected Merkle root

    Returns:
        True if the recomputed root equals `root`, False otherwise
    """
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        return False
    if not _is_hash(leaf) or not _is_hash(root):
        return False

    computed = bytes(leaf)
    current_index = index

    for sibling in proof:
        if not _is_hash(sibling):
            return False
        if current_index % 2 == 0:
            # Current node is left child
            computed = merkle_parent(computed, bytes(sibling))
        else:
            # Current node is right child
            computed = merkle_parent(bytes(sibling), computed)
        current_index //= 2

    return computed == bytes(root)


@dataclass(frozen=True)
class MerkleProof:
    """
    A Merkle inclusion proof for a single leaf.

    Attributes:
        leaf: The leaf hash being proven
        index: The 0-based index of the leaf in the tree
        siblings: Sibling hashes from bottom to top of tree
        root: The Merkle root this proof is against
    """
    leaf: bytes
    index: int
    siblings: list[bytes] = field(default_factory=list)
    root: bytes = b""

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")

    def verify(self) -> bool:
        return verify_proof(self.leaf, self.siblings, self.index, self.root)

    def to_dict(self) -> dict[str, Any]:
        return {
            "leaf": to_hex(self.leaf),
            "index": self.index,
            "siblings": [to_hex(s) for s in self.siblings],
            "root": to_hex(self.root),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MerkleProof":
        return cls(
            leaf=from_hex(data["leaf"]),
            index=int(data["index"]),
            siblings=[from_hex(s) for s in data.get("siblings", [])],
            root=from_hex(data["root"]),
        )


__all__ = [
    "MerkleProof",
    "merkle_parent",
    "verify_proof",
]
