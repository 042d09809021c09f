"""
Module 03 - Merkle Proof Verification
Leaf encoding + inclusion proof verification against a stored root.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- encode_leaf: keccak256(identity || uint256 amount)
- verify_proof: recompute a root from leaf, siblings and index
- MerkleProof: Dataclass representing a Merkle inclusion proof
- MerkleVerifier: static convenience wrappers

Usage:
    from core.merkle import MerkleVerifier, encode_leaf

    leaf = encode_leaf(recipient, 100)
    assert MerkleVerifier.verify(leaf, proof, index, root)
"""
from .verify import (
    MerkleProof,
    merkle_parent,
    verify_proof,
)

from .leaf import (
    encode_leaf,
    leaf_preimage,
)

from .verifier import MerkleVerifier


__all__ = [
    "MerkleProof",
    "merkle_parent",
    "verify_proof",
    "encode_leaf",
    "leaf_preimage",
    "MerkleVerifier",
]
