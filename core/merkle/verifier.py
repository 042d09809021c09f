"""
Module 03 - Merkle Verifier Convenience Wrapper
Class-based interface over leaf encoding and proof verification.
"""
from __future__ import annotations

from typing import Sequence

from core.merkle.leaf import encode_leaf
from core.merkle.verify import MerkleProof, verify_proof
from core.schemas.types import IdentityLike


class MerkleVerifier:
    """
    Convenience class for verifying Merkle proofs.

    Example:
        >>> leaf = MerkleVerifier.leaf(alice, 100)
        >>> MerkleVerifier.verify(leaf, [sibling], 0, root)
        True
    """

    @staticmethod
    def leaf(identity: IdentityLike, amount: int) -> bytes:
        """Compute the leaf hash for an allocation."""
        return encode_leaf(identity, amount)

    @staticmethod
    def verify(
        leaf: bytes,
        proof: Sequence[bytes],
        index: int,
        root: bytes,
    ) -> bool:
        """
        Verify a leaf is included in a Merkle root using raw components.

        Returns:
            True if the proof is valid, False otherwise
        """
        return verify_proof(leaf, proof, index, root)

    @staticmethod
    def verify_proof(proof: MerkleProof) -> bool:
        """Verify a MerkleProof bundle."""
        return proof.verify()

    @staticmethod
    def verify_claim(
        identity: IdentityLike,
        amount: int,
        proof: Sequence[bytes],
        index: int,
        root: bytes,
    ) -> bool:
        """
        Verify an `(identity, amount)` allocation is committed under a root.

        The allocation is encoded to a leaf first. Malformed identities or
        amounts raise SchemaValidationException; everything else is a bool.
        """
        leaf = encode_leaf(identity, amount)
        return verify_proof(leaf, proof, index, root)


__all__ = [
    "MerkleVerifier",
]
