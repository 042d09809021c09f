"""
Module 03 - Leaf Encoding

Leaf = keccak256(identity_20_bytes || amount_uint256_big_endian)

This is the raw-concatenation convention. It is part of the external proof
format: an off-chain builder that uses structured pair encoding instead
produces different roots for the same allocations, and those proofs will
not verify here.
"""
from __future__ import annotations

from core.crypto.hashing import hash_pair
from core.schemas.types import IdentityLike, amount_to_bytes, identity_bytes


def leaf_preimage(identity: IdentityLike, amount: int) -> bytes:
    """Return the 52-byte leaf preimage for an allocation."""
    return identity_bytes(identity) + amount_to_bytes(amount)


def encode_leaf(identity: IdentityLike, amount: int) -> bytes:
    """
    Compute the leaf hash of an `(identity, amount)` allocation.

    Raises:
        SchemaValidationException: If the identity is not a valid address
            or the amount does not fit in a uint256
    """
    return hash_pair(identity_bytes(identity), amount_to_bytes(amount))


__all__ = [
    "leaf_preimage",
    "encode_leaf",
]
