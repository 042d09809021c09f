"""
Module 01 - Schemas
File: types.py

Purpose: Normalisation of the primitive values every module shares:
identities (20-byte account addresses), uint256 amounts, and timestamps.

Identity rules:
- Accepted as a 0x-prefixed hex string (all lowercase, all uppercase, or a
  valid EIP-55 checksum) or as 20 raw bytes
- Normalised to the EIP-55 checksum string, which is the key used by the
  claim ledger and the token ledger
- Leaf preimages use the 20 canonical bytes
"""

from __future__ import annotations

from typing import Union

from eth_utils import (
    is_address,
    is_checksum_address,
    remove_0x_prefix,
    to_canonical_address,
    to_checksum_address,
)

from .errors import SchemaValidationException


IdentityLike = Union[str, bytes]

UINT256_MAX = 2**256 - 1
AMOUNT_BYTE_WIDTH = 32


def normalize_identity(identity: IdentityLike) -> str:
    """
    Normalise an identity to its EIP-55 checksum string.

    Raises:
        SchemaValidationException: If the value is not a valid address
    """
    if isinstance(identity, (bytes, bytearray)):
        if len(identity) != 20:
            raise SchemaValidationException(
                f"Identity must be 20 bytes, got {len(identity)}",
                field_path="identity",
            )
        return to_checksum_address(bytes(identity))

    value = identity.strip() if isinstance(identity, str) else None
    if value is None or not is_address(value):
        raise SchemaValidationException(
            f"Invalid account address: {identity!r}",
            field_path="identity",
        )

    # is_address no longer verifies EIP-55, so mixed case is checked here
    digits = remove_0x_prefix(value)
    if digits != digits.lower() and digits != digits.upper():
        if not is_checksum_address(value):
            raise SchemaValidationException(
                f"Bad EIP-55 checksum: {identity!r}",
                field_path="identity",
            )
    return to_checksum_address(value)


def identity_bytes(identity: IdentityLike) -> bytes:
    """Return the 20 canonical bytes of an identity."""
    return bytes(to_canonical_address(normalize_identity(identity)))


def validate_amount(amount: int, field_path: str = "amount") -> int:
    """
    Check that an amount fits in a uint256.

    bool is rejected even though it subclasses int.

    Raises:
        SchemaValidationException: If the amount is not an int in [0, 2**256)
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise SchemaValidationException(
            f"Amount must be an integer, got {type(amount).__name__}",
            field_path=field_path,
        )
    if amount < 0 or amount > UINT256_MAX:
        raise SchemaValidationException(
            f"Amount out of uint256 range: {amount}",
            field_path=field_path,
        )
    return amount


def amount_to_bytes(amount: int) -> bytes:
    """Encode a uint256 amount as 32 big-endian bytes."""
    return validate_amount(amount).to_bytes(AMOUNT_BYTE_WIDTH, byteorder="big")


__all__ = [
    "IdentityLike",
    "UINT256_MAX",
    "AMOUNT_BYTE_WIDTH",
    "normalize_identity",
    "identity_bytes",
    "validate_amount",
    "amount_to_bytes",
]
