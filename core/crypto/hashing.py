"""
Module 02 - Hashing Utilities
Keccak-256 hashing and hex helpers for Merkle commitments.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- Keccak-256 hashing for raw bytes (the same function for leaves and nodes)
- Pair hashing for Merkle parents: keccak256(left || right)
- 0x-prefixed hex at the HTTP, CLI and file boundaries (eth_utils codecs)

Security/Determinism Notes:
- Keccak-256 here is the pre-standard variant used by EVM chains,
  NOT hashlib.sha3_256 (which produces different digests)
- Always hash raw bytes exactly as given; no normalisation happens here
"""
from __future__ import annotations

from eth_utils import decode_hex, encode_hex, is_0x_prefixed, keccak


HASH_LENGTH = 32


def keccak256(data: bytes) -> bytes:
    """
    Compute the Keccak-256 digest of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte Keccak-256 digest

    Example:
        >>> keccak256(b"").hex()
        'c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470'
    """
    return keccak(primitive=data)


def hash_pair(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    This is used for computing Merkle parent hashes and leaf preimages:
    parent = keccak256(left || right)

    Args:
        left: Left operand (a 32-byte child hash for tree nodes)
        right: Right operand

    Returns:
        32-byte Keccak-256 digest of the concatenation
    """
    return keccak256(left + right)


def to_hex(data: bytes) -> str:
    """Lowercase 0x-prefixed hex, the boundary format for hashes."""
    return encode_hex(bytes(data))


def from_hex(hex_string: str) -> bytes:
    """
    Decode 0x-prefixed hex. Unprefixed input is rejected so that a hash
    can never be confused with a decimal amount.

    Raises:
        ValueError: On a missing prefix, odd length or non-hex characters
    """
    if not is_0x_prefixed(hex_string):
        raise ValueError(f"Hex string must start with '0x' prefix, got: {hex_string[:10]!r}")
    if len(hex_string) % 2:
        raise ValueError(f"Hex string must have even length, got {len(hex_string) - 2} digits")
    try:
        return decode_hex(hex_string)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in {hex_string[:10]!r}...") from e


def hash_from_hex(hex_string: str) -> bytes:
    """
    Decode a 0x-prefixed 32-byte hash.

    Raises:
        ValueError: If the string is not valid hex or not exactly 32 bytes
    """
    data = from_hex(hex_string)
    if len(data) != HASH_LENGTH:
        raise ValueError(
            f"Expected a {HASH_LENGTH}-byte hash, got {len(data)} bytes"
        )
    return data


__all__ = [
    "HASH_LENGTH",
    "keccak256",
    "hash_pair",
    "to_hex",
    "from_hex",
    "hash_from_hex",
]
