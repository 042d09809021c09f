"""
Module 09D - API Request Models

Pydantic models for API request validation.

Hashes travel as 0x-prefixed hex. Amounts may be JSON integers or decimal
strings, since uint256 values overflow most JSON number parsers.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from core.crypto.hashing import hash_from_hex


def _check_hash(value: str) -> str:
    hash_from_hex(value)
    return value.lower()


class CreateCampaignRequest(BaseModel):
    """Request body for POST /campaigns."""

    merkle_root: str = Field(
        ...,
        description="32-byte Merkle root (0x-prefixed hex)",
    )
    owner: str = Field(
        ...,
        description="Owner identity, the only account allowed to sweep",
    )
    campaign_end_time: Optional[int] = Field(
        default=None,
        description="Claim deadline in unix milliseconds; omit for no deadline",
    )
    campaign_id: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=64,
        pattern=r"^[A-Za-z0-9_\-]+$",
        description="Optional explicit campaign id",
    )
    rollback_failed_payout: Optional[bool] = Field(
        default=None,
        description="Override the server's failed-payout policy for this campaign",
    )


class FundRequest(BaseModel):
    """Request body for POST /campaigns/{id}/fund."""

    caller: str = Field(..., description="Funding identity (must have approved the campaign)")
    amount: int = Field(..., ge=0, description="Amount to pull into the campaign")


class ClaimRequest(BaseModel):
    """Request body for POST /campaigns/{id}/claim."""

    caller: str = Field(..., description="Claiming identity")
    amount: int = Field(..., ge=0, description="Allocation committed in the leaf")
    proof: list[str] = Field(
        default_factory=list,
        description="Sibling hashes, bottom to top (0x-prefixed hex)",
    )
    index: int = Field(..., ge=0, description="Leaf index in the tree")


class SweepRequest(BaseModel):
    """Request body for POST /campaigns/{id}/sweep."""

    caller: str = Field(..., description="Must be the campaign owner")


class MintRequest(BaseModel):
    """Request body for POST /ledger/mint."""

    account: str = Field(..., description="Account credited with the new tokens")
    amount: int = Field(..., ge=0)


class ApproveRequest(BaseModel):
    """Request body for POST /ledger/approve."""

    owner: str = Field(..., description="Account whose tokens may be pulled")
    spender: str = Field(..., description="Account allowed to pull, e.g. a campaign account")
    amount: int = Field(..., ge=0, description="New allowance, replacing any previous one")


class VerifyProofRequest(BaseModel):
    """
    Request body for POST /verify.

    Either `leaf` or both `identity` and `amount` must be given.
    """

    root: str = Field(..., description="Merkle root to check against")
    proof: list[str] = Field(default_factory=list)
    index: int = Field(..., ge=0)
    leaf: Optional[str] = Field(default=None, description="Pre-computed leaf hash")
    identity: Optional[str] = Field(default=None)
    amount: Optional[int] = Field(default=None, ge=0)

    @field_validator("root")
    @classmethod
    def _check_root(cls, v: str) -> str:
        return _check_hash(v)

    @field_validator("leaf")
    @classmethod
    def _check_leaf(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _check_hash(v)

    @field_validator("proof")
    @classmethod
    def _check_proof(cls, v: list[str]) -> list[str]:
        return [_check_hash(entry) for entry in v]
