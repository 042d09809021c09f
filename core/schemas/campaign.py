"""
Module 01 - Schemas
File: campaign.py

Purpose: Read-side models describing a campaign. The Campaign object itself
lives in core.airdrop; these are the serialisable views of it.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CampaignPhase(str, Enum):
    """
    Derived lifecycle phase of a campaign.

    ENDED holds whenever a deadline is configured and has passed. Without a
    deadline a campaign only moves between PRE_FUNDED and ACTIVE.
    """

    PRE_FUNDED = "PreFunded"
    ACTIVE = "Active"
    ENDED = "Ended"


class CampaignSnapshot(BaseModel):
    """Point-in-time view of a campaign's configuration and counters."""

    model_config = ConfigDict(extra="forbid")

    campaign_id: str = Field(..., description="Registry identifier")
    account: str = Field(..., description="Ledger account holding campaign funds")
    asset_id: str = Field(..., description="Token reference on the ledger")
    root: str = Field(..., description="Merkle root (0x-prefixed)")
    owner: str = Field(..., description="Owner identity, authorized to sweep")
    campaign_end_time: Optional[int] = Field(
        default=None,
        description="Claim deadline in unix milliseconds; None means no deadline",
    )
    total_funded: int = Field(default=0, ge=0)
    total_claimed: int = Field(default=0, ge=0)
    claimed_count: int = Field(default=0, ge=0)
    balance: int = Field(default=0, ge=0, description="Current ledger balance")
    phase: CampaignPhase
    rollback_failed_payout: bool = Field(
        default=True,
        description="Whether a failed payout reverts the claimed flag",
    )
