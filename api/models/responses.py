"""
Module 09D - API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from core.schemas.campaign import CampaignSnapshot


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "merkle-airdrop-api"
    version: str
    asset_id: str = Field(..., description="Asset served by the token ledger")
    campaigns: int = Field(default=0, ge=0, description="Registered campaigns")


class CampaignResponse(BaseModel):
    """Response wrapping a campaign snapshot."""

    ok: bool = True
    campaign: CampaignSnapshot


class CampaignListResponse(BaseModel):
    """Response for GET /campaigns."""

    ok: bool = True
    campaigns: list[CampaignSnapshot] = Field(default_factory=list)


class FundResponse(BaseModel):
    """Response for POST /campaigns/{id}/fund."""

    ok: bool = True
    campaign_id: str
    amount: int
    total_funded: int
    balance: int


class ClaimResponse(BaseModel):
    """Response for POST /campaigns/{id}/claim."""

    ok: bool = True
    campaign_id: str
    identity: str
    amount: int
    event_id: str


class SweepResponse(BaseModel):
    """Response for POST /campaigns/{id}/sweep."""

    ok: bool = True
    campaign_id: str
    owner: str
    amount: int


class ClaimStatusResponse(BaseModel):
    """Response for GET /campaigns/{id}/claims/{identity}."""

    ok: bool = True
    campaign_id: str
    identity: str
    claimed: bool


class EventsResponse(BaseModel):
    """Response for GET /campaigns/{id}/events."""

    ok: bool = True
    campaign_id: str
    events: list[dict[str, Any]] = Field(default_factory=list)


class VerifyProofResponse(BaseModel):
    """Response for POST /verify."""

    ok: bool = True
    valid: bool = Field(..., description="Whether the proof recomputes the root")
    leaf: str = Field(..., description="Leaf hash that was checked")
    root: str = Field(..., description="Root the proof was checked against")
    index: int


class BalanceResponse(BaseModel):
    """Response for GET /ledger/balances/{account}."""

    ok: bool = True
    asset_id: str
    account: str
    balance: int


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail = Field(..., description="Error details")


class MintResponse(BaseModel):
    """Response for POST /ledger/mint."""

    ok: bool = True
    asset_id: str
    account: str
    amount: int
    balance: int = Field(..., description="Balance after minting")


class AllowanceResponse(BaseModel):
    """Response for POST /ledger/approve and GET /ledger/allowances/{owner}/{spender}."""

    ok: bool = True
    asset_id: str
    owner: str
    spender: str
    allowance: int
