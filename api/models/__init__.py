"""API request and response models."""

from api.models.requests import (
    ApproveRequest,
    ClaimRequest,
    CreateCampaignRequest,
    FundRequest,
    MintRequest,
    SweepRequest,
    VerifyProofRequest,
)
from api.models.responses import (
    AllowanceResponse,
    BalanceResponse,
    CampaignListResponse,
    CampaignResponse,
    ClaimResponse,
    ClaimStatusResponse,
    ErrorDetail,
    ErrorResponse,
    EventsResponse,
    FundResponse,
    HealthResponse,
    MintResponse,
    SweepResponse,
    VerifyProofResponse,
)

__all__ = [
    "ApproveRequest",
    "ClaimRequest",
    "CreateCampaignRequest",
    "FundRequest",
    "MintRequest",
    "SweepRequest",
    "VerifyProofRequest",
    "AllowanceResponse",
    "BalanceResponse",
    "CampaignListResponse",
    "CampaignResponse",
    "ClaimResponse",
    "ClaimStatusResponse",
    "ErrorDetail",
    "ErrorResponse",
    "EventsResponse",
    "FundResponse",
    "HealthResponse",
    "MintResponse",
    "SweepResponse",
    "VerifyProofResponse",
]
