"""
Module 09D - Campaign Routes

Create campaigns and run fund / claim / sweep against them.

Handlers are plain `def` functions, so FastAPI runs them on its worker
threadpool; each campaign serialises its own operations. The caller identity
is taken from the request body; authenticating it is the deployment's job.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_registry
from api.models.requests import (
    ClaimRequest,
    CreateCampaignRequest,
    FundRequest,
    SweepRequest,
)
from api.models.responses import (
    CampaignListResponse,
    CampaignResponse,
    ClaimResponse,
    ClaimStatusResponse,
    EventsResponse,
    FundResponse,
    SweepResponse,
)
from core.airdrop.registry import CampaignRegistry
from core.schemas.types import normalize_identity


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.post("", response_model=CampaignResponse, status_code=201)
def create_campaign(
    request: CreateCampaignRequest,
    registry: CampaignRegistry = Depends(get_registry),
) -> CampaignResponse:
    """Construct a campaign with a fixed root, owner and optional deadline."""
    campaign = registry.create(
        request.merkle_root,
        request.campaign_end_time,
        request.owner,
        campaign_id=request.campaign_id,
        rollback_failed_payout=request.rollback_failed_payout,
    )
    return CampaignResponse(campaign=campaign.snapshot())


@router.get("", response_model=CampaignListResponse)
def list_campaigns(
    registry: CampaignRegistry = Depends(get_registry),
) -> CampaignListResponse:
    return CampaignListResponse(
        campaigns=[c.snapshot() for c in registry.list_campaigns()],
    )


@router.get("/{campaign_id}", response_model=CampaignResponse)
def get_campaign(
    campaign_id: str,
    registry: CampaignRegistry = Depends(get_registry),
) -> CampaignResponse:
    return CampaignResponse(campaign=registry.get(campaign_id).snapshot())


@router.post("/{campaign_id}/fund", response_model=FundResponse)
def fund_campaign(
    campaign_id: str,
    request: FundRequest,
    registry: CampaignRegistry = Depends(get_registry),
) -> FundResponse:
    """Pull tokens from the caller into the campaign account."""
    campaign = registry.get(campaign_id)
    total = campaign.fund(request.caller, request.amount)
    return FundResponse(
        campaign_id=campaign_id,
        amount=request.amount,
        total_funded=total,
        balance=campaign.balance(),
    )


@router.post("/{campaign_id}/claim", response_model=ClaimResponse)
def claim(
    campaign_id: str,
    request: ClaimRequest,
    registry: CampaignRegistry = Depends(get_registry),
) -> ClaimResponse:
    """Verify the caller's proof and pay out their allocation."""
    campaign = registry.get(campaign_id)
    event = campaign.claim(request.caller, request.amount, request.proof, request.index)
    return ClaimResponse(
        campaign_id=campaign_id,
        identity=event.identity,
        amount=event.amount,
        event_id=event.event_id,
    )


@router.post("/{campaign_id}/sweep", response_model=SweepResponse)
def sweep(
    campaign_id: str,
    request: SweepRequest,
    registry: CampaignRegistry = Depends(get_registry),
) -> SweepResponse:
    """Return the remaining balance to the owner after the deadline."""
    campaign = registry.get(campaign_id)
    amount = campaign.sweep(request.caller)
    return SweepResponse(
        campaign_id=campaign_id,
        owner=campaign.owner,
        amount=amount,
    )


@router.get("/{campaign_id}/claims/{identity}", response_model=ClaimStatusResponse)
def claim_status(
    campaign_id: str,
    identity: str,
    registry: CampaignRegistry = Depends(get_registry),
) -> ClaimStatusResponse:
    campaign = registry.get(campaign_id)
    return ClaimStatusResponse(
        campaign_id=campaign_id,
        identity=normalize_identity(identity),
        claimed=campaign.is_claimed(identity),
    )


@router.get("/{campaign_id}/events", response_model=EventsResponse)
def campaign_events(
    campaign_id: str,
    registry: CampaignRegistry = Depends(get_registry),
) -> EventsResponse:
    campaign = registry.get(campaign_id)
    events = campaign.events.get_events(campaign_id=campaign_id)
    return EventsResponse(
        campaign_id=campaign_id,
        events=[e.model_dump(mode="json") for e in events],
    )
