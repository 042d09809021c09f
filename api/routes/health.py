"""
Module 09D - Health Check Route

Liveness probe. Also reports how many campaigns the process is serving.
"""

from fastapi import APIRouter, Depends

from api import __version__
from api.deps import get_registry
from api.models.responses import HealthResponse
from core.airdrop.registry import CampaignRegistry


router = APIRouter(tags=["health"])


def _status(registry: CampaignRegistry) -> HealthResponse:
    return HealthResponse(
        ok=True,
        version=__version__,
        asset_id=registry.ledger.asset_id,
        campaigns=len(registry),
    )


@router.get("/health", response_model=HealthResponse)
def health_check(registry: CampaignRegistry = Depends(get_registry)) -> HealthResponse:
    return _status(registry)


@router.get("/", response_model=HealthResponse)
def root(registry: CampaignRegistry = Depends(get_registry)) -> HealthResponse:
    """Same payload as /health."""
    return _status(registry)
