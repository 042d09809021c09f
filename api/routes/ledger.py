"""
Module 09D - Ledger Routes

Balances and allowances on the token ledger backing the service.

Minting and approvals are only offered when that ledger is the in-memory
one; a real token ledger is funded and approved outside this service.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_registry
from api.errors import APIError
from api.models.requests import ApproveRequest, MintRequest
from api.models.responses import AllowanceResponse, BalanceResponse, MintResponse
from core.airdrop.registry import CampaignRegistry
from core.ledger.memory import InMemoryTokenLedger
from core.schemas.types import normalize_identity


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ledger", tags=["ledger"])


def _writable_ledger(registry: CampaignRegistry) -> InMemoryTokenLedger:
    ledger = registry.ledger
    if not isinstance(ledger, InMemoryTokenLedger):
        raise APIError(
            "LEDGER_NOT_WRITABLE",
            f"Ledger {type(ledger).__name__} does not accept mint or approve",
            status_code=405,
        )
    return ledger


@router.get("/balances/{account}", response_model=BalanceResponse)
def balance(
    account: str,
    registry: CampaignRegistry = Depends(get_registry),
) -> BalanceResponse:
    account = normalize_identity(account)
    return BalanceResponse(
        asset_id=registry.ledger.asset_id,
        account=account,
        balance=registry.ledger.balance_of(account),
    )


@router.get("/allowances/{owner}/{spender}", response_model=AllowanceResponse)
def allowance(
    owner: str,
    spender: str,
    registry: CampaignRegistry = Depends(get_registry),
) -> AllowanceResponse:
    ledger = _writable_ledger(registry)
    owner, spender = normalize_identity(owner), normalize_identity(spender)
    return AllowanceResponse(
        asset_id=ledger.asset_id,
        owner=owner,
        spender=spender,
        allowance=ledger.allowance(owner, spender),
    )


@router.post("/mint", response_model=MintResponse)
def mint(
    request: MintRequest,
    registry: CampaignRegistry = Depends(get_registry),
) -> MintResponse:
    """Credit new tokens to an account."""
    ledger = _writable_ledger(registry)
    account = normalize_identity(request.account)
    ledger.mint(account, request.amount)
    logger.info(f"Minted {request.amount} {ledger.asset_id} to {account}")
    return MintResponse(
        asset_id=ledger.asset_id,
        account=account,
        amount=request.amount,
        balance=ledger.balance_of(account),
    )


@router.post("/approve", response_model=AllowanceResponse)
def approve(
    request: ApproveRequest,
    registry: CampaignRegistry = Depends(get_registry),
) -> AllowanceResponse:
    """
    Set the amount `spender` may pull from `owner`.

    Funding a campaign needs an approval for the campaign's account first.
    """
    ledger = _writable_ledger(registry)
    owner = normalize_identity(request.owner)
    spender = normalize_identity(request.spender)
    ledger.approve(owner, spender, request.amount)
    return AllowanceResponse(
        asset_id=ledger.asset_id,
        owner=owner,
        spender=spender,
        allowance=ledger.allowance(owner, spender),
    )
