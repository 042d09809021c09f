"""
Airdrop Module

Claim ledger, campaign lifecycle, notifications and the in-process
campaign registry.

Usage:
    from core.airdrop import Campaign
    from core.ledger import InMemoryTokenLedger

    ledger = InMemoryTokenLedger()
    campaign = Campaign(ledger, root, end_time, owner)
    campaign.fund(owner, 1_000)
    campaign.claim(recipient, 100, proof, index)
"""

from .campaign import Campaign, derive_campaign_account, parse_proof, parse_root
from .claim_ledger import ClaimLedger
from .clock import Clock, FixedClock, SystemClock
from .distribution import DistributionEntry, DistributionFile, EntryCheck
from .events import (
    CampaignEvent,
    ClaimedEvent,
    EventRecorder,
    FundedEvent,
    SweptEvent,
)
from .registry import CampaignRegistry

__all__ = [
    "Campaign",
    "derive_campaign_account",
    "parse_proof",
    "parse_root",
    "ClaimLedger",
    "Clock",
    "FixedClock",
    "SystemClock",
    "DistributionEntry",
    "DistributionFile",
    "EntryCheck",
    "CampaignEvent",
    "ClaimedEvent",
    "EventRecorder",
    "FundedEvent",
    "SweptEvent",
    "CampaignRegistry",
]
