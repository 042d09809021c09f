"""
Campaign Registry

Holds the campaigns served by one process, all sharing a token ledger, a
clock and an event recorder. Nothing is shared between campaigns beyond
those collaborators.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Union

from core.airdrop.campaign import Campaign
from core.airdrop.clock import Clock, SystemClock
from core.airdrop.events import EventRecorder
from core.ledger.base import TokenLedger
from core.schemas.errors import (
    CampaignConfigurationException,
    CampaignNotFoundException,
)
from core.schemas.types import IdentityLike


logger = logging.getLogger(__name__)


class CampaignRegistry:
    """In-process lookup of campaigns by id."""

    def __init__(
        self,
        ledger: TokenLedger,
        *,
        clock: Optional[Clock] = None,
        events: Optional[EventRecorder] = None,
        rollback_failed_payout: bool = True,
    ) -> None:
        self.ledger = ledger
        self.clock: Clock = clock or SystemClock()
        self.events = events if events is not None else EventRecorder()
        self.rollback_failed_payout = rollback_failed_payout
        self._campaigns: dict[str, Campaign] = {}
        self._lock = threading.Lock()

    def create(
        self,
        merkle_root: Union[bytes, str],
        campaign_end_time: Optional[int],
        owner: IdentityLike,
        *,
        campaign_id: Optional[str] = None,
        rollback_failed_payout: Optional[bool] = None,
    ) -> Campaign:
        """
        Construct and register a campaign.

        Raises:
            CampaignConfigurationException: If construction fails or the id
                is already taken
        """
        campaign = Campaign(
            self.ledger,
            merkle_root,
            campaign_end_time,
            owner,
            clock=self.clock,
            events=self.events,
            campaign_id=campaign_id,
            rollback_failed_payout=(
                self.rollback_failed_payout
                if rollback_failed_payout is None
                else rollback_failed_payout
            ),
        )
        with self._lock:
            if campaign.campaign_id in self._campaigns:
                raise CampaignConfigurationException(
                    f"Campaign id already registered: {campaign.campaign_id}",
                    details={"campaign_id": campaign.campaign_id},
                )
            self._campaigns[campaign.campaign_id] = campaign
        logger.info(f"Registered campaign {campaign.campaign_id}")
        return campaign

    def get(self, campaign_id: str) -> Campaign:
        with self._lock:
            campaign = self._campaigns.get(campaign_id)
        if campaign is None:
            raise CampaignNotFoundException(campaign_id)
        return campaign

    def list_campaigns(self) -> list[Campaign]:
        with self._lock:
            return list(self._campaigns.values())

    def __len__(self) -> int:
        return len(self._campaigns)

    def __contains__(self, campaign_id: object) -> bool:
        return campaign_id in self._campaigns
