"""
Campaign Lifecycle

One Merkle airdrop distribution: a fixed root, an owner, a token reference
and an optional claim deadline.

Lifecycle:
    construct (root fixed) -> fund (any number of times)
        -> claim (at most once per identity)
        -> after the deadline, the owner sweeps the remaining balance

Ordering contract for claim:
    deadline check -> already-claimed check -> proof check
        -> mark claimed -> ledger transfer -> Claimed event

The claimed flag is set BEFORE the outbound transfer, so a token ledger that
calls back into the campaign during the transfer sees the identity as
claimed. Every public operation runs inside a per-campaign re-entrant lock:
threads are serialised, same-thread callbacks from the ledger are not
blocked.

Failed payouts: with rollback_failed_payout=True (the default) a rejected
transfer withdraws the claimed flag and the claim can be retried. With
False the flag stays set and the allocation is forfeited.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Optional, Sequence, Union

from eth_utils import to_checksum_address

from core.airdrop.claim_ledger import ClaimLedger
from core.airdrop.clock import Clock, SystemClock
from core.airdrop.events import (
    ClaimedEvent,
    EventRecorder,
    FundedEvent,
    SweptEvent,
)
from core.crypto.hashing import HASH_LENGTH, hash_from_hex, keccak256, to_hex
from core.ledger.base import TokenLedger
from core.merkle.leaf import encode_leaf
from core.merkle.verify import verify_proof
from core.schemas.campaign import CampaignPhase, CampaignSnapshot
from core.schemas.errors import (
    AlreadyClaimedException,
    AmountCannotBeZeroException,
    CampaignConfigurationException,
    ClaimPeriodActiveException,
    ClaimPeriodOverException,
    InvalidProofException,
    SchemaValidationException,
    TransferFailedException,
    UnauthorizedException,
)
from core.schemas.types import IdentityLike, normalize_identity, validate_amount


logger = logging.getLogger(__name__)


ProofEntry = Union[bytes, str]


def derive_campaign_account(campaign_id: str) -> str:
    """
    Derive the ledger account that holds a campaign's funds.

    account = last 20 bytes of keccak256("airdrop-campaign:" + campaign_id)
    """
    digest = keccak256(f"airdrop-campaign:{campaign_id}".encode("utf-8"))
    return to_checksum_address(digest[-20:])


def parse_root(root: Union[bytes, str]) -> bytes:
    """Accept a 32-byte root as raw bytes or 0x hex."""
    if isinstance(root, (bytes, bytearray)):
        if len(root) != HASH_LENGTH:
            raise CampaignConfigurationException(
                f"Merkle root must be {HASH_LENGTH} bytes, got {len(root)}",
                details={"field_path": "merkle_root"},
            )
        return bytes(root)
    try:
        return hash_from_hex(root)
    except (TypeError, ValueError, AttributeError) as e:
        raise CampaignConfigurationException(
            f"Invalid Merkle root: {e}",
            details={"field_path": "merkle_root"},
        ) from e


def parse_proof(proof: Sequence[ProofEntry]) -> list[bytes]:
    """
    Normalise proof entries to 32-byte values.

    Raises:
        ValueError: If any entry is not a 32-byte hash (raw or 0x hex)
    """
    if isinstance(proof, (str, bytes, bytearray)):
        raise ValueError("Proof must be a sequence of hashes")
    siblings: list[bytes] = []
    for position, entry in enumerate(proof):
        if isinstance(entry, str):
            entry = hash_from_hex(entry)
        if not isinstance(entry, (bytes, bytearray)) or len(entry) != HASH_LENGTH:
            raise ValueError(f"Proof entry {position} is not a {HASH_LENGTH}-byte hash")
        siblings.append(bytes(entry))
    return siblings


class Campaign:
    """
    A funded, optionally time-bounded airdrop distribution.

    Args:
        token: The Token Ledger holding the distributed asset
        merkle_root: 32-byte commitment to all (identity, amount) leaves
        campaign_end_time: Claim deadline in unix ms, or None for no deadline
        owner: Identity allowed to sweep after the deadline
        clock: Time source, unix ms (defaults to wall-clock time)
        events: Recorder that receives notifications
        campaign_id: Registry identifier (generated when omitted)
        rollback_failed_payout: Withdraw the claimed flag if a payout fails

    Raises:
        CampaignConfigurationException: If the root is malformed or the
            deadline is not strictly in the future
    """

    def __init__(
        self,
        token: TokenLedger,
        merkle_root: Union[bytes, str],
        campaign_end_time: Optional[int],
        owner: IdentityLike,
        *,
        clock: Optional[Clock] = None,
        events: Optional[EventRecorder] = None,
        campaign_id: Optional[str] = None,
        rollback_failed_payout: bool = True,
    ) -> None:
        self._clock: Clock = clock or SystemClock()
        now = self._clock()

        if campaign_end_time is not None:
            if isinstance(campaign_end_time, bool) or not isinstance(campaign_end_time, int):
                raise CampaignConfigurationException(
                    "Campaign end time must be an integer timestamp",
                    details={"field_path": "campaign_end_time"},
                )
            if campaign_end_time <= now:
                raise CampaignConfigurationException(
                    "Campaign end time must be in the future",
                    details={"campaign_end_time": campaign_end_time, "now": now},
                )

        try:
            self._owner = normalize_identity(owner)
        except SchemaValidationException as e:
            raise CampaignConfigurationException(
                f"Invalid owner: {e.message}",
                details={"field_path": "owner"},
            ) from e

        self._token = token
        self._root = parse_root(merkle_root)
        self._campaign_end_time = campaign_end_time
        self.campaign_id = campaign_id or f"cmp_{uuid.uuid4().hex[:12]}"
        self.account = derive_campaign_account(self.campaign_id)
        self.rollback_failed_payout = rollback_failed_payout

        self._claims = ClaimLedger()
        self._events = events if events is not None else EventRecorder()
        self._total_funded = 0
        self._total_claimed = 0
        self._lock = threading.RLock()

        logger.info(
            f"Created campaign {self.campaign_id} root={to_hex(self._root)} "
            f"owner={self._owner} end={campaign_end_time}"
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def root(self) -> bytes:
        return self._root

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def campaign_end_time(self) -> Optional[int]:
        return self._campaign_end_time

    @property
    def asset_id(self) -> str:
        """Identifier of the distributed asset on the token ledger."""
        return self._token.asset_id

    @property
    def total_funded(self) -> int:
        return self._total_funded

    @property
    def total_claimed(self) -> int:
        return self._total_claimed

    @property
    def events(self) -> EventRecorder:
        return self._events

    def is_claimed(self, identity: IdentityLike) -> bool:
        return self._claims.is_claimed(identity)

    def claimed_count(self) -> int:
        return self._claims.claimed_count()

    def balance(self) -> int:
        """Campaign-held balance as reported by the token ledger."""
        return self._token.balance_of(self.account)

    def now(self) -> int:
        return self._clock()

    def has_ended(self, now: Optional[int] = None) -> bool:
        if self._campaign_end_time is None:
            return False
        current = self._clock() if now is None else now
        return current > self._campaign_end_time

    @property
    def phase(self) -> CampaignPhase:
        if self.has_ended():
            return CampaignPhase.ENDED
        if self._total_funded > 0:
            return CampaignPhase.ACTIVE
        return CampaignPhase.PRE_FUNDED

    def snapshot(self) -> CampaignSnapshot:
        with self._lock:
            return CampaignSnapshot(
                campaign_id=self.campaign_id,
                account=self.account,
                asset_id=self.asset_id,
                root=to_hex(self._root),
                owner=self._owner,
                campaign_end_time=self._campaign_end_time,
                total_funded=self._total_funded,
                total_claimed=self._total_claimed,
                claimed_count=self._claims.claimed_count(),
                balance=self.balance(),
                phase=self.phase,
                rollback_failed_payout=self.rollback_failed_payout,
            )

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def fund(self, caller: IdentityLike, amount: int) -> int:
        """
        Pull `amount` tokens from the caller into the campaign.

        The caller must have approved the campaign account beforehand.

        Returns:
            The new total funded amount

        Raises:
            AmountCannotBeZeroException: If amount is zero
            TransferFailedException: If the ledger rejects the pull
        """
        with self._lock:
            funder = normalize_identity(caller)
            validate_amount(amount)
            if amount == 0:
                raise AmountCannotBeZeroException()

            if not self._token.transfer_from(funder, self.account, amount):
                logger.warning(
                    f"Campaign {self.campaign_id}: funding of {amount} by {funder} failed"
                )
                raise TransferFailedException(
                    "Funding transfer was rejected by the token ledger",
                    details={"from": funder, "amount": amount},
                )

            self._total_funded += amount
            logger.info(f"Campaign {self.campaign_id}: funded {amount} by {funder}")

            self._events.emit(FundedEvent(
                campaign_id=self.campaign_id,
                emitted_at=self._clock(),
                funder=funder,
                amount=amount,
            ))
            return self._total_funded

    def claim(
        self,
        caller: IdentityLike,
        amount: int,
        proof: Sequence[ProofEntry],
        index: int,
    ) -> ClaimedEvent:
        """
        Claim the caller's allocation.

        Args:
            caller: The claiming identity (the leaf's identity)
            amount: The allocation committed in the leaf
            proof: Sibling hashes, bottom to top (bytes or 0x hex)
            index: Leaf index in the tree

        Returns:
            The emitted ClaimedEvent

        Raises:
            ClaimPeriodOverException: If the deadline has passed
            AlreadyClaimedException: If the caller already claimed
            InvalidProofException: If the proof does not verify
            TransferFailedException: If the payout is rejected
        """
        with self._lock:
            now = self._clock()
            if self.has_ended(now):
                raise ClaimPeriodOverException(self._campaign_end_time, now)

            recipient = normalize_identity(caller)
            if self._claims.is_claimed(recipient):
                raise AlreadyClaimedException(recipient)

            if not self._proof_is_valid(recipient, amount, proof, index):
                logger.info(
                    f"Campaign {self.campaign_id}: invalid proof from {recipient} "
                    f"(amount={amount}, index={index})"
                )
                raise InvalidProofException(leaf_index=index if isinstance(index, int) else None)

            if self.rollback_failed_payout:
                with self._claims.pending(recipient):
                    self._pay_out(recipient, amount)
            else:
                self._claims.mark_claimed(recipient)
                self._pay_out(recipient, amount)

            self._total_claimed += amount
            logger.info(f"Campaign {self.campaign_id}: {recipient} claimed {amount}")

            event = ClaimedEvent(
                campaign_id=self.campaign_id,
                emitted_at=self._clock(),
                identity=recipient,
                amount=amount,
            )
            self._events.emit(event)
            return event

    def sweep(self, caller: IdentityLike) -> int:
        """
        Transfer the whole remaining balance to the owner after the deadline.

        Returns:
            The amount swept (0 if nothing was left)

        Raises:
            UnauthorizedException: If the caller is not the owner
            ClaimPeriodActiveException: If no deadline has passed yet
            TransferFailedException: If the ledger rejects the transfer
        """
        with self._lock:
            sender = normalize_identity(caller)
            if sender != self._owner:
                raise UnauthorizedException(sender)

            now = self._clock()
            if not self.has_ended(now):
                raise ClaimPeriodActiveException(self._campaign_end_time, now)

            remaining = self._token.balance_of(self.account)
            if not self._token.transfer(self.account, self._owner, remaining):
                logger.warning(
                    f"Campaign {self.campaign_id}: sweep of {remaining} failed"
                )
                raise TransferFailedException(
                    "Sweep transfer was rejected by the token ledger",
                    details={"to": self._owner, "amount": remaining},
                )

            logger.info(f"Campaign {self.campaign_id}: swept {remaining} to {self._owner}")
            self._events.emit(SweptEvent(
                campaign_id=self.campaign_id,
                emitted_at=self._clock(),
                owner=self._owner,
                amount=remaining,
            ))
            return remaining

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _proof_is_valid(
        self,
        recipient: str,
        amount: int,
        proof: Sequence[ProofEntry],
        index: int,
    ) -> bool:
        """Malformed amounts, indices or proof entries never verify."""
        try:
            validate_amount(amount)
            siblings = parse_proof(proof)
        except (SchemaValidationException, ValueError, TypeError):
            return False
        leaf = encode_leaf(recipient, amount)
        return verify_proof(leaf, siblings, index, self._root)

    def _pay_out(self, recipient: str, amount: int) -> None:
        if not self._token.transfer(self.account, recipient, amount):
            logger.warning(
                f"Campaign {self.campaign_id}: payout of {amount} to {recipient} failed"
            )
            raise TransferFailedException(
                "Payout was rejected by the token ledger",
                details={"to": recipient, "amount": amount},
            )

    def __repr__(self) -> str:
        return (
            f"Campaign(id={self.campaign_id!r}, root={to_hex(self._root)!r}, "
            f"owner={self._owner!r}, end={self._campaign_end_time!r})"
        )


__all__ = [
    "Campaign",
    "derive_campaign_account",
    "parse_root",
    "parse_proof",
]
