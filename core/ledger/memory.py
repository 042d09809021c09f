"""
Module 04 - In-Memory Token Ledger

Reference ledger with ERC20-style semantics: balances, allowances, mint.
Used by the HTTP service and the test-suite.

Transfer hooks run after balances have moved and before the transfer
returns, which is where a real token contract could call back into the
campaign. A hook returning False makes the transfer fail and undoes it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from core.ledger.base import TokenLedger
from core.schemas.errors import SchemaValidationException
from core.schemas.types import normalize_identity, validate_amount


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferRecord:
    """One completed transfer."""
    sender: str
    to: str
    amount: int
    pulled: bool = False


TransferHook = Callable[[TransferRecord], Optional[bool]]


class InMemoryTokenLedger(TokenLedger):
    """
    Token ledger that keeps all state in process memory.

    Usage:
        ledger = InMemoryTokenLedger(asset_id="DOT")
        ledger.mint(owner, 1_000)
        ledger.approve(owner, campaign.account, 1_000)
        campaign.fund(owner, 1_000)
    """

    def __init__(self, asset_id: str = "TOKEN") -> None:
        self.asset_id = asset_id
        self._balances: dict[str, int] = {}
        self._allowances: dict[tuple[str, str], int] = {}
        self._hooks: list[TransferHook] = []
        self._history: list[TransferRecord] = []
        # Hooks may re-enter the ledger on the same thread
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Administration
    # -------------------------------------------------------------------------

    def mint(self, account: str, amount: int) -> None:
        """Create `amount` new tokens in `account`."""
        account = normalize_identity(account)
        validate_amount(amount)
        with self._lock:
            self._balances[account] = self._balances.get(account, 0) + amount
        logger.debug(f"Minted {amount} {self.asset_id} to {account}")

    def approve(self, owner: str, spender: str, amount: int) -> None:
        """Allow `spender` to pull up to `amount` from `owner`."""
        key = (normalize_identity(owner), normalize_identity(spender))
        validate_amount(amount)
        with self._lock:
            self._allowances[key] = amount

    def allowance(self, owner: str, spender: str) -> int:
        key = (normalize_identity(owner), normalize_identity(spender))
        with self._lock:
            return self._allowances.get(key, 0)

    def add_hook(self, hook: TransferHook) -> None:
        """Register a callback invoked during every transfer."""
        self._hooks.append(hook)

    def remove_hook(self, hook: TransferHook) -> None:
        self._hooks.remove(hook)

    @property
    def history(self) -> list[TransferRecord]:
        with self._lock:
            return list(self._history)

    @property
    def total_supply(self) -> int:
        with self._lock:
            return sum(self._balances.values())

    # -------------------------------------------------------------------------
    # TokenLedger interface
    # -------------------------------------------------------------------------

    def balance_of(self, account: str) -> int:
        account = normalize_identity(account)
        with self._lock:
            return self._balances.get(account, 0)

    def transfer(self, sender: str, to: str, amount: int) -> bool:
        try:
            sender = normalize_identity(sender)
            to = normalize_identity(to)
            validate_amount(amount)
        except SchemaValidationException as e:
            logger.warning(f"Rejected transfer: {e.message}")
            return False

        with self._lock:
            if self._balances.get(sender, 0) < amount:
                logger.info(
                    f"Transfer of {amount} from {sender} rejected: insufficient balance"
                )
                return False
            return self._move(TransferRecord(sender=sender, to=to, amount=amount))

    def transfer_from(self, from_: str, to: str, amount: int) -> bool:
        try:
            from_ = normalize_identity(from_)
            to = normalize_identity(to)
            validate_amount(amount)
        except SchemaValidationException as e:
            logger.warning(f"Rejected transfer_from: {e.message}")
            return False

        with self._lock:
            key = (from_, to)
            allowed = self._allowances.get(key, 0)
            if allowed < amount:
                logger.info(
                    f"Pull of {amount} from {from_} rejected: allowance {allowed}"
                )
                return False
            if self._balances.get(from_, 0) < amount:
                logger.info(
                    f"Pull of {amount} from {from_} rejected: insufficient balance"
                )
                return False

            self._allowances[key] = allowed - amount
            record = TransferRecord(sender=from_, to=to, amount=amount, pulled=True)
            try:
                moved = self._move(record)
            except BaseException:
                self._allowances[key] = allowed
                raise
            if not moved:
                self._allowances[key] = allowed
            return moved

    def _move(self, record: TransferRecord) -> bool:
        """Apply a transfer and run hooks; a rejecting or raising hook undoes it."""
        self._balances[record.sender] = self._balances.get(record.sender, 0) - record.amount
        self._balances[record.to] = self._balances.get(record.to, 0) + record.amount
        position = len(self._history)
        self._history.append(record)

        try:
            rejected = any(hook(record) is False for hook in list(self._hooks))
        except BaseException:
            self._undo(record, position)
            raise
        if rejected:
            self._undo(record, position)
            logger.info(f"Transfer {record} rejected by hook")
            return False
        return True

    def _undo(self, record: TransferRecord, position: int) -> None:
        self._balances[record.to] -= record.amount
        self._balances[record.sender] += record.amount
        del self._history[position]


__all__ = [
    "InMemoryTokenLedger",
    "TransferHook",
    "TransferRecord",
]
