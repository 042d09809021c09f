"""
Module 04 - Token Ledger Interface

The Token Ledger is an external collaborator: it holds balances and performs
transfers on behalf of accounts. Campaigns only talk to it through this
interface. Failures are reported as a False return value, never by raising.
"""

from abc import ABC, abstractmethod


class TokenLedger(ABC):
    """
    Abstract base class for token ledgers.

    Accounts are identities as accepted by core.schemas.types.
    """

    asset_id: str = "base"

    @abstractmethod
    def transfer_from(self, from_: str, to: str, amount: int) -> bool:
        """
        Pull `amount` from `from_` into `to`.

        `to` spends an allowance previously granted by `from_`.

        Returns:
            True on success, False if the allowance or balance is insufficient
        """

    @abstractmethod
    def transfer(self, sender: str, to: str, amount: int) -> bool:
        """
        Push `amount` from `sender` to `to`.

        Returns:
            True on success, False if the balance is insufficient
        """

    @abstractmethod
    def balance_of(self, account: str) -> int:
        """Current balance of an account (0 if unknown)."""
