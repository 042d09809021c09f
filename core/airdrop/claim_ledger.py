"""
Claim Ledger

Per-identity claimed flags for one campaign. A flag goes from False to True
at most once and is never cleared by a committed operation.

The only way a flag disappears again is `pending()`: a mark made inside the
context is withdrawn if the body raises, because the claim that made it
never committed.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from core.schemas.errors import SchemaValidationException
from core.schemas.types import IdentityLike, normalize_identity


logger = logging.getLogger(__name__)


class ClaimLedger:
    """
    Tracks which identities have claimed.

    Keys are normalised identities; an absent identity is unclaimed.
    """

    def __init__(self) -> None:
        self._claimed: dict[str, bool] = {}

    def is_claimed(self, identity: IdentityLike) -> bool:
        return self._claimed.get(normalize_identity(identity), False)

    def mark_claimed(self, identity: IdentityLike) -> str:
        """
        Set the claimed flag for an identity.

        Callers must have verified the proof already and must not have
        started the payout yet.

        Returns:
            The normalised identity that was marked
        """
        key = normalize_identity(identity)
        self._claimed[key] = True
        return key

    @contextmanager
    def pending(self, identity: IdentityLike) -> Iterator[str]:
        """
        Mark an identity for the duration of a payout.

        The mark is visible immediately, including to re-entrant calls made
        from inside the body. If the body raises, the mark is withdrawn
        before the exception propagates.
        """
        key = normalize_identity(identity)
        if self._claimed.get(key, False):
            raise RuntimeError(f"{key} is already marked as claimed")
        self.mark_claimed(key)
        try:
            yield key
        except BaseException:
            del self._claimed[key]
            logger.info(f"Withdrew claim mark for {key} after failed payout")
            raise

    def claimed_identities(self) -> list[str]:
        return [k for k, v in self._claimed.items() if v]

    def claimed_count(self) -> int:
        return sum(1 for v in self._claimed.values() if v)

    def __contains__(self, identity: object) -> bool:
        if not isinstance(identity, (str, bytes)):
            return False
        try:
            return self.is_claimed(identity)
        except SchemaValidationException:
            return False

    def __len__(self) -> int:
        return self.claimed_count()
