"""
Token Ledger Module

Interface to the external balance-holding service, plus an in-memory
reference implementation.
"""

from .base import TokenLedger
from .memory import InMemoryTokenLedger, TransferHook, TransferRecord

__all__ = [
    "TokenLedger",
    "InMemoryTokenLedger",
    "TransferHook",
    "TransferRecord",
]
