"""API route handlers."""

from api.routes import health, campaigns, verify, ledger

__all__ = ["health", "campaigns", "verify", "ledger"]
