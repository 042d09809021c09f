"""
Module 09D - Minimal API (FastAPI)

HTTP API for Merkle airdrop campaigns:
- POST /campaigns - Create a campaign
- POST /campaigns/{id}/fund | claim | sweep - Campaign operations
- POST /verify - Stateless proof check
- GET /ledger/balances/{account}, POST /ledger/mint | approve - Token ledger
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
