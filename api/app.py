"""
Module 09D - FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.routes import health, campaigns, verify, ledger
from api.errors import (
    APIError,
    airdrop_error_handler,
    api_error_handler,
    generic_error_handler,
    validation_error_handler,
)
from core.config.runtime import get_default_config, setup_logging
from core.schemas.errors import AirdropException


# Configure logging from AIRDROP_LOG_LEVEL / airdrop.json
_config = get_default_config()
setup_logging(_config.logging.level, _config.logging.file)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Merkle Airdrop API",
        description="""
HTTP API for Merkle-proof token airdrop campaigns.

## Endpoints

- **POST /campaigns** - Create a campaign with a fixed Merkle root
- **POST /campaigns/{id}/fund** - Pull approved tokens into a campaign
- **POST /campaigns/{id}/claim** - Claim an allocation with a Merkle proof
- **POST /campaigns/{id}/sweep** - Owner reclaims the remainder after the deadline
- **POST /verify** - Stateless proof check
- **GET /health** - Health check

## Amounts and timestamps

Amounts are unsigned 256-bit integers. Timestamps are unix milliseconds.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(AirdropException, airdrop_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(campaigns.router)
    app.include_router(verify.router)
    app.include_router(ledger.router)

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=_config.api.host, port=_config.api.port)
