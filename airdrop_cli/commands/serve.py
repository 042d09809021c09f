"""
Module 09C - CLI Serve Command

Run the HTTP API under uvicorn.

Usage:
    airdrop serve [--host 127.0.0.1] [--port 8000]
"""

from __future__ import annotations

import logging
from argparse import Namespace

import uvicorn


logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0


def serve_cmd(args: Namespace) -> int:
    config = args.runtime_config
    host = args.host or config.api.host
    port = args.port or config.api.port

    logger.info(f"Starting API on {host}:{port}")
    uvicorn.run(
        "api.app:app",
        host=host,
        port=port,
        log_level=config.logging.level.lower(),
        reload=args.reload,
    )
    return EXIT_SUCCESS
