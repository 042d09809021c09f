"""
Module 09D - API Error Handling

Every failure leaves the service as the same envelope:
    {"ok": false, "error": {"code": ..., "message": ..., "details": {...}}}

Domain exceptions raised by campaigns are mapped to HTTP status codes here;
routes never translate them.
"""

import logging
from typing import Any, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.models.responses import ErrorResponse, ErrorDetail
from core.schemas.errors import AirdropException, ErrorCodes


logger = logging.getLogger(__name__)


# Domain error code -> HTTP status
STATUS_BY_CODE: dict[str, int] = {
    ErrorCodes.INVALID_PROOF: 400,
    ErrorCodes.AMOUNT_CANNOT_BE_ZERO: 400,
    ErrorCodes.SCHEMA_VALIDATION_ERROR: 400,
    ErrorCodes.CAMPAIGN_CONFIGURATION_ERROR: 400,
    ErrorCodes.DISTRIBUTION_FILE_ERROR: 400,
    ErrorCodes.TRANSFER_FAILED: 402,
    ErrorCodes.UNAUTHORIZED: 403,
    ErrorCodes.CAMPAIGN_NOT_FOUND: 404,
    ErrorCodes.ALREADY_CLAIMED: 409,
    ErrorCodes.CLAIM_PERIOD_OVER: 409,
    ErrorCodes.CLAIM_PERIOD_ACTIVE: 409,
}


def error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> JSONResponse:
    """Build the standard error envelope."""
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details or {}),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


class APIError(Exception):
    """Request-level error raised by route handlers."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class InvalidRequestError(APIError):
    """The request parsed but its fields do not make sense together."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("INVALID_REQUEST", message, 400, details)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


async def airdrop_error_handler(request: Request, exc: AirdropException) -> JSONResponse:
    """Map a domain exception to its HTTP status."""
    status_code = STATUS_BY_CODE.get(exc.code, 400)
    logger.info(f"{request.method} {request.url.path} -> {exc.code}: {exc.message}")
    return error_response(status_code, exc.code, exc.message, exc.details)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Request bodies or path parameters failed pydantic validation."""
    errors = [
        {"loc": [str(part) for part in e.get("loc", ())], "msg": e.get("msg", "")}
        for e in exc.errors()
    ]
    return error_response(
        422,
        ErrorCodes.SCHEMA_VALIDATION_ERROR,
        "Request validation failed",
        {"errors": errors},
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(
        500,
        "INTERNAL_ERROR",
        "An unexpected error occurred",
        {"type": type(exc).__name__},
    )
