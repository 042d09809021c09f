"""
Module 01 - Schemas
File: errors.py

Purpose: Standard error taxonomy for airdrop campaigns.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Every campaign operation either applies all of its effects or raises exactly
one of the exceptions below. None of them are retryable.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the service."""

    # Campaign operation errors
    TRANSFER_FAILED = "TransferFailed"
    INVALID_PROOF = "InvalidProof"
    ALREADY_CLAIMED = "AlreadyClaimed"
    AMOUNT_CANNOT_BE_ZERO = "AmountCannotBeZero"
    UNAUTHORIZED = "Unauthorized"
    CLAIM_PERIOD_OVER = "ClaimPeriodOver"
    CLAIM_PERIOD_ACTIVE = "ClaimPeriodActive"

    # Construction & input errors
    CAMPAIGN_CONFIGURATION_ERROR = "CAMPAIGN_CONFIGURATION_ERROR"
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"
    CAMPAIGN_NOT_FOUND = "CAMPAIGN_NOT_FOUND"
    DISTRIBUTION_FILE_ERROR = "DISTRIBUTION_FILE_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class AirdropError(BaseModel):
    """
    Base error model for structured error communication.

    Used when an error has to cross a boundary (HTTP response, CLI JSON
    output) without raising.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_PROOF],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "AirdropException":
        """Convert this error model to a raised exception."""
        exc_type = _EXCEPTIONS_BY_CODE.get(self.code)
        if exc_type is not None:
            exc = exc_type.__new__(exc_type)
            AirdropException.__init__(
                exc,
                message=self.message,
                code=self.code,
                details=self.details,
                retryable=self.retryable,
            )
            return exc
        return AirdropException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class AirdropException(Exception):
    """
    Base exception for all airdrop errors.

    Carries structured error information and can be converted to/from
    AirdropError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "AIRDROP_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> AirdropError:
        """Convert this exception to an AirdropError model."""
        return AirdropError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class TransferFailedException(AirdropException):
    """The Token Ledger rejected a transfer."""

    def __init__(
        self,
        message: str = "Token transfer failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.TRANSFER_FAILED,
            details=details,
        )


class InvalidProofException(AirdropException):
    """Merkle proof did not validate against the stored root."""

    def __init__(
        self,
        message: str = "Merkle proof did not validate against the stored root",
        leaf_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_index is not None:
            full_details["leaf_index"] = leaf_index
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_PROOF,
            details=full_details,
        )


class AlreadyClaimedException(AirdropException):
    """Recipient has already claimed their allocation."""

    def __init__(
        self,
        identity: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["identity"] = identity
        super().__init__(
            message=f"{identity} has already claimed",
            code=ErrorCodes.ALREADY_CLAIMED,
            details=full_details,
        )


class AmountCannotBeZeroException(AirdropException):
    """Cannot fund with an amount of zero."""

    def __init__(self, message: str = "Amount cannot be zero") -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.AMOUNT_CANNOT_BE_ZERO,
        )


class UnauthorizedException(AirdropException):
    """Caller is not the campaign owner."""

    def __init__(
        self,
        caller: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["caller"] = caller
        super().__init__(
            message=f"{caller} is not the campaign owner",
            code=ErrorCodes.UNAUTHORIZED,
            details=full_details,
        )


class ClaimPeriodOverException(AirdropException):
    """Claiming is no longer allowed because the campaign ended."""

    def __init__(
        self,
        campaign_end_time: int | None = None,
        now: int | None = None,
    ) -> None:
        super().__init__(
            message="Claim period is over",
            code=ErrorCodes.CLAIM_PERIOD_OVER,
            details={"campaign_end_time": campaign_end_time, "now": now},
        )


class ClaimPeriodActiveException(AirdropException):
    """The claim window is still open, so sweeping is not allowed."""

    def __init__(
        self,
        campaign_end_time: int | None = None,
        now: int | None = None,
    ) -> None:
        super().__init__(
            message="Claim period is still active",
            code=ErrorCodes.CLAIM_PERIOD_ACTIVE,
            details={"campaign_end_time": campaign_end_time, "now": now},
        )


class CampaignConfigurationException(AirdropException):
    """Raised when a campaign cannot be constructed. Fatal, never retried."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CAMPAIGN_CONFIGURATION_ERROR,
            details=details,
        )


class SchemaValidationException(AirdropException):
    """Exception raised when an input value is malformed."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.SCHEMA_VALIDATION_ERROR,
            details=full_details,
        )


class CampaignNotFoundException(AirdropException):
    """No campaign is registered under the requested id."""

    def __init__(self, campaign_id: str) -> None:
        super().__init__(
            message=f"Campaign not found: {campaign_id}",
            code=ErrorCodes.CAMPAIGN_NOT_FOUND,
            details={"campaign_id": campaign_id},
        )


class DistributionFileException(AirdropException):
    """A distribution file could not be read or parsed."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.DISTRIBUTION_FILE_ERROR,
            details=details,
        )


_EXCEPTIONS_BY_CODE: dict[str, type[AirdropException]] = {
    ErrorCodes.TRANSFER_FAILED: TransferFailedException,
    ErrorCodes.INVALID_PROOF: InvalidProofException,
    ErrorCodes.ALREADY_CLAIMED: AlreadyClaimedException,
    ErrorCodes.AMOUNT_CANNOT_BE_ZERO: AmountCannotBeZeroException,
    ErrorCodes.UNAUTHORIZED: UnauthorizedException,
    ErrorCodes.CLAIM_PERIOD_OVER: ClaimPeriodOverException,
    ErrorCodes.CLAIM_PERIOD_ACTIVE: ClaimPeriodActiveException,
    ErrorCodes.CAMPAIGN_CONFIGURATION_ERROR: CampaignConfigurationException,
    ErrorCodes.SCHEMA_VALIDATION_ERROR: SchemaValidationException,
    ErrorCodes.CAMPAIGN_NOT_FOUND: CampaignNotFoundException,
    ErrorCodes.DISTRIBUTION_FILE_ERROR: DistributionFileException,
}
