"""
Module 01 - Schemas
File: __init__.py

Purpose: Export the public API for the schemas module: error taxonomy,
primitive value normalisation and campaign views.
"""

# Error models and exceptions
from .errors import (
    AirdropError,
    AirdropException,
    AlreadyClaimedException,
    AmountCannotBeZeroException,
    CampaignConfigurationException,
    CampaignNotFoundException,
    ClaimPeriodActiveException,
    ClaimPeriodOverException,
    DistributionFileException,
    ErrorCodes,
    InvalidProofException,
    SchemaValidationException,
    TransferFailedException,
    UnauthorizedException,
)

# Primitive values
from .types import (
    AMOUNT_BYTE_WIDTH,
    UINT256_MAX,
    IdentityLike,
    amount_to_bytes,
    identity_bytes,
    normalize_identity,
    validate_amount,
)

# Campaign views
from .campaign import CampaignPhase, CampaignSnapshot

__all__ = [
    "AirdropError",
    "AirdropException",
    "AlreadyClaimedException",
    "AmountCannotBeZeroException",
    "CampaignConfigurationException",
    "CampaignNotFoundException",
    "ClaimPeriodActiveException",
    "ClaimPeriodOverException",
    "DistributionFileException",
    "ErrorCodes",
    "InvalidProofException",
    "SchemaValidationException",
    "TransferFailedException",
    "UnauthorizedException",
    "AMOUNT_BYTE_WIDTH",
    "UINT256_MAX",
    "IdentityLike",
    "amount_to_bytes",
    "identity_bytes",
    "normalize_identity",
    "validate_amount",
    "CampaignPhase",
    "CampaignSnapshot",
]
