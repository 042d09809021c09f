"""
Module 01 - Error Taxonomy Unit Tests
Tests for core/schemas/errors.py
"""
import pytest

from core.schemas.errors import (
    AirdropError,
    AirdropException,
    AlreadyClaimedException,
    AmountCannotBeZeroException,
    CampaignNotFoundException,
    ClaimPeriodActiveException,
    ClaimPeriodOverException,
    ErrorCodes,
    InvalidProofException,
    TransferFailedException,
    UnauthorizedException,
)

from fixtures import ALICE


class TestExceptionCodes:

    @pytest.mark.parametrize("exc, code", [
        (TransferFailedException(), ErrorCodes.TRANSFER_FAILED),
        (InvalidProofException(), ErrorCodes.INVALID_PROOF),
        (AlreadyClaimedException(ALICE), ErrorCodes.ALREADY_CLAIMED),
        (AmountCannotBeZeroException(), ErrorCodes.AMOUNT_CANNOT_BE_ZERO),
        (UnauthorizedException(ALICE), ErrorCodes.UNAUTHORIZED),
        (ClaimPeriodOverException(10, 11), ErrorCodes.CLAIM_PERIOD_OVER),
        (ClaimPeriodActiveException(10, 9), ErrorCodes.CLAIM_PERIOD_ACTIVE),
    ])
    def test_operation_errors(self, exc, code):
        assert isinstance(exc, AirdropException)
        assert exc.code == code
        assert exc.retryable is False

    def test_details(self):
        assert InvalidProofException(leaf_index=3).details == {"leaf_index": 3}
        assert AlreadyClaimedException(ALICE).details["identity"] == ALICE
        assert ClaimPeriodOverException(10, 11).details == {"campaign_end_time": 10, "now": 11}


class TestErrorModel:

    def test_to_error_model(self):
        model = UnauthorizedException(ALICE).to_error_model()
        assert isinstance(model, AirdropError)
        assert model.code == ErrorCodes.UNAUTHORIZED
        assert model.details["caller"] == ALICE

    def test_model_back_to_typed_exception(self):
        original = CampaignNotFoundException("cmp_x")
        restored = original.to_error_model().to_exception()
        assert type(restored) is CampaignNotFoundException
        assert restored.message == original.message
        assert restored.details == original.details

    def test_unknown_code_gives_base_exception(self):
        restored = AirdropError(code="SOMETHING_ELSE", message="?").to_exception()
        assert type(restored) is AirdropException
        assert restored.code == "SOMETHING_ELSE"
