"""
Module 06 - Event Recorder Unit Tests
Tests for core/airdrop/events.py
"""
import pytest
from pydantic import ValidationError

from core.airdrop.events import (
    ClaimedEvent,
    EventRecorder,
    FundedEvent,
    SweptEvent,
    generate_event_id,
)

from fixtures import ALICE, OWNER


def claimed(campaign_id: str = "cmp_a", amount: int = 5) -> ClaimedEvent:
    return ClaimedEvent(campaign_id=campaign_id, emitted_at=1, identity=ALICE, amount=amount)


class TestEventModels:

    def test_kind_is_fixed(self):
        assert claimed().kind == "claimed"
        assert SweptEvent(campaign_id="c", emitted_at=1, owner=OWNER, amount=0).kind == "swept"

    def test_funded_requires_positive_amount(self):
        with pytest.raises(ValidationError):
            FundedEvent(campaign_id="c", emitted_at=1, funder=OWNER, amount=0)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            ClaimedEvent(campaign_id="c", emitted_at=1, identity=ALICE, amount=1, memo="x")

    def test_event_id_is_deterministic(self):
        a = generate_event_id("claimed", 0, {"amount": 1})
        b = generate_event_id("claimed", 0, {"amount": 1})
        assert a == b
        assert a.startswith("ev_claimed_")
        assert a != generate_event_id("claimed", 1, {"amount": 1})


class TestEventRecorder:

    def test_emit_stamps_sequence_and_id(self):
        recorder = EventRecorder()
        first = recorder.emit(claimed())
        second = recorder.emit(claimed())
        assert (first.sequence, second.sequence) == (0, 1)
        assert first.event_id != second.event_id
        assert len(recorder) == 2

    def test_filters(self):
        recorder = EventRecorder()
        recorder.emit(claimed("cmp_a"))
        recorder.emit(claimed("cmp_b"))
        recorder.emit(SweptEvent(campaign_id="cmp_a", emitted_at=2, owner=OWNER, amount=3))

        assert len(recorder.get_events(campaign_id="cmp_a")) == 2
        assert len(recorder.get_events(kind="claimed")) == 2
        assert len(recorder.get_events(kind="swept", campaign_id="cmp_b")) == 0

    def test_subscribers_notified(self):
        recorder = EventRecorder()
        seen = []
        recorder.subscribe(seen.append)
        event = recorder.emit(claimed())
        assert seen == [event]

        recorder.unsubscribe(seen.append)
        recorder.emit(claimed())
        assert len(seen) == 1

    def test_failing_subscriber_does_not_block_others(self):
        recorder = EventRecorder()
        seen = []

        def broken(event):
            raise RuntimeError("subscriber down")

        recorder.subscribe(broken)
        recorder.subscribe(seen.append)
        recorder.emit(claimed())
        assert len(seen) == 1
        assert len(recorder) == 1

    def test_clear(self):
        recorder = EventRecorder()
        recorder.emit(claimed())
        recorder.clear()
        assert recorder.get_events() == []
