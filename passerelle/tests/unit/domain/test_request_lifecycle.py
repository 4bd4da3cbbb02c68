"""
Unit tests for request value objects and the PendingRequest entity.
"""

from uuid import uuid4

import pytest

from passerelle.domain.entities import PendingRequest
from passerelle.domain.exceptions import (
    InvalidStateTransitionError,
    UserCancelledError,
)
from passerelle.domain.value_objects import RequestState, RequestTopic, request_topic


class TestRequestTopic:
    """Request-scoped topic names."""

    def test_topics_are_scoped_by_request_id(self):
        first, second = uuid4(), uuid4()

        assert RequestTopic.select(first, "extension").value == (
            f"request.{first}.select.extension"
        )
        assert RequestTopic.dismiss(first).value != RequestTopic.dismiss(second).value
        assert str(RequestTopic.pairing_dismiss(first)) == (
            f"request.{first}.pairing_dismiss"
        )

    def test_request_topic_helper(self):
        rid = uuid4()

        assert request_topic(rid, "dismiss") == RequestTopic.dismiss(rid).value

    def test_empty_names_rejected(self):
        with pytest.raises(ValueError):
            RequestTopic(uuid4(), "")
        with pytest.raises(ValueError):
            RequestTopic.select(uuid4(), "")


class TestRequestState:
    """Request state machine."""

    def test_terminal_states(self):
        assert RequestState.RESOLVED.is_terminal
        assert RequestState.REJECTED.is_terminal
        assert not RequestState.AWAITING_PAIRING.is_terminal

    @pytest.mark.parametrize(
        "current,target",
        [
            (RequestState.IDLE, RequestState.AWAITING_SELECTION),
            (RequestState.IDLE, RequestState.AWAITING_PAIRING),
            (RequestState.AWAITING_SELECTION, RequestState.RESOLVING),
            (RequestState.AWAITING_PAIRING, RequestState.RESOLVING),
            (RequestState.RESOLVING, RequestState.RESOLVED),
            (RequestState.AWAITING_SELECTION, RequestState.REJECTED),
        ],
    )
    def test_legal_transitions(self, current, target):
        assert current.can_transition_to(target)

    @pytest.mark.parametrize(
        "current,target",
        [
            (RequestState.RESOLVED, RequestState.REJECTED),
            (RequestState.REJECTED, RequestState.RESOLVED),
            (RequestState.AWAITING_PAIRING, RequestState.AWAITING_SELECTION),
            (RequestState.IDLE, RequestState.RESOLVED),
        ],
    )
    def test_illegal_transitions(self, current, target):
        assert not current.can_transition_to(target)


class TestPendingRequest:
    """PendingRequest bookkeeping."""

    def test_transition_returns_previous_state(self):
        pending = PendingRequest()

        previous = pending.transition(RequestState.AWAITING_SELECTION)

        assert previous == RequestState.IDLE
        assert pending.state == RequestState.AWAITING_SELECTION

    def test_settled_request_cannot_settle_again(self):
        pending = PendingRequest()
        pending.transition(RequestState.RESOLVING)
        pending.transition(RequestState.RESOLVED)

        with pytest.raises(InvalidStateTransitionError) as exc_info:
            pending.transition(RequestState.REJECTED)

        assert exc_info.value.current == "resolved"
        assert pending.is_terminal

    def test_drain_subscriptions_exactly_once(self):
        pending = PendingRequest()
        handler = lambda payload: None  # noqa: E731
        pending.track("request.x.dismiss", handler)

        assert pending.drain_subscriptions() == [("request.x.dismiss", handler)]
        assert pending.drain_subscriptions() == []
        assert pending.subscriptions == []

    async def test_selection_settles_once(self):
        pending = PendingRequest()

        assert pending.settle_selection("extension") is True
        assert pending.settle_selection(error=UserCancelledError()) is False
        assert await pending.selection == "extension"

    async def test_selection_error(self):
        pending = PendingRequest()
        pending.settle_selection(error=UserCancelledError("selection"))

        with pytest.raises(UserCancelledError):
            await pending.selection

    def test_identity_by_id(self):
        rid = uuid4()

        assert PendingRequest(rid) == PendingRequest(rid)
        assert len({PendingRequest(rid), PendingRequest(rid)}) == 1
