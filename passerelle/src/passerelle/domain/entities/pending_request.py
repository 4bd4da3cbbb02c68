"""
PendingRequest entity - one in-flight connection request.
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Tuple
from uuid import UUID, uuid4

from passerelle.domain.exceptions import InvalidStateTransitionError
from passerelle.domain.value_objects import RequestState

Subscription = Tuple[str, Callable[[Any], None]]


class PendingRequest:
    """
    In-flight ConnectionBroker.request() call.

    Tracks the request state, the future the selection prompt settles
    and every event channel subscription registered on its behalf.

    Attributes:
        id: Unique request identifier (scopes all its topics)
        state: Current RequestState
        subscriptions: (topic, handler) pairs still registered
        owns_pairing: Whether this request started the pairing session
        created_at: Creation timestamp
    """

    def __init__(self, request_id: UUID = None):
        self.id: UUID = request_id or uuid4()
        self.state: RequestState = RequestState.IDLE
        self.subscriptions: List[Subscription] = []
        self.owns_pairing: bool = False
        self.released: bool = False
        self.created_at: datetime = datetime.now(timezone.utc)
        self._selection: Optional[asyncio.Future] = None

    @property
    def selection(self) -> asyncio.Future:
        """Future settled by the selection prompt (pick or dismissal)."""
        if self._selection is None:
            self._selection = asyncio.get_running_loop().create_future()
        return self._selection

    @property
    def is_terminal(self) -> bool:
        return self.state.is_terminal

    def transition(self, target: RequestState) -> RequestState:
        """
        Move to target state.

        Returns:
            Previous state

        Raises:
            InvalidStateTransitionError: If the move is illegal
        """
        if not self.state.can_transition_to(target):
            raise InvalidStateTransitionError(self.state.value, target.value)
        previous, self.state = self.state, target
        return previous

    def track(self, topic: str, handler: Callable[[Any], None]) -> None:
        """Record a subscription made on behalf of this request."""
        self.subscriptions.append((topic, handler))

    def drain_subscriptions(self) -> List[Subscription]:
        """
        Hand over all tracked subscriptions, exactly once.

        Returns an empty list after the first call.
        """
        if self.released:
            return []
        self.released = True
        drained, self.subscriptions = self.subscriptions, []
        return drained

    def settle_selection(self, result: Any = None, error: Exception = None) -> bool:
        """
        Settle the selection future if still open.

        Returns:
            True if this call settled it
        """
        future = self.selection
        if future.done():
            return False
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, PendingRequest):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"PendingRequest(id={self.id}, state={self.state.value})"
