"""
RequestState value object - lifecycle of one connection request.

State Machine:
    IDLE -> AWAITING_SELECTION -> RESOLVING ------------> RESOLVED
                  |                  ^                     REJECTED
                  +-> AWAITING_PAIRING

- IDLE: Request created, nothing shown yet
- AWAITING_SELECTION: Selection prompt visible, waiting for a pick
- AWAITING_PAIRING: Pairing URI issued, waiting for the peer
- RESOLVING: Resolver running
- RESOLVED / REJECTED: Terminal
"""

from enum import Enum
from typing import Dict, FrozenSet


class RequestState(str, Enum):
    """Connection request states."""

    IDLE = "idle"
    AWAITING_SELECTION = "awaiting_selection"
    AWAITING_PAIRING = "awaiting_pairing"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transition is possible."""
        return self in (RequestState.RESOLVED, RequestState.REJECTED)

    def can_transition_to(self, target: "RequestState") -> bool:
        """Check if moving to target is legal."""
        return target in _TRANSITIONS[self]


_TRANSITIONS: Dict[RequestState, FrozenSet[RequestState]] = {
    RequestState.IDLE: frozenset(
        {
            RequestState.AWAITING_SELECTION,
            RequestState.AWAITING_PAIRING,
            RequestState.RESOLVING,
            RequestState.REJECTED,
        }
    ),
    RequestState.AWAITING_SELECTION: frozenset(
        {
            RequestState.AWAITING_PAIRING,
            RequestState.RESOLVING,
            RequestState.REJECTED,
        }
    ),
    RequestState.AWAITING_PAIRING: frozenset(
        {RequestState.RESOLVING, RequestState.REJECTED}
    ),
    RequestState.RESOLVING: frozenset(
        {RequestState.RESOLVED, RequestState.REJECTED}
    ),
    RequestState.RESOLVED: frozenset(),
    RequestState.REJECTED: frozenset(),
}
