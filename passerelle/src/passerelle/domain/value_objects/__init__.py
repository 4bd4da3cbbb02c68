"""
Value objects for Passerelle domain.
"""

from passerelle.domain.value_objects.broadcast_mode import BroadcastMode
from passerelle.domain.value_objects.pairing_session_state import (
    PairingSessionState,
    PairingStatus,
)
from passerelle.domain.value_objects.request_state import RequestState
from passerelle.domain.value_objects.request_topic import RequestTopic, request_topic

__all__ = [
    "BroadcastMode",
    "PairingSessionState",
    "PairingStatus",
    "RequestState",
    "RequestTopic",
    "request_topic",
]
