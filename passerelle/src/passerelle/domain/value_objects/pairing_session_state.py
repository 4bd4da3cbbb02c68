"""
PairingSessionState value object - snapshot of the remote pairing lifecycle.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class PairingStatus(str, Enum):
    """Remote pairing lifecycle."""

    ABSENT = "absent"
    URI_ISSUED = "uri_issued"
    CONNECTED = "connected"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class PairingSessionState:
    """
    Immutable snapshot of a pairing session.

    Attributes:
        status: Lifecycle status
        uri: Pairing URI while issued and unaccepted
        connector_id: id() of the backing connector, if any
        connected: Whether the connector reports an active session
    """

    status: PairingStatus = PairingStatus.ABSENT
    uri: Optional[str] = None
    connector_id: Optional[int] = None
    connected: bool = False

    @property
    def has_uri(self) -> bool:
        """Check if a pairing URI is currently on display."""
        return bool(self.uri)

    def with_uri(self, uri: str) -> "PairingSessionState":
        return replace(self, status=PairingStatus.URI_ISSUED, uri=uri)

    def as_connected(self) -> "PairingSessionState":
        return replace(self, status=PairingStatus.CONNECTED, uri=None, connected=True)

    def as_cancelled(self) -> "PairingSessionState":
        return PairingSessionState(status=PairingStatus.CANCELLED)

    def as_failed(self) -> "PairingSessionState":
        return PairingSessionState(status=PairingStatus.FAILED)
