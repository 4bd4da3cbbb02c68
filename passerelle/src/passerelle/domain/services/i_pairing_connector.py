"""
Pairing connector service interfaces.

The connector is the relay pairing protocol client (relay transport,
encryption). Passerelle only relies on the narrow surface below.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

# (error, payload) -> None
ConnectCallback = Callable[[Optional[Exception], Optional[Dict[str, Any]]], None]

# Protocol-supplied hook abandoning an issued, unaccepted URI
CancelHook = Callable[[], None]


class IPairingUriModal(ABC):
    """Hooks the connector calls to surface or hide a pairing URI."""

    @abstractmethod
    def open(self, uri: str, cancel_hook: Optional[CancelHook] = None) -> None:
        """
        Display a freshly issued pairing URI.

        Args:
            uri: Pairing URI to show (QR code or deep link)
            cancel_hook: Protocol hook to call if the user gives up
        """

    @abstractmethod
    def close(self) -> None:
        """Hide the pairing URI."""


@dataclass
class PairingConnectorOptions:
    """
    Options used to build a pairing connector.

    Attributes:
        relay_url: Relay (bridge) endpoint
        signing_methods: Allow-listed custom signing method names
        uri_modal: Hooks for surfacing the pairing URI
    """

    relay_url: str
    uri_modal: IPairingUriModal
    signing_methods: List[str] = field(default_factory=list)


class IPairingConnector(ABC):
    """
    Abstract pairing protocol client.

    Shaped after the WalletConnect v1 connector: a session is created
    asynchronously, the URI is surfaced through the modal hooks and a
    "connect" event reports acceptance or failure.
    """

    @property
    @abstractmethod
    def connected(self) -> bool:
        """Check if a session with the peer is established."""

    @abstractmethod
    def create_session(self) -> None:
        """Start a new session; issues a URI through the modal hooks."""

    @abstractmethod
    def on(self, event: str, callback: ConnectCallback) -> None:
        """
        Register a protocol event callback.

        Args:
            event: Event name ("connect", "disconnect", ...)
            callback: Called with (error, payload)
        """

    @abstractmethod
    async def send_custom_request(self, request: Dict[str, Any]) -> Any:
        """
        Send a custom JSON-RPC request to the paired wallet.

        Args:
            request: {"id": ..., "jsonrpc": "2.0", "method": ..., "params": [...]}

        Returns:
            Result returned by the wallet
        """

    @abstractmethod
    def kill_session(self) -> None:
        """Terminate the current session."""


ConnectorFactory = Callable[[PairingConnectorOptions], IPairingConnector]
