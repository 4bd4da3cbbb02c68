"""
Passerelle - wallet connection broker for Cosmos dApps.

Obtains a wallet handle from a browser extension or a remote wallet
paired over a relay, and broadcasts signed transactions over REST.
"""

from passerelle.application import (
    ConnectionBroker,
    extension_method,
    remote_method,
)
from passerelle.di import DIContainer, configure_container, get_container
from passerelle.domain.exceptions import (
    BroadcastError,
    ConnectionFailedError,
    ExtensionNotFoundError,
    RequestTimeoutError,
    UserCancelledError,
    WalletConnectionError,
)

__version__ = "0.1.0"

__all__ = [
    "ConnectionBroker",
    "extension_method",
    "remote_method",
    "DIContainer",
    "configure_container",
    "get_container",
    "BroadcastError",
    "ConnectionFailedError",
    "ExtensionNotFoundError",
    "RequestTimeoutError",
    "UserCancelledError",
    "WalletConnectionError",
]
