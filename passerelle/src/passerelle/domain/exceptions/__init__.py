"""
Domain exceptions for Passerelle.
"""

from passerelle.domain.exceptions.broadcast_exceptions import (
    BroadcastError,
    ChainNotConfiguredError,
)
from passerelle.domain.exceptions.connection_exceptions import (
    ConnectionFailedError,
    ExtensionNotFoundError,
    InvalidStateTransitionError,
    RequestTimeoutError,
    UnknownWalletMethodError,
    UserCancelledError,
    WalletConnectionError,
)

__all__ = [
    "WalletConnectionError",
    "UserCancelledError",
    "ExtensionNotFoundError",
    "ConnectionFailedError",
    "RequestTimeoutError",
    "UnknownWalletMethodError",
    "InvalidStateTransitionError",
    "BroadcastError",
    "ChainNotConfiguredError",
]
