"""
WalletMethodDescriptor entity - one way of obtaining a wallet.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from passerelle.domain.services.i_pairing_connector import IPairingConnector

# Given an optional pairing connector, produce a wallet handle
Resolver = Callable[[Optional[IPairingConnector]], Awaitable[Any]]


@dataclass(frozen=True)
class WalletMethodDescriptor:
    """
    Immutable description of a wallet connection method.

    Attributes:
        id: Unique method id ("extension", "walletconnect", ...)
        display_name: Name shown in the selection prompt
        description: One-line description shown under the name
        icon_ref: Icon URL or asset reference
        resolver: Async capability producing the wallet handle
    """

    id: str
    display_name: str
    description: str
    icon_ref: str
    resolver: Resolver

    def __post_init__(self):
        """Validate descriptor on creation."""
        if not self.id:
            raise ValueError("Wallet method id cannot be empty")
        if not callable(self.resolver):
            raise ValueError(f"Resolver for '{self.id}' must be callable")

    def is_remote(self, remote_prefix: str) -> bool:
        """Check if this method belongs to the remote pairing family."""
        return self.id.startswith(remote_prefix)

    def __repr__(self) -> str:
        return f"WalletMethodDescriptor(id={self.id!r}, name={self.display_name!r})"
