"""
WalletHandle - capability returned by a successful connection request.

Tagged union over ExtensionWallet and RemoteWallet. The broker never
inspects a handle; application code calls the signing surface below.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Iterable, Union


class WalletKind(str, Enum):
    """Wallet handle variants."""

    EXTENSION = "extension"
    REMOTE = "remote"


class WalletHandle(ABC):
    """Abstract wallet handle exposing the signing operations in use."""

    kind: WalletKind

    @abstractmethod
    async def enable(self, chain_ids: Union[str, Iterable[str]]) -> None:
        """Ask the wallet to grant access to the given chains."""

    @abstractmethod
    async def get_key(self, chain_id: str) -> Dict[str, Any]:
        """Get account key info (name, pubkey, bech32 address) for a chain."""

    @abstractmethod
    async def sign_amino(
        self, chain_id: str, signer: str, sign_doc: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Sign an amino StdSignDoc, returning {signed, signature}."""

    @abstractmethod
    async def send_tx(self, chain_id: str, tx: Any, mode: str) -> bytes:
        """Broadcast a signed transaction, returning its hash bytes."""


def normalize_chain_ids(chain_ids: Union[str, Iterable[str]]) -> list:
    """Accept a single chain id or an iterable of them."""
    if isinstance(chain_ids, str):
        return [chain_ids]
    return list(chain_ids)
