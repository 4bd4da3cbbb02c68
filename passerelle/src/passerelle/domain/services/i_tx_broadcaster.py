"""
Transaction broadcaster service interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Union

# Signed protobuf bytes or legacy amino StdTx object
SignedTx = Union[bytes, bytearray, Dict[str, Any]]


class ITxBroadcaster(ABC):
    """Abstract interface for posting signed transactions to a chain."""

    @abstractmethod
    async def broadcast(self, chain_id: str, tx: SignedTx, mode: str) -> bytes:
        """
        Broadcast a signed transaction.

        Args:
            chain_id: Target chain id
            tx: Signed transaction (bytes or StdTx dict)
            mode: "async", "sync" or "block"

        Returns:
            Transaction hash bytes

        Raises:
            BroadcastError: If the chain rejects the transaction
        """
