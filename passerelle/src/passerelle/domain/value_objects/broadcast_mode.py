"""
BroadcastMode value object - how long the node waits before answering.
"""

from enum import Enum


class BroadcastMode(str, Enum):
    """Transaction broadcast modes."""

    ASYNC = "async"  # Return immediately
    SYNC = "sync"  # Wait for CheckTx
    BLOCK = "block"  # Wait for inclusion in a block

    @property
    def proto_name(self) -> str:
        """Mode name expected by the protobuf REST endpoint."""
        return f"BROADCAST_MODE_{self.name}"

    @staticmethod
    def proto_name_for(mode: str) -> str:
        """
        Map a raw mode string to its protobuf name.

        Unknown modes map to BROADCAST_MODE_UNSPECIFIED.
        """
        try:
            return BroadcastMode(mode).proto_name
        except ValueError:
            return "BROADCAST_MODE_UNSPECIFIED"
