"""
Transaction broadcast infrastructure.
"""

from passerelle.infrastructure.broadcast.tx_broadcaster import TxBroadcaster

__all__ = ["TxBroadcaster"]
