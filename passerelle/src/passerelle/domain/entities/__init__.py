"""
Domain entities for Passerelle.
"""

from passerelle.domain.entities.cached_session import CachedSession
from passerelle.domain.entities.pending_request import PendingRequest
from passerelle.domain.entities.wallet_method import Resolver, WalletMethodDescriptor

__all__ = [
    "CachedSession",
    "PendingRequest",
    "Resolver",
    "WalletMethodDescriptor",
]
