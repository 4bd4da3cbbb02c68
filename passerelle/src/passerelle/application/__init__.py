"""
Application layer - connection broker and built-in wallet methods.
"""

from passerelle.application.connection_broker import ConnectionBroker
from passerelle.application.wallet_methods import (
    EXTENSION_METHOD_ID,
    REMOTE_METHOD_ID,
    extension_method,
    remote_method,
)

__all__ = [
    "ConnectionBroker",
    "EXTENSION_METHOD_ID",
    "REMOTE_METHOD_ID",
    "extension_method",
    "remote_method",
]
