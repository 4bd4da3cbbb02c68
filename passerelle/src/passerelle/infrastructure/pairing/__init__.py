"""
Remote pairing infrastructure.
"""

from passerelle.infrastructure.pairing.remote_session_client import (
    RemoteSessionClient,
)

__all__ = ["RemoteSessionClient"]
