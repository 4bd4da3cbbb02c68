"""
Wallet connection exceptions.

Every failed ConnectionBroker.request() surfaces as one of these, so
callers can tell "cancelled" apart from "extension not installed".
"""

from typing import Optional


class WalletConnectionError(Exception):
    """Base exception for wallet connection requests."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UserCancelledError(WalletConnectionError):
    """User dismissed the selection or pairing prompt."""

    def __init__(self, stage: str = "selection"):
        """
        Initialize UserCancelledError.

        Args:
            stage: Prompt that was dismissed ("selection" or "pairing")
        """
        super().__init__(
            f"Wallet connection cancelled during {stage}", {"stage": stage}
        )
        self.stage = stage


class ExtensionNotFoundError(WalletConnectionError):
    """No injected wallet extension was detected."""

    def __init__(self, message: str = "Wallet extension not installed"):
        super().__init__(message)


class ConnectionFailedError(WalletConnectionError):
    """Remote pairing handshake failed."""

    def __init__(self, cause: object):
        """
        Initialize ConnectionFailedError.

        Args:
            cause: Error reported by the pairing protocol
        """
        super().__init__(f"Pairing failed: {cause}", {"cause": repr(cause)})
        self.cause = cause
        if isinstance(cause, BaseException):
            self.__cause__ = cause


class RequestTimeoutError(WalletConnectionError):
    """Connection request did not settle within the configured timeout."""

    def __init__(self, timeout: float):
        super().__init__(
            f"Wallet connection not established within {timeout} seconds",
            {"timeout": timeout},
        )
        self.timeout = timeout


class UnknownWalletMethodError(WalletConnectionError):
    """Selected method id does not match any configured descriptor."""

    def __init__(self, method_id: str):
        super().__init__(
            f"Unknown wallet method: {method_id}", {"method_id": method_id}
        )
        self.method_id = method_id


class InvalidStateTransitionError(Exception):
    """Request state machine was driven through an illegal transition."""

    def __init__(self, current: str, target: str):
        super().__init__(f"Illegal request transition: {current} -> {target}")
        self.current = current
        self.target = target
