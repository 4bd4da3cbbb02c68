"""
Transaction broadcast exceptions.
"""

from typing import Optional


class BroadcastError(Exception):
    """Chain rejected the transaction or the REST call failed."""

    def __init__(
        self,
        raw_log: str,
        code: Optional[int] = None,
        details: Optional[dict] = None,
    ):
        """
        Initialize BroadcastError.

        Args:
            raw_log: Log text returned alongside the non-zero code
            code: Response code (None for transport failures)
            details: Extra context (chain id, endpoint, status)
        """
        self.raw_log = raw_log
        self.code = code
        self.details = details or {}
        super().__init__(raw_log)


class ChainNotConfiguredError(BroadcastError):
    """No REST endpoint configured for the chain."""

    def __init__(self, chain_id: str):
        super().__init__(
            f"No REST endpoint configured for chain '{chain_id}'",
            details={"chain_id": chain_id},
        )
        self.chain_id = chain_id
