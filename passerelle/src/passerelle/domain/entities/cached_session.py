"""
CachedSession entity - the single established wallet session.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class CachedSession:
    """
    Wallet handle cached after a successful resolution.

    Attributes:
        handle: Wallet handle returned by the resolver
        method_id: Id of the method that produced it
        established_at: Resolution timestamp (UTC)
    """

    handle: Any
    method_id: str
    established_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), compare=False
    )
