"""
RequestTopic value object - event channel topic scoped to one request.
"""

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

SELECT_PREFIX = "select."
DISMISS = "dismiss"
PAIRING_DISMISS = "pairing_dismiss"


@dataclass(frozen=True)
class RequestTopic:
    """
    Topic name owned by a single pending request.

    Format: request.<request_id>.<name>

    Examples:
        - request.6f1c...e2.select.extension
        - request.6f1c...e2.dismiss
        - request.6f1c...e2.pairing_dismiss
    """

    request_id: UUID
    name: str

    PREFIX: ClassVar[str] = "request"

    def __post_init__(self):
        """Validate topic name on creation."""
        if not self.name:
            raise ValueError("Topic name cannot be empty")

    @classmethod
    def select(cls, request_id: UUID, method_id: str) -> "RequestTopic":
        if not method_id:
            raise ValueError("Method id cannot be empty")
        return cls(request_id, f"{SELECT_PREFIX}{method_id}")

    @classmethod
    def dismiss(cls, request_id: UUID) -> "RequestTopic":
        return cls(request_id, DISMISS)

    @classmethod
    def pairing_dismiss(cls, request_id: UUID) -> "RequestTopic":
        return cls(request_id, PAIRING_DISMISS)

    @property
    def value(self) -> str:
        """Get topic string."""
        return f"{self.PREFIX}.{self.request_id}.{self.name}"

    def __str__(self) -> str:
        return self.value


def request_topic(request_id: UUID, name: str) -> str:
    """Build the topic string for a request-scoped event."""
    return RequestTopic(request_id, name).value
