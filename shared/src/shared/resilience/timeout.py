"""
Timeout helpers for asyncio operations.

Wraps asyncio.wait_for with an operation name so callers get a
descriptive TimeoutError instead of a bare asyncio one.
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

T = TypeVar("T")


class TimeoutError(Exception):
    """Raised when operation exceeds timeout."""

    def __init__(self, operation: str, timeout: float):
        """
        Initialize timeout error.

        Args:
            operation: Name of operation that timed out
            timeout: Timeout duration in seconds
        """
        self.operation = operation
        self.timeout = timeout
        super().__init__(
            f"Operation '{operation}' exceeded timeout of {timeout} seconds"
        )


async def run_with_timeout(
    awaitable: Awaitable[T],
    seconds: Optional[float],
    operation: str = "operation",
) -> T:
    """
    Await with an optional timeout.

    The awaited task is cancelled when the timeout fires, so its own
    cleanup (finally blocks) runs before TimeoutError propagates.

    Args:
        awaitable: Coroutine or future to await
        seconds: Timeout in seconds, None disables the limit
        operation: Operation name for error messages

    Returns:
        Result of the awaitable

    Raises:
        TimeoutError: If operation exceeds timeout
    """
    if seconds is None:
        return await awaitable

    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError as e:
        raise TimeoutError(operation, seconds) from e
