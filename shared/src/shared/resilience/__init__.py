"""
Resilience patterns for async components.

- Timeout Protection: Prevents hanging operations
"""

from shared.resilience.timeout import TimeoutError, run_with_timeout

__all__ = [
    "TimeoutError",
    "run_with_timeout",
]
