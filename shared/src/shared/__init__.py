"""
Shared utilities for Passerelle components.

Logging (SystemReporter + emoji registry) and async resilience helpers.
"""

from shared.reporter import SystemReporter
from shared.resilience import TimeoutError, run_with_timeout

__all__ = [
    "SystemReporter",
    "TimeoutError",
    "run_with_timeout",
]
