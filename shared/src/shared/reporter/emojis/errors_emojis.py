"""
Error and warning level emoji definitions.

Usage:
    >>> from shared.reporter.emojis.errors_emojis import ErrorEmoji
    >>> print(f"{ErrorEmoji.ERROR} Pairing failed")
    ❌ Pairing failed
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class ErrorEmoji(ComponentEmoji):
    """
    Error levels and warning indicators.

    Categories:
        - Severity: Critical, error, warning
        - Recovery: Timeout, cancel
        - Exceptions: Not found, exception
    """

    # ============================================================
    # Severity Levels
    # ============================================================

    CRITICAL = "🔴"  # Critical error
    ERROR = "❌"  # Operation failed
    WARNING = "⚠️"  # Potential issue

    # ============================================================
    # Recovery Operations
    # ============================================================

    TIMEOUT = "⏱️"  # Operation timeout
    CANCELLED = "✖️"  # Cancelled by user

    # ============================================================
    # Exceptions
    # ============================================================

    EXCEPTION = "💥"  # Exception thrown
    NOT_FOUND = "🔍"  # Resource not found
