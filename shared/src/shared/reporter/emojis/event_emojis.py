"""
Event channel emoji definitions.

Usage:
    >>> from shared.reporter.emojis.event_emojis import EventEmoji
    >>> print(f"{EventEmoji.EMIT} Event emitted")
    ✨ Event emitted
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class EventEmoji(ComponentEmoji):
    """
    Event channel operations.

    Categories:
        - Publishing: Emit
        - Subscription: Subscribe, unsubscribe
        - Handling: Handler execution
    """

    EMIT = "✨"  # Event emitted
    SUBSCRIBE = "📡"  # Subscription created
    UNSUBSCRIBE = "📭"  # Subscription removed
    HANDLER = "🎯"  # Event handler
    HANDLER_ERROR = "❌"  # Handler error
