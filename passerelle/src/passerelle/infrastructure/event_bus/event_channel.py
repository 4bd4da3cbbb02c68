"""
In-process event channel with production logging.

Decouples the broker's async logic from UI callbacks. The channel does
no per-request bookkeeping: whoever subscribes is responsible for
unsubscribing.
"""

from typing import Any, Callable, Dict, List, Optional

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

Handler = Callable[[Any], None]


class EventChannel:
    """Named-topic publish/subscribe bus for a single event loop."""

    def __init__(self, reporter: Optional[SystemReporter] = None):
        self.topics: Dict[str, List[Handler]] = {}
        self.reporter = reporter

    def on(self, topic: str, handler: Handler) -> None:
        """Subscribe handler to topic."""
        if not topic:
            raise ValueError("Topic cannot be empty")
        if not callable(handler):
            raise ValueError("Handler must be callable")

        self.topics.setdefault(topic, []).append(handler)

        if self.reporter:
            self.reporter.debug(
                f"{Emoji.EVENT.SUBSCRIBE} Subscribed: topic={topic}, "
                f"topic_subs={len(self.topics[topic])}, "
                f"total={self.subscriber_count()}",
                context="EventChannel",
            )

    def off(self, topic: str, handler: Handler) -> bool:
        """
        Unsubscribe handler from topic.

        Returns:
            True if the handler was subscribed
        """
        handlers = self.topics.get(topic)
        if not handlers or handler not in handlers:
            return False

        handlers.remove(handler)
        if not handlers:
            del self.topics[topic]

        if self.reporter:
            self.reporter.debug(
                f"{Emoji.EVENT.UNSUBSCRIBE} Unsubscribed: topic={topic}, "
                f"total={self.subscriber_count()}",
                context="EventChannel",
            )
        return True

    def emit(self, topic: str, payload: Any = None) -> int:
        """
        Invoke every handler subscribed to topic.

        Handlers run synchronously in registration order over a snapshot,
        so a handler may unsubscribe itself or its siblings. A handler
        exception is logged and re-raised to the emitter.

        Returns:
            Number of handlers invoked
        """
        handlers = list(self.topics.get(topic, []))

        if self.reporter:
            self.reporter.debug(
                f"{Emoji.EVENT.EMIT} Emit: topic={topic}, handlers={len(handlers)}",
                context="EventChannel",
            )

        invoked = 0
        for handler in handlers:
            # Skip handlers removed by an earlier handler in this emission
            if handler not in self.topics.get(topic, []):
                continue
            try:
                handler(payload)
            except Exception as e:
                if self.reporter:
                    self.reporter.error(
                        f"{Emoji.EVENT.HANDLER_ERROR} Handler failed: "
                        f"topic={topic}, error={type(e).__name__}: {e}",
                        context="EventChannel",
                    )
                raise
            invoked += 1

        return invoked

    def subscriber_count(self, topic: Optional[str] = None) -> int:
        """Get handler count for topic, or across all topics."""
        if topic is not None:
            return len(self.topics.get(topic, []))
        return sum(len(handlers) for handlers in self.topics.values())

    def get_topics(self, prefix: str = "") -> List[str]:
        """Get subscribed topic names, optionally filtered by prefix."""
        return [topic for topic in self.topics if topic.startswith(prefix)]

    def has_subscribers(self, topic: str) -> bool:
        return topic in self.topics

    def clear(self) -> None:
        """Remove every subscription."""
        removed = self.subscriber_count()
        self.topics.clear()

        if self.reporter and removed:
            self.reporter.info(
                f"{Emoji.SYSTEM.CLEANUP} Event channel cleared: removed={removed}",
                context="EventChannel",
                verbose_level=2,
            )
