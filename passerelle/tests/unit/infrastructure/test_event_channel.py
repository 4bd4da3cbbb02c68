"""
Unit tests for EventChannel.
"""

import pytest

from passerelle.infrastructure.event_bus import EventChannel


class TestEventChannel:
    """Subscribe, emit and unsubscribe semantics."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _recorder(self, sink: list, label: str):
        def handler(payload):
            sink.append((label, payload))

        return handler

    # ================================================================
    # Test Methods
    # ================================================================

    def test_emit_invokes_handlers_in_registration_order(self):
        channel = EventChannel()
        calls = []
        channel.on("topic", self._recorder(calls, "a"))
        channel.on("topic", self._recorder(calls, "b"))

        invoked = channel.emit("topic", 42)

        assert invoked == 2
        assert calls == [("a", 42), ("b", 42)]

    def test_emit_without_subscribers_is_noop(self):
        channel = EventChannel()

        assert channel.emit("nobody") == 0

    def test_off_removes_handler_and_prunes_topic(self):
        channel = EventChannel()
        calls = []
        handler = self._recorder(calls, "a")
        channel.on("topic", handler)

        assert channel.off("topic", handler) is True
        assert channel.off("topic", handler) is False
        assert not channel.has_subscribers("topic")

        channel.emit("topic")
        assert calls == []

    def test_handler_may_remove_sibling_during_emit(self):
        """Test a handler unsubscribing a later sibling skips it."""
        channel = EventChannel()
        calls = []
        second = self._recorder(calls, "second")

        def first(payload):
            calls.append(("first", payload))
            channel.off("topic", second)

        channel.on("topic", first)
        channel.on("topic", second)

        invoked = channel.emit("topic", None)

        assert invoked == 1
        assert calls == [("first", None)]

    def test_handler_may_remove_itself(self):
        channel = EventChannel()
        calls = []

        def once(payload):
            calls.append(payload)
            channel.off("topic", once)

        channel.on("topic", once)
        channel.emit("topic", 1)
        channel.emit("topic", 2)

        assert calls == [1]

    def test_handler_exception_propagates_to_emitter(self):
        channel = EventChannel()

        def boom(_payload):
            raise RuntimeError("handler failed")

        channel.on("topic", boom)

        with pytest.raises(RuntimeError, match="handler failed"):
            channel.emit("topic")

    def test_subscriber_count_and_topics(self):
        channel = EventChannel()
        channel.on("request.1.select.extension", lambda p: None)
        channel.on("request.1.dismiss", lambda p: None)
        channel.on("other", lambda p: None)

        assert channel.subscriber_count() == 3
        assert channel.subscriber_count("other") == 1
        assert sorted(channel.get_topics("request.1")) == [
            "request.1.dismiss",
            "request.1.select.extension",
        ]

        channel.clear()
        assert channel.subscriber_count() == 0

    def test_invalid_subscription_rejected(self):
        channel = EventChannel()

        with pytest.raises(ValueError):
            channel.on("", lambda p: None)
        with pytest.raises(ValueError):
            channel.on("topic", "not callable")
