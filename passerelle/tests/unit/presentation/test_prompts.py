"""
Unit tests for the selection and pairing prompt view models.
"""

from uuid import uuid4

import pytest

from passerelle.application import extension_method, remote_method
from passerelle.domain.exceptions import UnknownWalletMethodError
from passerelle.domain.value_objects import RequestTopic


class TestSelectionPrompt:
    """Selection prompt emits request-scoped topics."""

    def test_show_sets_owner_and_methods(self, selection_prompt, locator, broadcaster):
        rid = uuid4()
        methods = [extension_method(locator), remote_method(broadcaster)]

        selection_prompt.show(rid, methods)

        assert selection_prompt.visible
        assert selection_prompt.owner == rid
        assert [m.display_name for m in selection_prompt.methods] == [
            "Keplr Extension",
            "WalletConnect",
        ]

    def test_pick_emits_select_topic(self, selection_prompt, channel, locator):
        rid = uuid4()
        received = []
        channel.on(
            RequestTopic.select(rid, "extension").value, received.append
        )
        selection_prompt.show(rid, [extension_method(locator)])

        assert selection_prompt.on_pick("extension") is True
        assert received == ["extension"]

    def test_dismiss_emits_dismiss_topic(self, selection_prompt, channel, locator):
        rid = uuid4()
        received = []
        channel.on(RequestTopic.dismiss(rid).value, received.append)
        selection_prompt.show(rid, [extension_method(locator)])

        assert selection_prompt.on_dismiss() is True
        assert received == [None]

    def test_callbacks_ignored_when_hidden(self, selection_prompt, channel):
        assert selection_prompt.on_pick("extension") is False
        assert selection_prompt.on_dismiss() is False

    def test_unknown_pick_rejected(self, selection_prompt, locator):
        selection_prompt.show(uuid4(), [extension_method(locator)])

        with pytest.raises(UnknownWalletMethodError) as exc_info:
            selection_prompt.on_pick("ledger")

        assert exc_info.value.method_id == "ledger"

    def test_hide_only_for_owner(self, selection_prompt, locator):
        rid = uuid4()
        selection_prompt.show(rid, [extension_method(locator)])

        assert selection_prompt.hide(uuid4()) is False
        assert selection_prompt.visible

        assert selection_prompt.hide(rid) is True
        assert not selection_prompt.visible
        assert selection_prompt.owner is None

    def test_observers_notified(self, selection_prompt, locator):
        states = []
        unsubscribe = selection_prompt.subscribe(lambda p: states.append(p.visible))

        rid = uuid4()
        selection_prompt.show(rid, [extension_method(locator)])
        selection_prompt.hide(rid)
        unsubscribe()
        selection_prompt.show(rid, [extension_method(locator)])

        assert states == [True, False]


class TestPairingPrompt:
    """Pairing prompt is visible exactly while it holds a URI."""

    def test_visibility_follows_uri(self, pairing_prompt):
        assert not pairing_prompt.visible

        pairing_prompt.show("wc:abc@1")
        assert pairing_prompt.visible
        assert pairing_prompt.uri == "wc:abc@1"

        pairing_prompt.hide()
        assert not pairing_prompt.visible
        assert pairing_prompt.uri == ""

    def test_dismiss_emits_for_owner(self, pairing_prompt, channel):
        rid = uuid4()
        received = []
        channel.on(RequestTopic.pairing_dismiss(rid).value, received.append)
        pairing_prompt.owner = rid
        pairing_prompt.show("wc:abc@1")

        assert pairing_prompt.on_dismiss() is True
        assert received == [None]

    def test_dismiss_without_owner_is_noop(self, pairing_prompt, channel):
        pairing_prompt.show("wc:abc@1")

        assert pairing_prompt.on_dismiss() is False
        assert channel.subscriber_count() == 0
