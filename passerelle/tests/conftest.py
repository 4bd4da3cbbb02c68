"""
Test fixtures and configuration.

Fakes stand in for the platform pieces Passerelle does not own: the
pairing protocol connector and the extension locator.
"""

import asyncio
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

from passerelle.application import ConnectionBroker, extension_method, remote_method
from passerelle.domain.services import (
    IExtensionLocator,
    IPairingConnector,
    ITxBroadcaster,
    PairingConnectorOptions,
)
from passerelle.infrastructure.event_bus import EventChannel
from passerelle.infrastructure.pairing import RemoteSessionClient
from passerelle.presentation.prompts import PairingPrompt, SelectionPrompt

PAIRING_URI = (
    "wc:8a5e5bdc-a0e4-4702-ba63-8f1a5655744f@1"
    "?bridge=https%3A%2F%2Fbridge.test"
    "&key=41791102999c339c844880b23950704cc43aa840f3739e365323cda4dfa89e7a"
)


class FakeConnector(IPairingConnector):
    """In-memory pairing connector driven by the test."""

    def __init__(self, options: PairingConnectorOptions, uri: str = PAIRING_URI):
        self.options = options
        self.uri = uri
        self.listeners: Dict[str, List[Any]] = {}
        self.create_calls = 0
        self.cancel_hook_calls = 0
        self.killed = False
        self.requests: List[Dict[str, Any]] = []
        self.responses: Dict[str, Any] = {}
        self._connected = False

    @property
    def connected(self) -> bool:
        return self._connected

    def create_session(self) -> None:
        self.create_calls += 1
        self.options.uri_modal.open(self.uri, self._cancel_hook)

    def _cancel_hook(self) -> None:
        self.cancel_hook_calls += 1

    def on(self, event, callback) -> None:
        self.listeners.setdefault(event, []).append(callback)

    def complete(self, error: Optional[Exception] = None) -> None:
        """Simulate the peer accepting (or the protocol failing)."""
        if error is None:
            self._connected = True
        for callback in list(self.listeners.get("connect", [])):
            callback(error, {"params": [{"accounts": [], "chainId": 1}]})

    async def send_custom_request(self, request: Dict[str, Any]) -> Any:
        self.requests.append(request)
        return self.responses.get(request["method"])

    def kill_session(self) -> None:
        self.killed = True
        self._connected = False


class FakeConnectorFactory:
    """Connector factory recording every connector it builds."""

    def __init__(self):
        self.connectors: List[FakeConnector] = []
        self.options: List[PairingConnectorOptions] = []

    def __call__(self, options: PairingConnectorOptions) -> FakeConnector:
        connector = FakeConnector(options)
        self.options.append(options)
        self.connectors.append(connector)
        return connector

    @property
    def latest(self) -> FakeConnector:
        return self.connectors[-1]


class FakeExtension:
    """Extension object with the async wallet surface."""

    def __init__(self):
        self.enable = AsyncMock(return_value=None)
        self.get_key = AsyncMock(return_value={"bech32Address": "osmo1xyz"})
        self.sign_amino = AsyncMock(return_value={"signature": "c2ln"})
        self.send_tx = AsyncMock(return_value=b"\x01\x02")


class FakeLocator(IExtensionLocator):
    def __init__(self, extension: Any = None):
        self.extension = extension
        self.probes = 0

    async def probe(self) -> Optional[Any]:
        self.probes += 1
        return self.extension


async def _settle(rounds: int = 5) -> None:
    """Let scheduled tasks run up to their next suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def channel() -> EventChannel:
    return EventChannel()


@pytest.fixture
def selection_prompt(channel) -> SelectionPrompt:
    return SelectionPrompt(channel)


@pytest.fixture
def pairing_prompt(channel) -> PairingPrompt:
    return PairingPrompt(channel)


@pytest.fixture
def connector_factory() -> FakeConnectorFactory:
    return FakeConnectorFactory()


@pytest.fixture
def remote_client(connector_factory, pairing_prompt) -> RemoteSessionClient:
    return RemoteSessionClient(
        connector_factory=connector_factory,
        relay_url="https://bridge.test",
        signing_methods=["keplr_enable_wallet_connect_v1"],
        open_pairing_uri=pairing_prompt.show,
        close_pairing_uri=pairing_prompt.hide,
    )


@pytest.fixture
def extension() -> FakeExtension:
    return FakeExtension()


@pytest.fixture
def locator(extension) -> FakeLocator:
    return FakeLocator(extension)


@pytest.fixture
def broadcaster() -> AsyncMock:
    mock = AsyncMock(spec=ITxBroadcaster)
    mock.broadcast.return_value = bytes.fromhex("ab" * 32)
    return mock


@pytest.fixture
def make_broker(
    channel, selection_prompt, pairing_prompt, remote_client, locator, broadcaster
):
    """Build a broker over the shared fixtures; kwargs override defaults."""

    def _make(**kwargs) -> ConnectionBroker:
        kwargs.setdefault(
            "methods",
            [extension_method(locator), remote_method(broadcaster)],
        )
        return ConnectionBroker(
            channel=channel,
            selection_prompt=selection_prompt,
            pairing_prompt=pairing_prompt,
            remote_client=remote_client,
            **kwargs,
        )

    return _make


@pytest.fixture
def settle():
    """Awaitable helper draining the event loop between UI callbacks."""
    return _settle
