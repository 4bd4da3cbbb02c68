"""
Dependency Injection Container for Passerelle.

Wires the event channel, prompts, remote session client, broadcaster
and connection broker from Settings. The platform-specific pieces
(extension locator, pairing connector factory) are supplied by the host.
"""

import logging
from typing import List, Optional

from shared.reporter import LogSink, SystemReporter
from shared.reporter.emojis import Emoji

from passerelle.application.connection_broker import ConnectionBroker
from passerelle.application.wallet_methods import extension_method, remote_method
from passerelle.config.settings import Settings, get_settings
from passerelle.domain.entities import WalletMethodDescriptor
from passerelle.domain.services import ConnectorFactory, IExtensionLocator
from passerelle.infrastructure.broadcast import TxBroadcaster
from passerelle.infrastructure.event_bus import EventChannel
from passerelle.infrastructure.pairing import RemoteSessionClient
from passerelle.presentation.prompts import PairingPrompt, SelectionPrompt


class DIContainer:
    """
    Dependency Injection Container.

    Builds every component lazily and keeps one instance of each.
    """

    def __init__(
        self,
        connector_factory: ConnectorFactory,
        extension_locator: IExtensionLocator,
        settings: Optional[Settings] = None,
        methods: Optional[List[WalletMethodDescriptor]] = None,
        log_sink: Optional[LogSink] = None,
    ):
        """
        Initialize container with None instances.

        Args:
            connector_factory: Builds pairing connectors
            extension_locator: Detects the wallet extension
            settings: Settings (defaults to get_settings())
            methods: Custom method list (defaults to extension + remote)
            log_sink: Optional reporter sink
        """
        self.connector_factory = connector_factory
        self.extension_locator = extension_locator
        self.settings = settings or get_settings()
        self._custom_methods = methods
        self._log_sink = log_sink

        self._reporter: Optional[SystemReporter] = None
        self._event_channel: Optional[EventChannel] = None
        self._selection_prompt: Optional[SelectionPrompt] = None
        self._pairing_prompt: Optional[PairingPrompt] = None
        self._remote_client: Optional[RemoteSessionClient] = None
        self._broadcaster: Optional[TxBroadcaster] = None
        self._broker: Optional[ConnectionBroker] = None

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._remote_client:
            self._remote_client.disconnect()

        if self._broadcaster:
            await self._broadcaster.close()

        if self._reporter:
            self._reporter.info(
                f"{Emoji.SYSTEM.SHUTDOWN} Passerelle container shut down",
                context="DIContainer",
            )
            self._reporter.close()

    # Infrastructure Getters

    @property
    def reporter(self) -> SystemReporter:
        """Get system reporter instance."""
        if self._reporter is None:
            self._reporter = SystemReporter(
                name="passerelle",
                log_dir=self.settings.log_dir,
                level=getattr(logging, self.settings.log_level.upper()),
                verbose=self.settings.verbose,
                sink=self._log_sink,
            )
        return self._reporter

    @property
    def event_channel(self) -> EventChannel:
        """Get event channel instance."""
        if self._event_channel is None:
            self._event_channel = EventChannel(reporter=self.reporter)
        return self._event_channel

    @property
    def broadcaster(self) -> TxBroadcaster:
        """Get REST transaction broadcaster instance."""
        if self._broadcaster is None:
            self._broadcaster = TxBroadcaster(
                chain_rest_endpoints=self.settings.chain_rest_endpoints,
                timeout=self.settings.broadcast_timeout_seconds,
                reporter=self.reporter,
            )
        return self._broadcaster

    @property
    def remote_client(self) -> RemoteSessionClient:
        """Get remote pairing session client instance."""
        if self._remote_client is None:
            self._remote_client = RemoteSessionClient(
                connector_factory=self.connector_factory,
                relay_url=self.settings.relay_url,
                signing_methods=self.settings.signing_methods,
                open_pairing_uri=self.pairing_prompt.show,
                close_pairing_uri=self.pairing_prompt.hide,
                reporter=self.reporter,
            )
        return self._remote_client

    # Presentation Getters

    @property
    def selection_prompt(self) -> SelectionPrompt:
        if self._selection_prompt is None:
            self._selection_prompt = SelectionPrompt(self.event_channel)
        return self._selection_prompt

    @property
    def pairing_prompt(self) -> PairingPrompt:
        if self._pairing_prompt is None:
            self._pairing_prompt = PairingPrompt(self.event_channel)
        return self._pairing_prompt

    # Application Getters

    @property
    def methods(self) -> List[WalletMethodDescriptor]:
        """Get offered wallet methods (custom list or the built-in pair)."""
        if self._custom_methods is not None:
            return list(self._custom_methods)
        return [
            extension_method(self.extension_locator),
            remote_method(
                self.broadcaster, id=self.settings.remote_method_prefix
            ),
        ]

    @property
    def broker(self) -> ConnectionBroker:
        """Get connection broker instance."""
        if self._broker is None:
            self._broker = ConnectionBroker(
                methods=self.methods,
                channel=self.event_channel,
                selection_prompt=self.selection_prompt,
                pairing_prompt=self.pairing_prompt,
                remote_client=self.remote_client,
                remote_method_prefix=self.settings.remote_method_prefix,
                request_timeout=self.settings.request_timeout_seconds,
                reporter=self.reporter,
            )
        return self._broker


# Global container instance
_container: Optional[DIContainer] = None


def configure_container(
    connector_factory: ConnectorFactory,
    extension_locator: IExtensionLocator,
    **kwargs,
) -> DIContainer:
    """Create the global DI container, replacing any previous one."""
    global _container
    _container = DIContainer(connector_factory, extension_locator, **kwargs)
    return _container


def get_container() -> DIContainer:
    """
    Get global DI container instance.

    Raises:
        RuntimeError: If configure_container() was never called
    """
    if _container is None:
        raise RuntimeError("Container not configured; call configure_container()")
    return _container


async def shutdown_container() -> None:
    """Shutdown global container."""
    global _container
    if _container is not None:
        await _container.shutdown()
        _container = None
