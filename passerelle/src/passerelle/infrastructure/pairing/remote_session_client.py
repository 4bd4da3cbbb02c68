"""
Remote session client - adapter around the pairing connector.

Narrow contract used by the broker:
- connected / connector / state
- create_session() -> future settled once by the "connect" event
- cancel() abandons an issued-but-unaccepted URI
"""

import asyncio
from typing import Any, Dict, List, Optional

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

from passerelle.domain.exceptions import ConnectionFailedError, UserCancelledError
from passerelle.domain.services import (
    CancelHook,
    ConnectorFactory,
    IPairingConnector,
    IPairingUriModal,
    PairingConnectorOptions,
)
from passerelle.domain.value_objects import PairingSessionState, PairingStatus

CONNECT_EVENT = "connect"


class _SessionUriModal(IPairingUriModal):
    """URI modal handed to one connector; stale connectors are ignored."""

    def __init__(self, client: "RemoteSessionClient"):
        self._client = client

    def open(self, uri: str, cancel_hook: Optional[CancelHook] = None) -> None:
        self._client._on_uri_issued(self, uri, cancel_hook)

    def close(self) -> None:
        self._client._on_uri_closed(self)


def _consume_exception(future: asyncio.Future) -> None:
    # Nobody may await a cancelled session; mark its error as retrieved
    if not future.cancelled():
        future.exception()


class RemoteSessionClient:
    """
    Pairing session lifecycle around an external connector.

    A connector instance lives until it is either connected (and backs
    the cached wallet) or discarded on cancellation/failure. A fresh
    connector is built for every new pairing attempt.
    """

    def __init__(
        self,
        connector_factory: ConnectorFactory,
        relay_url: str,
        signing_methods: Optional[List[str]] = None,
        open_pairing_uri=None,
        close_pairing_uri=None,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize RemoteSessionClient.

        Args:
            connector_factory: Builds a connector from PairingConnectorOptions
            relay_url: Relay (bridge) endpoint
            signing_methods: Allow-listed custom signing methods
            open_pairing_uri: Hook (uri, cancel_hook) showing the URI
            close_pairing_uri: Hook hiding the URI
            reporter: Optional SystemReporter
        """
        self.connector_factory = connector_factory
        self.relay_url = relay_url
        self.signing_methods = list(signing_methods or [])
        self.open_pairing_uri = open_pairing_uri
        self.close_pairing_uri = close_pairing_uri
        self.reporter = reporter

        self._connector: Optional[IPairingConnector] = None
        self._modal: Optional[_SessionUriModal] = None
        self._cancel_hook: Optional[CancelHook] = None
        self._session: Optional[asyncio.Future] = None
        self._state = PairingSessionState()

    # ================================================================
    # State
    # ================================================================

    @property
    def connector(self) -> Optional[IPairingConnector]:
        return self._connector

    @property
    def connected(self) -> bool:
        return self._connector is not None and self._connector.connected

    @property
    def state(self) -> PairingSessionState:
        return self._state

    @property
    def in_flight(self) -> bool:
        """Check if a pairing attempt is waiting for the peer."""
        return self._session is not None and not self._session.done()

    # ================================================================
    # Session lifecycle
    # ================================================================

    def create_session(self) -> asyncio.Future:
        """
        Start pairing, or reuse what exists.

        - Connected: returns an already-completed future (no URI issued)
        - In flight: returns the pending future
        - Otherwise: discards any half-created connector and pairs anew

        Returns:
            Future resolving to the connected connector, or failing with
            ConnectionFailedError / UserCancelledError
        """
        loop = asyncio.get_running_loop()

        if self.connected:
            self._log_info(
                f"{Emoji.WALLET.REUSE} Reusing connected relay session",
                verbose_level=2,
            )
            session = loop.create_future()
            session.set_result(self._connector)
            return session

        if self.in_flight:
            return self._session

        self._discard()

        modal = _SessionUriModal(self)
        connector = self.connector_factory(
            PairingConnectorOptions(
                relay_url=self.relay_url,
                uri_modal=modal,
                signing_methods=list(self.signing_methods),
            )
        )
        session = loop.create_future()
        session.add_done_callback(_consume_exception)

        self._modal = modal
        self._connector = connector
        self._session = session
        self._state = PairingSessionState(connector_id=id(connector))

        connector.on(
            CONNECT_EVENT,
            lambda error, payload=None: self._on_connect(connector, error, payload),
        )

        self._log_info(
            f"{Emoji.NETWORK.CONNECTING} Creating relay session: "
            f"relay={self.relay_url}",
            verbose_level=2,
        )

        try:
            connector.create_session()
        except Exception as e:
            self._fail(connector, e)

        return session

    def cancel(self) -> bool:
        """
        Abandon the in-flight pairing attempt.

        Invokes the protocol cancel hook, hides the URI, discards the
        connector and fails the pending future with UserCancelledError.

        Returns:
            True if an attempt was cancelled
        """
        if not self.in_flight:
            return False

        session = self._session
        cancel_hook = self._cancel_hook
        self._cancel_hook = None

        if cancel_hook is not None:
            try:
                cancel_hook()
            except Exception as e:
                self._log_warning(
                    f"{Emoji.ERROR.WARNING} Pairing cancel hook failed: "
                    f"{type(e).__name__}: {e}"
                )

        self._close_uri()
        self._discard()
        self._state = self._state.as_cancelled()
        session.set_exception(UserCancelledError("pairing"))

        self._log_info(f"{Emoji.ERROR.CANCELLED} Pairing cancelled by user")
        return True

    def disconnect(self) -> bool:
        """
        Kill a connected session and forget the connector.

        Returns:
            True if a session was killed
        """
        if not self.connected:
            return False

        connector = self._connector
        self._connector = None
        self._modal = None
        self._session = None
        self._state = PairingSessionState()
        connector.kill_session()

        self._log_info(f"{Emoji.NETWORK.DISCONNECTED} Relay session killed")
        return True

    # ================================================================
    # Connector callbacks
    # ================================================================

    def _on_uri_issued(
        self, modal: _SessionUriModal, uri: str, cancel_hook: Optional[CancelHook]
    ) -> None:
        if modal is not self._modal:
            return

        self._cancel_hook = cancel_hook
        self._state = self._state.with_uri(uri)

        self._log_info(
            f"{Emoji.WALLET.PAIRING} Pairing URI issued", verbose_level=2
        )
        if self.open_pairing_uri:
            self.open_pairing_uri(uri, cancel_hook)

    def _on_uri_closed(self, modal: _SessionUriModal) -> None:
        if modal is self._modal:
            self._close_uri()

    def _on_connect(
        self,
        connector: IPairingConnector,
        error: Optional[Exception],
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        # Fired at most once per create_session(); late events are ignored
        if connector is not self._connector or not self.in_flight:
            return

        if error:
            self._fail(connector, error)
            return

        self._close_uri()
        self._cancel_hook = None
        self._state = self._state.as_connected()
        self._session.set_result(connector)

        self._log_info(f"{Emoji.NETWORK.CONNECTED} Relay session established")

    def _fail(self, connector: IPairingConnector, error: Exception) -> None:
        session = self._session
        self._close_uri()
        self._discard()
        self._state = self._state.as_failed()

        self._log_error(
            f"{Emoji.ERROR.ERROR} Pairing failed: {type(error).__name__}: {error}"
        )
        if session is not None and not session.done():
            session.set_exception(ConnectionFailedError(error))

    # ================================================================
    # Helpers
    # ================================================================

    def _close_uri(self) -> None:
        if not self._state.has_uri:
            return
        self._state = PairingSessionState(
            status=PairingStatus.ABSENT, connector_id=self._state.connector_id
        )
        if self.close_pairing_uri:
            self.close_pairing_uri()

    def _discard(self) -> None:
        """Drop a connector that never connected."""
        if self._connector is not None and not self._connector.connected:
            self._connector = None
        self._modal = None
        self._cancel_hook = None

    def _log_info(self, msg: str, verbose_level: int = 1) -> None:
        if self.reporter:
            self.reporter.info(
                msg, context="RemoteSessionClient", verbose_level=verbose_level
            )

    def _log_warning(self, msg: str) -> None:
        if self.reporter:
            self.reporter.warning(msg, context="RemoteSessionClient")

    def _log_error(self, msg: str) -> None:
        if self.reporter:
            self.reporter.error(msg, context="RemoteSessionClient")
