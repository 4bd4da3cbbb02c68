"""
Connection broker - decides how to satisfy a wallet connection request.

Resolution order per request():
    1. Cached session  -> returned immediately
    2. Preference set  -> matching method resolved without the selection prompt
    3. Otherwise       -> selection prompt, then extension or remote pairing

Every request registers its own listeners on the event channel, scoped by
request id, and releases all of them exactly once when it settles.
"""

import asyncio
from typing import Any, Dict, Iterable, Optional, Tuple
from uuid import UUID

from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji
from shared.resilience import TimeoutError as OperationTimeoutError
from shared.resilience import run_with_timeout

from passerelle.domain.entities import (
    CachedSession,
    PendingRequest,
    WalletMethodDescriptor,
)
from passerelle.domain.exceptions import (
    ConnectionFailedError,
    ExtensionNotFoundError,
    RequestTimeoutError,
    UserCancelledError,
)
from passerelle.domain.services import IPairingConnector
from passerelle.domain.value_objects import RequestState, RequestTopic
from passerelle.infrastructure.event_bus import EventChannel
from passerelle.infrastructure.pairing import RemoteSessionClient
from passerelle.presentation.prompts import PairingPrompt, SelectionPrompt


class ConnectionBroker:
    """
    Asynchronous wallet connection broker.

    Owns the single cached session slot, the connection preference and
    the map of in-flight requests. All mutation happens on the event
    loop thread.

    Example:
        broker = ConnectionBroker(methods, channel, selection, pairing, client)
        wallet = await broker.request()
        await wallet.enable("osmosis-1")
    """

    def __init__(
        self,
        methods: Iterable[WalletMethodDescriptor],
        channel: EventChannel,
        selection_prompt: SelectionPrompt,
        pairing_prompt: PairingPrompt,
        remote_client: RemoteSessionClient,
        remote_method_prefix: str = "walletconnect",
        request_timeout: Optional[float] = None,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize ConnectionBroker.

        Args:
            methods: Wallet methods offered to the user, in display order
            channel: Event channel shared with the prompts
            selection_prompt: Method selection view model
            pairing_prompt: Pairing URI view model
            remote_client: Remote pairing session client
            remote_method_prefix: Method ids with this prefix pair remotely
            request_timeout: Optional seconds before an unsettled request
                is rejected with RequestTimeoutError (None = wait forever)
            reporter: Optional SystemReporter

        Raises:
            ValueError: On duplicate method ids or non-positive timeout
        """
        self._methods: Tuple[WalletMethodDescriptor, ...] = tuple(methods)
        self._by_id: Dict[str, WalletMethodDescriptor] = {}
        for method in self._methods:
            if method.id in self._by_id:
                raise ValueError(f"Duplicate wallet method id: {method.id}")
            self._by_id[method.id] = method

        if request_timeout is not None and request_timeout <= 0:
            raise ValueError("request_timeout must be positive")

        self.channel = channel
        self.selection_prompt = selection_prompt
        self.pairing_prompt = pairing_prompt
        self.remote_client = remote_client
        self.remote_method_prefix = remote_method_prefix
        self.request_timeout = request_timeout
        self.reporter = reporter

        self._cached: Optional[CachedSession] = None
        self._preference: Optional[str] = None
        self._pending: Dict[UUID, PendingRequest] = {}

        self._log_info(
            f"{Emoji.SYSTEM.READY} ConnectionBroker initialized: "
            f"methods={list(self._by_id)}, timeout={request_timeout}",
            verbose_level=2,
        )

    # ================================================================
    # Public state
    # ================================================================

    @property
    def methods(self) -> Tuple[WalletMethodDescriptor, ...]:
        return self._methods

    @property
    def connection_type(self) -> Optional[str]:
        """Method id behind the cached session, or None."""
        return self._cached.method_id if self._cached else None

    @property
    def connection_preference(self) -> Optional[str]:
        return self._preference

    @property
    def cached_session(self) -> Optional[CachedSession]:
        return self._cached

    @property
    def pending_count(self) -> int:
        """Number of requests still in flight."""
        return len(self._pending)

    def get_method(self, method_id: str) -> Optional[WalletMethodDescriptor]:
        return self._by_id.get(method_id)

    def clear_last_used_wallet(self) -> None:
        """Forget the cached session. The preference is kept."""
        if self._cached is not None:
            self._log_info(
                f"{Emoji.SYSTEM.RESET} Cached wallet cleared: "
                f"method={self._cached.method_id}"
            )
        self._cached = None

    def set_connection_preference(self, method_id: Optional[str]) -> None:
        """
        Set or clear the preferred method.

        Applies from the next request() on; in-flight requests are not
        affected.
        """
        self._preference = method_id
        self._log_info(
            f"{Emoji.WALLET.PREFERENCE} Connection preference set: {method_id}",
            verbose_level=2,
        )

    def disconnect(self) -> None:
        """Clear the cached session and kill any connected relay session."""
        self.clear_last_used_wallet()
        self.remote_client.disconnect()

    # ================================================================
    # Request
    # ================================================================

    async def request(self) -> Any:
        """
        Obtain a wallet handle.

        Returns:
            Wallet handle produced by the chosen method's resolver

        Raises:
            UserCancelledError: Selection or pairing prompt dismissed
            ExtensionNotFoundError: No extension detected
            ConnectionFailedError: Pairing handshake failed
            RequestTimeoutError: Configured timeout elapsed
        """
        cached = self._cached
        if cached is not None:
            self._log_debug(
                f"{Emoji.WALLET.CACHE_HIT} Returning cached wallet: "
                f"method={cached.method_id}"
            )
            return cached.handle

        pending = PendingRequest()
        self._pending[pending.id] = pending

        try:
            handle = await run_with_timeout(
                self._negotiate(pending), self.request_timeout, "wallet_request"
            )
        except OperationTimeoutError as e:
            self._mark_rejected(pending, f"timed out after {e.timeout}s")
            raise RequestTimeoutError(e.timeout) from e
        except (Exception, asyncio.CancelledError) as e:
            self._mark_rejected(pending, f"{type(e).__name__}: {e}")
            raise
        finally:
            self._release(pending)

        return handle

    async def _negotiate(self, pending: PendingRequest) -> Any:
        preferred = self._preferred_method()
        if preferred is not None:
            self._log_info(
                f"{Emoji.WALLET.PREFERENCE} Using preferred method: {preferred.id}",
                verbose_level=2,
            )
            return await self._resolve_method(pending, preferred)

        method = await self._await_selection(pending)
        return await self._resolve_method(pending, method)

    def _preferred_method(self) -> Optional[WalletMethodDescriptor]:
        if self._preference is None:
            return None
        return self._by_id.get(self._preference)

    async def _await_selection(self, pending: PendingRequest) -> WalletMethodDescriptor:
        pending.transition(RequestState.AWAITING_SELECTION)

        for method in self._methods:
            self._subscribe(
                pending,
                RequestTopic.select(pending.id, method.id).value,
                lambda _payload, m=method: pending.settle_selection(m),
            )
        self._subscribe(
            pending,
            RequestTopic.dismiss(pending.id).value,
            lambda _payload: pending.settle_selection(
                error=UserCancelledError("selection")
            ),
        )

        self._log_info(
            f"{Emoji.WALLET.SELECT} Selection prompt shown: request={pending.id}",
            verbose_level=2,
        )
        self.selection_prompt.show(pending.id, self._methods)
        try:
            method = await pending.selection
        finally:
            if self.selection_prompt.hide(pending.id):
                self._hand_over_selection(pending)

        self._log_info(
            f"{Emoji.WALLET.SELECT} Method selected: {method.id}", verbose_level=2
        )
        return method

    async def _resolve_method(
        self, pending: PendingRequest, method: WalletMethodDescriptor
    ) -> Any:
        if method.is_remote(self.remote_method_prefix):
            connector = await self._pair(pending)
            return await self._resolve(pending, method, connector)
        return await self._resolve(pending, method, None)

    async def _pair(self, pending: PendingRequest) -> IPairingConnector:
        client = self.remote_client

        if client.connected:
            self._log_info(
                f"{Emoji.WALLET.REUSE} Relay session already connected, "
                f"skipping pairing",
                verbose_level=2,
            )
            return client.connector

        pending.transition(RequestState.AWAITING_PAIRING)
        self._subscribe(
            pending,
            RequestTopic.pairing_dismiss(pending.id).value,
            lambda _payload: client.cancel(),
        )
        self.pairing_prompt.owner = pending.id

        joining = client.in_flight
        session = client.create_session()
        pending.owns_pairing = not joining

        # Shielded: a timeout on this request must not cancel a shared session
        return await asyncio.shield(session)

    async def _resolve(
        self,
        pending: PendingRequest,
        method: WalletMethodDescriptor,
        connector: Optional[IPairingConnector],
    ) -> Any:
        pending.transition(RequestState.RESOLVING)

        handle = await method.resolver(connector)
        if handle is None:
            if connector is None:
                raise ExtensionNotFoundError()
            raise ConnectionFailedError(f"resolver '{method.id}' returned no wallet")

        self._cached = CachedSession(handle=handle, method_id=method.id)
        pending.transition(RequestState.RESOLVED)

        self._log_info(
            f"{Emoji.WALLET.WALLET} Wallet connected: method={method.id}, "
            f"request={pending.id}"
        )
        return handle

    # ================================================================
    # Bookkeeping
    # ================================================================

    def _subscribe(self, pending: PendingRequest, topic: str, handler) -> None:
        pending.track(topic, handler)
        self.channel.on(topic, handler)

    def _mark_rejected(self, pending: PendingRequest, reason: str) -> None:
        if pending.is_terminal:
            return
        pending.transition(RequestState.REJECTED)
        self._log_warning(
            f"{Emoji.STATE.ABORTED} Wallet request rejected: "
            f"request={pending.id}, reason={reason}"
        )

    def _release(self, pending: PendingRequest) -> None:
        """Drop every listener and prompt the request still holds."""
        subscriptions = pending.drain_subscriptions()
        for topic, handler in subscriptions:
            self.channel.off(topic, handler)

        self._pending.pop(pending.id, None)
        if self.selection_prompt.hide(pending.id):
            self._hand_over_selection(pending)

        if pending.owns_pairing and pending.state == RequestState.REJECTED:
            others_pairing = any(
                p.state == RequestState.AWAITING_PAIRING
                for p in self._pending.values()
            )
            if not others_pairing:
                self.remote_client.cancel()

        if self.pairing_prompt.owner == pending.id:
            self._hand_over_pairing(pending)

        self._log_debug(
            f"{Emoji.SYSTEM.CLEANUP} Request released: request={pending.id}, "
            f"state={pending.state.value}, listeners={len(subscriptions)}, "
            f"in_flight={len(self._pending)}"
        )

    def _latest_waiting(
        self, state: RequestState, released: PendingRequest
    ) -> Optional[PendingRequest]:
        """Most recent other in-flight request sitting in state."""
        for other in reversed(list(self._pending.values())):
            if other is not released and other.state == state:
                return other
        return None

    def _hand_over_selection(self, released: PendingRequest) -> None:
        """
        Give the selection prompt back to a request still waiting on it.

        A newer request takes the prompt over when it opens; once that
        request lets go, the earlier one must be answerable again.
        """
        successor = self._latest_waiting(RequestState.AWAITING_SELECTION, released)
        if successor is None or successor.selection.done():
            return
        self.selection_prompt.show(successor.id, self._methods)
        self._log_info(
            f"{Emoji.WALLET.SELECT} Selection prompt handed back: "
            f"request={successor.id}",
            verbose_level=2,
        )

    def _hand_over_pairing(self, released: PendingRequest) -> None:
        """Route pairing dismissal to another request joined to the session."""
        successor = self._latest_waiting(RequestState.AWAITING_PAIRING, released)
        self.pairing_prompt.owner = successor.id if successor else None
        if successor is not None:
            self._log_debug(
                f"{Emoji.WALLET.REUSE} Pairing prompt handed over: "
                f"request={successor.id}"
            )

    def _log_debug(self, msg: str) -> None:
        if self.reporter:
            self.reporter.debug(msg, context="ConnectionBroker")

    def _log_info(self, msg: str, verbose_level: int = 1) -> None:
        if self.reporter:
            self.reporter.info(
                msg, context="ConnectionBroker", verbose_level=verbose_level
            )

    def _log_warning(self, msg: str) -> None:
        if self.reporter:
            self.reporter.warning(msg, context="ConnectionBroker")
