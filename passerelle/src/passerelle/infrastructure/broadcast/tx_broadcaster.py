"""
REST transaction broadcaster.

Posts signed transactions to a chain's REST (LCD) endpoint. Used by
RemoteWallet.send_tx, not by the broker.
"""

import base64
from typing import Any, Dict, Mapping, Optional

import httpx
from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

from passerelle.domain.exceptions import BroadcastError, ChainNotConfiguredError
from passerelle.domain.services import ITxBroadcaster, SignedTx
from passerelle.domain.value_objects import BroadcastMode

PROTO_TXS_PATH = "/cosmos/tx/v1beta1/txs"
AMINO_TXS_PATH = "/txs"


class TxBroadcaster(ITxBroadcaster):
    """
    HTTP client broadcasting signed transactions.

    Protobuf bytes go to the cosmos tx service, amino StdTx objects to
    the legacy /txs route. A non-zero response code is a rejection.

    Examples:
        broadcaster = TxBroadcaster({"osmosis-1": "https://lcd.osmosis.zone"})
        tx_hash = await broadcaster.broadcast("osmosis-1", tx_bytes, "sync")
        await broadcaster.close()
    """

    def __init__(
        self,
        chain_rest_endpoints: Mapping[str, str],
        timeout: float = 30.0,
        reporter: Optional[SystemReporter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize TxBroadcaster.

        Args:
            chain_rest_endpoints: REST base URL per chain id
            timeout: HTTP request timeout in seconds
            reporter: Optional SystemReporter
            transport: Optional httpx transport (tests, proxies)
        """
        self.chain_rest_endpoints = {
            chain_id: url.rstrip("/") for chain_id, url in chain_rest_endpoints.items()
        }
        self.timeout = timeout
        self.reporter = reporter
        self._transport = transport

        # Async HTTP client (lazy initialization)
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "TxBroadcaster":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def rest_url(self, chain_id: str) -> str:
        """
        Resolve the REST base URL for a chain.

        Raises:
            ChainNotConfiguredError: If chain has no endpoint
        """
        try:
            return self.chain_rest_endpoints[chain_id]
        except KeyError:
            raise ChainNotConfiguredError(chain_id) from None

    @staticmethod
    def build_request(tx: SignedTx, mode: str) -> tuple:
        """
        Build (path, json body) for a signed transaction.

        Args:
            tx: Protobuf bytes or amino StdTx dict
            mode: Broadcast mode string

        Returns:
            Tuple of (path, payload)
        """
        if isinstance(tx, (bytes, bytearray, memoryview)):
            return PROTO_TXS_PATH, {
                "tx_bytes": base64.b64encode(bytes(tx)).decode("ascii"),
                "mode": BroadcastMode.proto_name_for(mode),
            }
        return AMINO_TXS_PATH, {"tx": tx, "mode": mode}

    async def broadcast(self, chain_id: str, tx: SignedTx, mode: str) -> bytes:
        """
        Broadcast a signed transaction.

        Args:
            chain_id: Target chain id
            tx: Signed transaction (protobuf bytes or StdTx dict)
            mode: "async", "sync" or "block"

        Returns:
            Transaction hash bytes (decoded from the hex txhash)

        Raises:
            ChainNotConfiguredError: If chain has no REST endpoint
            BroadcastError: On non-zero code or HTTP failure
        """
        base_url = self.rest_url(chain_id)
        path, payload = self.build_request(tx, mode)
        url = f"{base_url}{path}"
        is_proto = path == PROTO_TXS_PATH

        if self.reporter:
            self.reporter.info(
                f"{Emoji.NETWORK.BROADCAST} Broadcasting tx: chain={chain_id}, "
                f"mode={mode}, format={'proto' if is_proto else 'amino'}",
                context="TxBroadcaster",
                verbose_level=2,
            )

        try:
            response = await self.client.post(url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise self._http_error(
                chain_id, url, f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.HTTPError as e:
            raise self._http_error(chain_id, url, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise self._http_error(chain_id, url, f"Invalid JSON response: {e}") from e

        body = data.get("tx_response") if is_proto else data
        tx_response: Dict[str, Any] = body or {}

        code = tx_response.get("code")
        if code is not None and code != 0:
            raw_log = tx_response.get("raw_log", "")
            if self.reporter:
                self.reporter.warning(
                    f"{Emoji.ERROR.ERROR} Tx rejected: chain={chain_id}, "
                    f"code={code}, log={raw_log}",
                    context="TxBroadcaster",
                )
            raise BroadcastError(raw_log, code=code, details={"chain_id": chain_id})

        txhash = tx_response.get("txhash")
        if not txhash:
            raise BroadcastError(
                "Response has no txhash", details={"chain_id": chain_id}
            )

        try:
            tx_hash = bytes.fromhex(txhash)
        except (TypeError, ValueError) as e:
            raise BroadcastError(
                f"Response txhash is not hex: {txhash!r}",
                details={"chain_id": chain_id},
            ) from e

        if self.reporter:
            self.reporter.info(
                f"{Emoji.SUCCESS} Tx broadcast: chain={chain_id}, hash={txhash}",
                context="TxBroadcaster",
            )
        return tx_hash

    def _http_error(self, chain_id: str, url: str, detail: str) -> BroadcastError:
        if self.reporter:
            self.reporter.error(
                f"{Emoji.ERROR.ERROR} Broadcast request failed: chain={chain_id}, "
                f"{detail}",
                context="TxBroadcaster",
            )
        return BroadcastError(detail, details={"chain_id": chain_id, "url": url})
