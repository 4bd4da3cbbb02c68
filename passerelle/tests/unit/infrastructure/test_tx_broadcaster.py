"""
Unit tests for TxBroadcaster.

HTTP is served by httpx.MockTransport; no network access.
"""

import base64
import json

import httpx
import pytest

from passerelle.domain.exceptions import BroadcastError, ChainNotConfiguredError
from passerelle.infrastructure.broadcast import TxBroadcaster

TX_HASH = "A1B2C3D4" * 8
ENDPOINTS = {"osmosis-1": "https://lcd.osmosis.test"}


class TestTxBroadcaster:
    """REST broadcast of protobuf and amino transactions."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _create_broadcaster(self, handler, requests: list) -> TxBroadcaster:
        def record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        return TxBroadcaster(ENDPOINTS, transport=httpx.MockTransport(record))

    # ================================================================
    # Test Methods
    # ================================================================

    async def test_protobuf_tx_posts_base64_bytes(self):
        requests = []
        broadcaster = self._create_broadcaster(
            lambda r: httpx.Response(
                200, json={"tx_response": {"code": 0, "txhash": TX_HASH}}
            ),
            requests,
        )
        tx = b"\x0a\x02\x08\x01"

        async with broadcaster:
            tx_hash = await broadcaster.broadcast("osmosis-1", tx, "sync")

        assert tx_hash == bytes.fromhex(TX_HASH)
        request = requests[0]
        assert str(request.url) == "https://lcd.osmosis.test/cosmos/tx/v1beta1/txs"
        body = json.loads(request.content)
        assert body == {
            "tx_bytes": base64.b64encode(tx).decode("ascii"),
            "mode": "BROADCAST_MODE_SYNC",
        }

    async def test_amino_tx_posts_legacy_body(self):
        requests = []
        broadcaster = self._create_broadcaster(
            lambda r: httpx.Response(200, json={"txhash": TX_HASH}),
            requests,
        )
        std_tx = {"msg": [], "fee": {"amount": [], "gas": "200000"}, "memo": ""}

        tx_hash = await broadcaster.broadcast("osmosis-1", std_tx, "block")
        await broadcaster.close()

        assert tx_hash == bytes.fromhex(TX_HASH)
        assert str(requests[0].url) == "https://lcd.osmosis.test/txs"
        assert json.loads(requests[0].content) == {"tx": std_tx, "mode": "block"}

    async def test_nonzero_code_raises_with_raw_log(self):
        broadcaster = self._create_broadcaster(
            lambda r: httpx.Response(
                200,
                json={
                    "tx_response": {
                        "code": 5,
                        "txhash": TX_HASH,
                        "raw_log": "insufficient funds",
                    }
                },
            ),
            [],
        )

        with pytest.raises(BroadcastError) as exc_info:
            await broadcaster.broadcast("osmosis-1", b"\x01", "block")

        assert str(exc_info.value) == "insufficient funds"
        assert exc_info.value.code == 5
        await broadcaster.close()

    async def test_http_error_raises_broadcast_error(self):
        broadcaster = self._create_broadcaster(
            lambda r: httpx.Response(500, text="node down"), []
        )

        with pytest.raises(BroadcastError, match="HTTP 500"):
            await broadcaster.broadcast("osmosis-1", b"\x01", "sync")
        await broadcaster.close()

    async def test_transport_error_raises_broadcast_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        broadcaster = self._create_broadcaster(refuse, [])

        with pytest.raises(BroadcastError, match="ConnectError"):
            await broadcaster.broadcast("osmosis-1", b"\x01", "sync")
        await broadcaster.close()

    async def test_missing_txhash_raises(self):
        broadcaster = self._create_broadcaster(
            lambda r: httpx.Response(200, json={"tx_response": {"code": 0}}), []
        )

        with pytest.raises(BroadcastError, match="txhash"):
            await broadcaster.broadcast("osmosis-1", b"\x01", "sync")
        await broadcaster.close()

    async def test_non_hex_txhash_raises_broadcast_error(self):
        broadcaster = self._create_broadcaster(
            lambda r: httpx.Response(
                200, json={"tx_response": {"code": 0, "txhash": "not-a-hash"}}
            ),
            [],
        )

        with pytest.raises(BroadcastError, match="not hex") as exc_info:
            await broadcaster.broadcast("osmosis-1", b"\x01", "sync")

        assert exc_info.value.details == {"chain_id": "osmosis-1"}
        await broadcaster.close()

    async def test_unknown_chain_raises(self):
        broadcaster = TxBroadcaster(ENDPOINTS)

        with pytest.raises(ChainNotConfiguredError) as exc_info:
            await broadcaster.broadcast("juno-1", b"\x01", "sync")

        assert exc_info.value.chain_id == "juno-1"
        assert isinstance(exc_info.value, BroadcastError)

    def test_unknown_mode_maps_to_unspecified(self):
        path, payload = TxBroadcaster.build_request(b"\x01", "instant")

        assert path == "/cosmos/tx/v1beta1/txs"
        assert payload["mode"] == "BROADCAST_MODE_UNSPECIFIED"
