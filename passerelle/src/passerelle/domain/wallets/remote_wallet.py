"""
RemoteWallet - handle backed by a paired remote device.

Signing requests travel over the pairing connector as custom JSON-RPC
calls; broadcasting goes through the REST broadcaster.
"""

import itertools
from typing import Any, Dict, Iterable, Union

from passerelle.domain.services.i_pairing_connector import IPairingConnector
from passerelle.domain.services.i_tx_broadcaster import ITxBroadcaster
from passerelle.domain.wallets.wallet_handle import (
    WalletHandle,
    WalletKind,
    normalize_chain_ids,
)

ENABLE_METHOD = "keplr_enable_wallet_connect_v1"
GET_KEY_METHOD = "keplr_get_key_wallet_connect_v1"
SIGN_AMINO_METHOD = "keplr_sign_amino_wallet_connect_v1"

_request_ids = itertools.count(1)


class RemoteWallet(WalletHandle):
    """
    Wallet handle for a remote session.

    Attributes:
        connector: Connected pairing connector
        broadcaster: REST broadcaster used by send_tx
    """

    kind = WalletKind.REMOTE

    def __init__(self, connector: IPairingConnector, broadcaster: ITxBroadcaster):
        self.connector = connector
        self.broadcaster = broadcaster

    async def _call(self, method: str, params: list) -> Any:
        """Send one JSON-RPC request over the pairing connector."""
        return await self.connector.send_custom_request(
            {
                "id": next(_request_ids),
                "jsonrpc": "2.0",
                "method": method,
                "params": params,
            }
        )

    async def enable(self, chain_ids: Union[str, Iterable[str]]) -> None:
        await self._call(ENABLE_METHOD, normalize_chain_ids(chain_ids))

    async def get_key(self, chain_id: str) -> Dict[str, Any]:
        result = await self._call(GET_KEY_METHOD, [chain_id])
        return result[0] if isinstance(result, list) else result

    async def sign_amino(
        self, chain_id: str, signer: str, sign_doc: Dict[str, Any]
    ) -> Dict[str, Any]:
        result = await self._call(SIGN_AMINO_METHOD, [chain_id, signer, sign_doc])
        return result[0] if isinstance(result, list) else result

    async def send_tx(self, chain_id: str, tx: Any, mode: str) -> bytes:
        return await self.broadcaster.broadcast(chain_id, tx, mode)

    @property
    def connected(self) -> bool:
        return self.connector.connected

    def __repr__(self) -> str:
        return f"RemoteWallet(connected={self.connected})"
