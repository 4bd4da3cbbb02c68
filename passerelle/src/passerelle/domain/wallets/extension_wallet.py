"""
ExtensionWallet - handle backed by an injected wallet extension.
"""

from typing import Any, Dict, Iterable, Union

from passerelle.domain.wallets.wallet_handle import (
    WalletHandle,
    WalletKind,
    normalize_chain_ids,
)


class ExtensionWallet(WalletHandle):
    """
    Wallet handle delegating to an extension object.

    The extension object is whatever the locator found; it must expose
    async enable/get_key/sign_amino/send_tx.
    """

    kind = WalletKind.EXTENSION

    def __init__(self, extension: Any):
        self.extension = extension

    async def enable(self, chain_ids: Union[str, Iterable[str]]) -> None:
        await self.extension.enable(normalize_chain_ids(chain_ids))

    async def get_key(self, chain_id: str) -> Dict[str, Any]:
        return await self.extension.get_key(chain_id)

    async def sign_amino(
        self, chain_id: str, signer: str, sign_doc: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self.extension.sign_amino(chain_id, signer, sign_doc)

    async def send_tx(self, chain_id: str, tx: Any, mode: str) -> bytes:
        return await self.extension.send_tx(chain_id, tx, mode)

    def __repr__(self) -> str:
        return f"ExtensionWallet({type(self.extension).__name__})"
