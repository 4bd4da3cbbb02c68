"""
Wallet handle variants.
"""

from passerelle.domain.wallets.extension_wallet import ExtensionWallet
from passerelle.domain.wallets.remote_wallet import RemoteWallet
from passerelle.domain.wallets.wallet_handle import WalletHandle, WalletKind

__all__ = [
    "WalletHandle",
    "WalletKind",
    "ExtensionWallet",
    "RemoteWallet",
]
