"""
Built-in wallet method descriptors.

extension_method() and remote_method() build the two standard entries of
the selection prompt. Any other method can be offered by constructing a
WalletMethodDescriptor with a custom resolver.
"""

from typing import Optional

from passerelle.domain.entities import WalletMethodDescriptor
from passerelle.domain.exceptions import (
    ConnectionFailedError,
    ExtensionNotFoundError,
)
from passerelle.domain.services import (
    IExtensionLocator,
    IPairingConnector,
    ITxBroadcaster,
)
from passerelle.domain.wallets import ExtensionWallet, RemoteWallet

EXTENSION_METHOD_ID = "extension"
REMOTE_METHOD_ID = "walletconnect"


def extension_method(
    locator: IExtensionLocator,
    id: str = EXTENSION_METHOD_ID,
    display_name: str = "Keplr Extension",
    description: str = "Connect using the browser extension",
    icon_ref: str = "icons/keplr.svg",
) -> WalletMethodDescriptor:
    """
    Descriptor resolving to the installed extension.

    The resolver raises ExtensionNotFoundError when the locator finds
    nothing.
    """

    async def resolve(_connector: Optional[IPairingConnector] = None):
        extension = await locator.probe()
        if extension is None:
            raise ExtensionNotFoundError()
        return ExtensionWallet(extension)

    return WalletMethodDescriptor(
        id=id,
        display_name=display_name,
        description=description,
        icon_ref=icon_ref,
        resolver=resolve,
    )


def remote_method(
    broadcaster: ITxBroadcaster,
    id: str = REMOTE_METHOD_ID,
    display_name: str = "WalletConnect",
    description: str = "Scan the QR code with a mobile wallet",
    icon_ref: str = "icons/walletconnect.svg",
) -> WalletMethodDescriptor:
    """Descriptor wrapping a connected pairing connector in a RemoteWallet."""

    async def resolve(connector: Optional[IPairingConnector] = None):
        if connector is None:
            raise ConnectionFailedError("no pairing connector available")
        return RemoteWallet(connector, broadcaster)

    return WalletMethodDescriptor(
        id=id,
        display_name=display_name,
        description=description,
        icon_ref=icon_ref,
        resolver=resolve,
    )
