"""
Domain service interfaces.
"""

from passerelle.domain.services.i_extension_locator import IExtensionLocator
from passerelle.domain.services.i_pairing_connector import (
    CancelHook,
    ConnectCallback,
    ConnectorFactory,
    IPairingConnector,
    IPairingUriModal,
    PairingConnectorOptions,
)
from passerelle.domain.services.i_tx_broadcaster import ITxBroadcaster, SignedTx

__all__ = [
    "IExtensionLocator",
    "IPairingConnector",
    "IPairingUriModal",
    "PairingConnectorOptions",
    "ConnectorFactory",
    "ConnectCallback",
    "CancelHook",
    "ITxBroadcaster",
    "SignedTx",
]
