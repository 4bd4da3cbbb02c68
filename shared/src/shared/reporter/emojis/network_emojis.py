"""
Network operations and communication emoji definitions.

Covers relay pairing, REST calls and connection states.

Usage:
    >>> from shared.reporter.emojis.network_emojis import NetworkEmoji
    >>> print(f"{NetworkEmoji.CONNECTED} Relay session established")
    🔗 Relay session established
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class NetworkEmoji(ComponentEmoji):
    """
    Network operations and communication.

    Categories:
        - Connection: Connect, disconnect, timeout
        - Data Flow: Send, receive, broadcast
        - Protocols: Relay, HTTP
    """

    # ============================================================
    # Connection States
    # ============================================================

    CONNECTED = "🔗"  # Connection established
    DISCONNECTED = "⚠️"  # Connection lost
    CONNECTING = "⏳"  # Connection in progress
    TIMEOUT = "⏱️"  # Connection timeout

    # ============================================================
    # Data Flow
    # ============================================================

    SEND = "📤"  # Data sent
    RECEIVE = "📥"  # Data received
    BROADCAST = "📡"  # Transaction broadcast

    # ============================================================
    # Protocol Types
    # ============================================================

    RELAY = "🌐"  # Relay/bridge operation
    HTTP = "🔌"  # HTTP/REST API
