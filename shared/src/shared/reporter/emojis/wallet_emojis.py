"""
Wallet connection emoji definitions.

Usage:
    >>> from shared.reporter.emojis.wallet_emojis import WalletEmoji
    >>> print(f"{WalletEmoji.PAIRING} Pairing URI issued")
    📱 Pairing URI issued
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class WalletEmoji(ComponentEmoji):
    """
    Wallet connection operations.

    Categories:
        - Methods: Extension, remote pairing
        - Session: Cache, reuse, preference
        - Signing: Sign requests
    """

    # ============================================================
    # Connection Methods
    # ============================================================

    WALLET = "👛"  # Wallet handle
    EXTENSION = "🧩"  # Browser-style extension
    PAIRING = "📱"  # Remote pairing
    SELECT = "👆"  # Method selection prompt

    # ============================================================
    # Session
    # ============================================================

    CACHE_HIT = "💾"  # Cached session reused
    REUSE = "♻️"  # Connected session reused
    PREFERENCE = "⭐"  # Stored preference honored

    # ============================================================
    # Signing
    # ============================================================

    SIGN = "✍️"  # Signing request
