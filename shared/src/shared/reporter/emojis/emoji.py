"""
Main Emoji registry class with centralized access to all emoji categories.

Usage:
    >>> from shared.reporter.emojis import Emoji
    >>> Emoji.WALLET.PAIRING
    '📱'
    >>> Emoji.format('NETWORK', 'CONNECTED', 'Relay ready')
    '🔗 Relay ready'
"""

from typing import Dict, Type

from shared.reporter.emojis.base_emojis import ComponentEmoji
from shared.reporter.emojis.errors_emojis import ErrorEmoji
from shared.reporter.emojis.event_emojis import EventEmoji
from shared.reporter.emojis.network_emojis import NetworkEmoji
from shared.reporter.emojis.state_emojis import StateEmoji
from shared.reporter.emojis.system_emojis import SystemEmoji
from shared.reporter.emojis.wallet_emojis import WalletEmoji


class Emoji:
    """
    Central emoji registry with semantic categories.

    Categories:
        SYSTEM: System operations and lifecycle
        NETWORK: Network and communication
        EVENT: Event channel operations
        STATE: State machine states
        ERROR: Error levels and warnings
        WALLET: Wallet connection operations
    """

    SYSTEM = SystemEmoji
    NETWORK = NetworkEmoji
    EVENT = EventEmoji
    STATE = StateEmoji
    ERROR = ErrorEmoji
    WALLET = WalletEmoji

    # Common shortcuts
    SUCCESS = "✅"
    FAILURE = "❌"
    WARNING = "⚠️"
    LOADING = "⏳"

    @classmethod
    def get_all_categories(cls) -> Dict[str, Type[ComponentEmoji]]:
        """Get all registered emoji categories keyed by name."""
        return {
            name: attr
            for name, attr in vars(cls).items()
            if (
                not name.startswith("_")
                and isinstance(attr, type)
                and issubclass(attr, ComponentEmoji)
            )
        }

    @classmethod
    def get(cls, category: str, name: str, default: str = "❓") -> str:
        """
        Get emoji by category and name with fallback default.

        Args:
            category: Category name
            name: Emoji name
            default: Returned when the emoji does not exist

        Returns:
            Emoji character or default
        """
        try:
            category_class = getattr(cls, category.upper())
            return getattr(category_class, name.upper())
        except AttributeError:
            return default

    @classmethod
    def format(cls, category: str, name: str, message: str) -> str:
        """
        Prefix message with the emoji from category.

        Unknown emojis leave the message unchanged.
        """
        emoji = cls.get(category, name, "")
        return f"{emoji} {message}" if emoji else message
