"""Emoji definitions for system reporting."""

from shared.reporter.emojis.emoji import Emoji
from shared.reporter.emojis.errors_emojis import ErrorEmoji
from shared.reporter.emojis.event_emojis import EventEmoji
from shared.reporter.emojis.network_emojis import NetworkEmoji
from shared.reporter.emojis.state_emojis import StateEmoji
from shared.reporter.emojis.system_emojis import SystemEmoji
from shared.reporter.emojis.wallet_emojis import WalletEmoji

__all__ = [
    "Emoji",
    "SystemEmoji",
    "NetworkEmoji",
    "EventEmoji",
    "StateEmoji",
    "ErrorEmoji",
    "WalletEmoji",
]
