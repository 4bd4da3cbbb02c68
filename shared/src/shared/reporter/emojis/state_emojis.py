"""
State machine state emoji definitions.
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class StateEmoji(ComponentEmoji):
    """State machine states and transitions."""

    IDLE = "⚪"  # Nothing in flight
    WAITING = "⏸️"  # Suspended on user input
    RESOLVING = "🔄"  # Resolver running
    DONE = "✅"  # Terminal success
    ABORTED = "⏹️"  # Terminal failure or cancel
    TRANSITION = "🔀"  # State transition
