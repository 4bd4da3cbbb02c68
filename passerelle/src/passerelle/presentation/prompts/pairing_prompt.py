"""
Pairing prompt view model - shows the pairing URI (QR code / deep link).
"""

from typing import Optional

from passerelle.domain.services import CancelHook
from passerelle.domain.value_objects import RequestTopic
from passerelle.presentation.prompts.base_prompt import BasePrompt


class PairingPrompt(BasePrompt):
    """
    State behind the pairing QR dialog.

    Visible exactly while the URI is non-empty.
    """

    def __init__(self, channel):
        super().__init__(channel)
        self.uri: str = ""

    @property
    def visible(self) -> bool:
        return len(self.uri) > 0

    def show(self, uri: str, cancel_hook: Optional[CancelHook] = None) -> None:
        """Display uri; usable directly as the open_pairing_uri hook."""
        self.uri = uri or ""
        self._notify()

    def hide(self) -> None:
        """Clear the uri; usable directly as the close_pairing_uri hook."""
        if not self.uri:
            return
        self.uri = ""
        self._notify()

    def on_dismiss(self) -> bool:
        """UI callback: user closed the QR dialog."""
        if not self.visible or self.owner is None:
            return False
        self.channel.emit(RequestTopic.pairing_dismiss(self.owner).value)
        return True
