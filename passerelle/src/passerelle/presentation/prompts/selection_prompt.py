"""
Selection prompt view model - lets the user pick a wallet method.
"""

from typing import Sequence, Tuple
from uuid import UUID

from passerelle.domain.entities import WalletMethodDescriptor
from passerelle.domain.exceptions import UnknownWalletMethodError
from passerelle.domain.value_objects import RequestTopic
from passerelle.presentation.prompts.base_prompt import BasePrompt


class SelectionPrompt(BasePrompt):
    """
    State behind the "Select a wallet" dialog.

    Attributes:
        methods: Candidate methods, in display order
        owner: Request the prompt is currently shown for
    """

    def __init__(self, channel):
        super().__init__(channel)
        self.methods: Tuple[WalletMethodDescriptor, ...] = ()
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    def show(self, request_id: UUID, methods: Sequence[WalletMethodDescriptor]) -> None:
        self.owner = request_id
        self.methods = tuple(methods)
        self._visible = True
        self._notify()

    def hide(self, request_id: UUID = None) -> bool:
        """
        Hide the prompt.

        When request_id is given the prompt is only hidden if that
        request still owns it.
        """
        if request_id is not None and request_id != self.owner:
            return False
        if not self._visible and self.owner is None:
            return False
        self._visible = False
        self.owner = None
        self._notify()
        return True

    def on_pick(self, method_id: str) -> bool:
        """
        UI callback: user picked a method.

        Returns:
            False if the prompt was not showing (nothing emitted)

        Raises:
            UnknownWalletMethodError: If method_id is not on offer
        """
        if not self._visible or self.owner is None:
            return False
        if method_id not in {m.id for m in self.methods}:
            raise UnknownWalletMethodError(method_id)
        self.channel.emit(RequestTopic.select(self.owner, method_id).value, method_id)
        return True

    def on_dismiss(self) -> bool:
        """UI callback: user closed the dialog."""
        if not self._visible or self.owner is None:
            return False
        self.channel.emit(RequestTopic.dismiss(self.owner).value)
        return True
