"""
Shared plumbing for prompt view models.
"""

from typing import Callable, List, Optional
from uuid import UUID

from passerelle.infrastructure.event_bus import EventChannel

Observer = Callable[["BasePrompt"], None]


class BasePrompt:
    """
    View model bound by an external UI.

    The UI renders from the public attributes and calls the on_*
    callbacks; every callback turns into one event channel emission
    scoped to the request that owns the prompt.
    """

    def __init__(self, channel: EventChannel):
        self.channel = channel
        self.owner: Optional[UUID] = None
        self._observers: List[Observer] = []

    @property
    def visible(self) -> bool:
        raise NotImplementedError

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a redraw callback.

        Returns:
            Function removing the observer
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)
