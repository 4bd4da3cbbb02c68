"""
Extension locator service interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IExtensionLocator(ABC):
    """
    Abstract interface for detecting an injected wallet extension.

    How detection works (window object, native bridge, IPC) is up to
    the implementation.
    """

    @abstractmethod
    async def probe(self) -> Optional[Any]:
        """
        Look for a compatible wallet extension.

        Returns:
            Extension wallet object, or None if not installed
        """
