"""
Dependency injection.
"""

from passerelle.di.container import (
    DIContainer,
    configure_container,
    get_container,
    shutdown_container,
)

__all__ = [
    "DIContainer",
    "configure_container",
    "get_container",
    "shutdown_container",
]
