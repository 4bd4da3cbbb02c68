"""
Event bus infrastructure.
"""

from passerelle.infrastructure.event_bus.event_channel import EventChannel, Handler

__all__ = ["EventChannel", "Handler"]
