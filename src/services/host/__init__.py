"""Host engine gateway module."""

from src.services.host.base import HostGateway
from src.services.host.memory import InMemoryHost

__all__ = [
    "HostGateway",
    "InMemoryHost",
]
