"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the route-finding core and the
adapters that feed it. They enable dependency injection and make the
system testable.
"""

from .cache import CachePort
from .graph import NetworkRepositoryPort

__all__ = [
    "NetworkRepositoryPort",
    "CachePort",
]
