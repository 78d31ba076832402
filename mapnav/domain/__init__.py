"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import GraphError, NavigatorError, NoPathFoundError, UnknownVertexError
from .models import Road, Route

__all__ = [
    # Models
    "Road",
    "Route",
    # Errors
    "NavigatorError",
    "UnknownVertexError",
    "NoPathFoundError",
    "GraphError",
]
