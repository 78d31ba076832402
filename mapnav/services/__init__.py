"""Services layer - Application orchestration.

Available services:
- RouteFinderService: Location listing and shortest-route queries
"""

from .route_finder import RouteFinderService

__all__ = ["RouteFinderService"]
