"""Top-level package for the map navigator.

Finds the shortest road route between two named locations of a fixed
map and reports the route with its total distance. The road network is
loaded once from the packaged map data and then only queried.

    container = Container.create_default()
    finder = container.resolve(RouteFinderService)
    route = finder.find_route("KIIMS", "KIIT")
"""

from .container import Container
from .domain import (
    GraphError,
    NavigatorError,
    NoPathFoundError,
    Road,
    Route,
    UnknownVertexError,
)
from .graph import RoadNetwork, load_network
from .observability import configure_logging
from .services import RouteFinderService

__all__ = [
    "Container",
    "RoadNetwork",
    "RouteFinderService",
    "load_network",
    "configure_logging",
    "Road",
    "Route",
    "NavigatorError",
    "UnknownVertexError",
    "NoPathFoundError",
    "GraphError",
]
