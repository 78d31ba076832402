"""Route finder service - the query API for presentation layers.

A UI populates its location pickers from ``list_locations`` and sends
each (source, destination) pair to ``find_route`` or ``find_route_safe``.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..adapters.cache import NullCache
from ..domain.errors import NoPathFoundError, UnknownVertexError
from ..domain.models import Route
from ..graph.network import RoadNetwork
from ..ports.cache import CachePort
from ..ports.graph import NetworkRepositoryPort

_KEY_SEPARATOR = "\x1f"

SAME_LOCATION_MESSAGE = "Source and destination are the same!"


@dataclass
class RouteFinderService:
    """Answers shortest-route requests against the loaded road network.

    Attributes:
        network_repository: Owns and loads the road network
        cache: Cache for computed routes (defaults to no caching)
    """

    network_repository: NetworkRepositoryPort
    cache: CachePort[Route] = field(default_factory=NullCache)

    _logger: logging.Logger = field(init=False, repr=False)
    _network: Optional[RoadNetwork] = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _current_network(self) -> RoadNetwork:
        """Load the network, dropping cached routes if it was reloaded."""
        network = self.network_repository.load()
        with self._lock:
            if network is not self._network:
                if self._network is not None:
                    cleared = self.cache.clear()
                    self._logger.info(
                        "Road network reloaded, route cache cleared",
                        extra={"entries_cleared": cleared},
                    )
                self._network = network
        return network

    def list_locations(self) -> List[str]:
        """Return every location name, in map-data order."""
        return list(self.network_repository.list_locations())

    def find_route(self, source: str, destination: str) -> Route:
        """Find the shortest route between two locations.

        Args:
            source: Departure location name.
            destination: Arrival location name.

        Returns:
            The shortest route. Identical endpoints give a one-stop route
            of length 0.

        Raises:
            UnknownVertexError: If either location is not on the map.
            NoPathFoundError: If no road connects the two locations.
        """
        network = self._current_network()
        self._logger.debug(
            "Route requested",
            extra={"source": source, "destination": destination},
        )

        route = self.cache.get_or_compute(
            _KEY_SEPARATOR.join((source, destination)),
            lambda: network.shortest_path(source, destination),
        )

        if route is None:
            raise NoPathFoundError(
                f"No path from {source} to {destination}",
                source=source,
                destination=destination,
            )

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "destination": destination,
                "stops": route.num_stops,
                "distance_km": route.total_distance_km,
            },
        )
        return route

    def find_route_safe(
        self, source: str, destination: str
    ) -> Tuple[Optional[Route], Optional[str]]:
        """Find a route, returning a user-facing message instead of raising.

        Returns:
            Tuple of (Route or None, error message or None).
        """
        if source == destination:
            return None, SAME_LOCATION_MESSAGE

        try:
            return self.find_route(source, destination), None
        except UnknownVertexError as e:
            return None, f"Invalid location: {e.location}"
        except NoPathFoundError as e:
            return None, f"No path available between {e.source} and {e.destination}."

    def format_route(self, route: Route) -> str:
        """Format a route as the text shown to the user."""
        path_str = " -> ".join(route.path)
        return f"Shortest Path:\n{path_str}\nDistance: {route.total_distance_km} km"
