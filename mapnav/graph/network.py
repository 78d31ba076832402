"""In-memory road network and the queries it answers.

The network is an undirected, non-negatively weighted graph keyed by
location name. It is built once from the map data and then only read.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Set

from ..domain.errors import GraphError, UnknownVertexError
from ..domain.models import Road, Route
from .dijkstra import dijkstra


class RoadNetwork:
    """Undirected road network with reachability and shortest-route queries.

    Locations keep their insertion order, which is the order
    ``all_vertices`` reports them in.

    Example:
        network = RoadNetwork()
        network.add_edge("KIIMS", "KIIT", 1)
        route = network.shortest_path("KIIMS", "KIIT")
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, Dict[str, int]] = {}
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency

    def __repr__(self) -> str:
        return f"RoadNetwork(locations={len(self)}, roads={self.road_count})"

    # -- construction -------------------------------------------------

    def add_vertex(self, name: str) -> None:
        """Register a location. Registering it again is a no-op."""
        self._adjacency.setdefault(name, {})

    def add_edge(self, a: str, b: str, weight: int) -> None:
        """Add an undirected road, registering both endpoints if needed.

        A second road between the same pair replaces the first one's
        length.

        Raises:
            GraphError: If ``weight`` is not a non-negative integer.
        """
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise GraphError(
                f"Road length between {a!r} and {b!r} must be an integer, "
                f"got {weight!r}"
            )
        if weight < 0:
            raise GraphError(
                f"Road length between {a!r} and {b!r} must be non-negative, "
                f"got {weight}"
            )

        self.add_vertex(a)
        self.add_vertex(b)
        if b in self._adjacency[a] and self._adjacency[a][b] != weight:
            self._logger.debug(
                "Road length overwritten",
                extra={
                    "source": a,
                    "destination": b,
                    "old_km": self._adjacency[a][b],
                    "new_km": weight,
                },
            )
        self._adjacency[a][b] = weight
        self._adjacency[b][a] = weight

    # -- lookups ------------------------------------------------------

    def has_vertex(self, name: str) -> bool:
        return name in self._adjacency

    def all_vertices(self) -> List[str]:
        """Return every location in insertion order."""
        return list(self._adjacency)

    def neighbors(self, name: str) -> Dict[str, int]:
        """Return a copy of the roads leaving ``name`` as {neighbor: km}."""
        self._require(name)
        return dict(self._adjacency[name])

    def roads(self) -> Iterator[Road]:
        """Yield each undirected road exactly once."""
        seen: Set[str] = set()
        for source, neighbors in self._adjacency.items():
            for destination, weight in neighbors.items():
                if destination in seen:
                    continue
                yield Road(source, destination, weight)
            seen.add(source)

    @property
    def road_count(self) -> int:
        return sum(1 for _ in self.roads())

    # -- queries ------------------------------------------------------

    def has_path(self, src: str, dest: str) -> bool:
        """Depth-first reachability check between two locations.

        Raises:
            UnknownVertexError: If either location is not registered.
        """
        self._require(src)
        self._require(dest)

        if src == dest:
            return True

        visited: Set[str] = {src}
        stack = [src]
        while stack:
            current = stack.pop()
            for neighbor in self._adjacency[current]:
                if neighbor == dest:
                    return True
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        return False

    def shortest_path(self, src: str, dest: str) -> Optional[Route]:
        """Find the minimum-distance route between two locations.

        Returns:
            The route, or None if ``dest`` cannot be reached from ``src``.
            A route from a location to itself has one stop and distance 0.

        Raises:
            UnknownVertexError: If either location is not registered.
        """
        self._require(src)
        self._require(dest)

        result = dijkstra(self._adjacency, src, dest)
        if result is None:
            self._logger.info(
                "No route between locations",
                extra={"source": src, "destination": dest},
            )
            return None

        path, distance = result
        self._logger.debug(
            "Route computed",
            extra={
                "source": src,
                "destination": dest,
                "stops": len(path),
                "distance_km": distance,
            },
        )
        return Route(path=tuple(path), total_distance_km=distance)

    def shortest_distance(self, src: str, dest: str) -> Optional[int]:
        """Return only the length of the shortest route, or None."""
        route = self.shortest_path(src, dest)
        return route.total_distance_km if route is not None else None

    def _require(self, name: str) -> None:
        if name not in self._adjacency:
            raise UnknownVertexError(
                f"Unknown location: {name}",
                location=name,
            )
