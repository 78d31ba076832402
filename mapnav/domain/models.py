"""Immutable domain models for the map navigator.

All models are frozen dataclasses with slots. They have no external
dependencies and are what the graph engine hands back to its callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True, slots=True)
class Road:
    """An undirected road between two locations.

    Attributes:
        source: One endpoint (the one listed first in the map data)
        destination: The other endpoint
        distance_km: Non-negative length of the road in kilometers
    """

    source: str
    destination: str
    distance_km: int

    def connects(self, a: str, b: str) -> bool:
        """Check whether this road joins ``a`` and ``b`` in either direction."""
        return {self.source, self.destination} == {a, b}


@dataclass(frozen=True, slots=True)
class Route:
    """Result of a shortest-route query.

    Attributes:
        path: Ordered tuple of location names, source first
        total_distance_km: Sum of the road lengths along ``path``
    """

    path: Tuple[str, ...]
    total_distance_km: int

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("A route needs at least one location")
        if self.total_distance_km < 0:
            raise ValueError(
                f"Route distance must be non-negative, got {self.total_distance_km}"
            )

    @property
    def source(self) -> str:
        return self.path[0]

    @property
    def destination(self) -> str:
        return self.path[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the route, endpoints included."""
        return len(self.path)

    def legs(self) -> Iterator[Tuple[str, str]]:
        """Yield each consecutive (from, to) pair along the route."""
        return zip(self.path, self.path[1:])
