"""Graph ports - Abstractions for loading the road network.

The repository owns the single network instance and hands it out by
reference to whoever answers route queries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..graph.network import RoadNetwork


class NetworkRepositoryPort(Protocol):
    """Port for loading the road network.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> RoadNetwork:
        """Load the road network.

        Repeated calls return the same instance.

        Raises:
            GraphError: If the map data cannot be loaded.
        """
        ...

    def list_locations(self) -> Sequence[str]:
        """List all location names in map-data order."""
        ...
