"""CSV network repository adapter.

Loads the road network from the map data files named in the graph
configuration, keeps the loaded instance, and turns I/O and format
problems into GraphError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...graph.load_graph import load_network
from ...graph.network import RoadNetwork


@dataclass
class CSVNetworkRepository:
    """Network repository that loads from CSV files.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _network: Optional[RoadNetwork] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> RoadNetwork:
        """Load the road network from CSV files.

        Returns:
            The network; later calls return the same instance.

        Raises:
            GraphError: If the network cannot be loaded.
        """
        if self._network is not None:
            return self._network

        self._logger.debug(
            "Loading road network",
            extra={
                "locations_path": str(self.config.locations_path),
                "roads_path": str(self.config.roads_path),
            },
        )

        try:
            network = load_network(self.config.locations_path, self.config.roads_path)
        except GraphError as e:
            self._logger.error(
                "Invalid map data",
                extra={"file_path": e.file_path, "line": e.line},
            )
            raise
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                "Failed to load road network",
                file_path=str(self.config.data_dir),
                cause=e,
            ) from e

        self._network = network
        self._logger.info(
            "Road network loaded",
            extra={"locations": len(network), "roads": network.road_count},
        )
        return network

    def list_locations(self) -> Sequence[str]:
        """List all location names in map-data order."""
        return self.load().all_vertices()

    def clear_cache(self) -> None:
        """Drop the loaded network so the next load() re-reads the files."""
        self._network = None
        self._logger.debug("Road network cache cleared")
