"""Graph-related code for representing the road network.

This subpackage contains the in-memory network, the CSV loader that
builds it from the map data, and the path-finding algorithm that runs
on top of it.
"""

from .dijkstra import dijkstra
from .load_graph import load_network
from .network import RoadNetwork

__all__ = ["RoadNetwork", "dijkstra", "load_network"]
