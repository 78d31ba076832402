from __future__ import annotations

import itertools
import os
from typing import Dict, Tuple

import pytest

from mapnav.config import GraphConfig, reset_config
from mapnav.graph.load_graph import load_network
from mapnav.graph.network import RoadNetwork


def all_pair_distances(network: RoadNetwork) -> Dict[Tuple[str, str], int]:
    distances = {}
    for a, b in itertools.product(network.all_vertices(), repeat=2):
        distance = network.shortest_distance(a, b)
        if distance is not None:
            distances[(a, b)] = distance
    return distances


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Keep MAPNAV_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("MAPNAV_"):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def reference_network() -> RoadNetwork:
    config = GraphConfig()
    return load_network(config.locations_path, config.roads_path)


@pytest.fixture(scope="session")
def reference_distances() -> Dict[Tuple[str, str], int]:
    config = GraphConfig()
    return all_pair_distances(load_network(config.locations_path, config.roads_path))


@pytest.fixture
def pair_distances():
    return all_pair_distances


@pytest.fixture
def diamond_network() -> RoadNetwork:
    # A-B-D is 3 km, A-C-D is 5 km, E is isolated
    network = RoadNetwork()
    network.add_edge("A", "B", 1)
    network.add_edge("B", "D", 2)
    network.add_edge("A", "C", 1)
    network.add_edge("C", "D", 4)
    network.add_vertex("E")
    return network
