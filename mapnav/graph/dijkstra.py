"""Shortest-path computation using Dijkstra's algorithm.

A single run produces both the distance table and the predecessor links,
so the route and its length always come from the same search.
"""

from __future__ import annotations

import heapq
import math
from typing import Dict, List, Mapping, Optional, Set, Tuple

# Maps location name -> {neighbor name: distance_km}
Adjacency = Mapping[str, Mapping[str, int]]


def shortest_path_tree(
    adjacency: Adjacency, start: str, end: Optional[str] = None
) -> Tuple[Dict[str, float], Dict[str, str]]:
    """Run Dijkstra from ``start`` over a non-negatively weighted graph.

    Parameters
    ----------
    adjacency:
        Symmetric adjacency mapping of the road network.
    start:
        Location the search starts from. Must be a key of ``adjacency``.
    end:
        Optional target. The search stops as soon as ``end`` is settled;
        its distance and predecessor chain are final at that point.

    Returns
    -------
    dict[str, float], dict[str, str]
        Tentative distances (``math.inf`` for locations not reached) and
        the predecessor of every reached location except ``start``.
    """
    distances: Dict[str, float] = {location: math.inf for location in adjacency}
    previous: Dict[str, str] = {}
    distances[start] = 0

    heap: List[Tuple[float, str]] = [(0, start)]
    settled: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Stale entry left behind by a later improvement
        if u in settled:
            continue
        settled.add(u)

        if u == end:
            break

        for v, weight in adjacency[u].items():
            if v in settled:
                continue
            new_distance = distances[u] + weight
            if new_distance < distances.get(v, math.inf):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    return distances, previous


def reconstruct_path(previous: Mapping[str, str], start: str, end: str) -> List[str]:
    """Follow predecessor links from ``end`` back to ``start``.

    ``end`` must have been reached by the search that built ``previous``.
    """
    path = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)
    path.reverse()
    return path


def dijkstra(
    adjacency: Adjacency, start: str, end: str
) -> Optional[Tuple[List[str], int]]:
    """Compute the shortest path between two locations.

    Returns
    -------
    list[str], int or None
        The locations from ``start`` to ``end`` (inclusive) and the total
        distance, or ``None`` if ``end`` cannot be reached.
    """
    distances, previous = shortest_path_tree(adjacency, start, end)

    if math.isinf(distances[end]):
        return None

    return reconstruct_path(previous, start, end), int(distances[end])
