"""Road network loading from CSV files.

Expected files:
- locations CSV with a ``name`` column, one location per row
- roads CSV with ``source``, ``destination`` and ``distance_km`` columns
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Union

from ..domain.errors import GraphError
from .network import RoadNetwork


def load_network(
    locations_path: Union[str, Path], roads_path: Union[str, Path]
) -> RoadNetwork:
    network = RoadNetwork()

    # 1) Register every location in file order
    with Path(locations_path).open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            name = (row["name"] or "").strip()
            if name:
                network.add_vertex(name)

    # 2) Add the roads; each row is undirected
    with Path(roads_path).open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            source = (row["source"] or "").strip()
            destination = (row["destination"] or "").strip()
            distance_str = (row["distance_km"] or "").strip()

            if not source or not destination or not distance_str:
                raise GraphError(
                    "Incomplete road row",
                    file_path=str(roads_path),
                    line=reader.line_num,
                )

            try:
                distance = int(distance_str)
            except ValueError as e:
                raise GraphError(
                    f"Invalid road length {distance_str!r}",
                    file_path=str(roads_path),
                    line=reader.line_num,
                    cause=e,
                ) from e

            try:
                network.add_edge(source, destination, distance)
            except GraphError as e:
                raise GraphError(
                    e.message,
                    file_path=str(roads_path),
                    line=reader.line_num,
                    cause=e,
                ) from e

    return network
