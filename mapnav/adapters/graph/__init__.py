"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVNetworkRepository: Loads the road network from CSV files
"""

from .csv_repository import CSVNetworkRepository

__all__ = ["CSVNetworkRepository"]
