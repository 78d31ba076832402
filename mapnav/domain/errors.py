"""Typed domain errors for the map navigator.

Every error a caller may need to react to has its own type so the
presentation layer can turn it into a user-facing message instead of
crashing.

All errors inherit from NavigatorError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NavigatorError(Exception):
    """Base error for the navigator domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownVertexError(NavigatorError):
    """A query referenced a location that is not in the network.

    Attributes:
        location: The location name that was not found
    """

    location: str = ""


@dataclass
class NoPathFoundError(NavigatorError):
    """Both locations exist but no road connects them.

    The graph engine reports this outcome as ``None``/``False``; only the
    strict service API raises it.

    Attributes:
        source: Departure location
        destination: Arrival location
    """

    source: str = ""
    destination: str = ""


@dataclass
class GraphError(NavigatorError):
    """Map data could not be loaded or describes an invalid road.

    Attributes:
        file_path: Path to the map data file if relevant
        line: 1-based line number of the offending CSV row, if known
    """

    file_path: Optional[str] = None
    line: Optional[int] = None
