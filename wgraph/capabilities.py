"""Protocols describing what external graph code may rely on.

A graph container or algorithm written against these protocols works with
:class:`~wgraph.models.Vertex`, :class:`~wgraph.models.Edge` and
:class:`~wgraph.models.Location`, or with any other implementation that
provides the same members.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Coordinate(Protocol):
    """A geographic location value."""

    x: float
    y: float
    z: float

    def distance(self, other: Any) -> float:
        """Distance to another coordinate."""
        ...


@runtime_checkable
class EdgeCapability(Protocol):
    """A directed, weighted edge between two vertex keys."""

    tag: int
    info: str
    weight: float

    @property
    def source(self) -> int: ...

    @property
    def dest(self) -> int: ...


@runtime_checkable
class VertexCapability(Protocol):
    """A vertex with scalar scratch state and outgoing adjacency."""

    tag: int
    info: str
    weight: float
    location: Any

    @property
    def key(self) -> int: ...

    @property
    def neighbors(self) -> Iterable[Any]: ...

    @property
    def edges(self) -> Iterable[Any]: ...

    def has_edge_to(self, dest_key: int) -> bool: ...

    def get_edge(self, dest_key: int) -> Any: ...

    def add_neighbor(self, target: Any, weight: float) -> Any: ...

    def remove_node(self, node: Any) -> Any: ...
