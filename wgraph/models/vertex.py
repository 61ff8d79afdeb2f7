"""Vertex model: scalar attributes plus outgoing adjacency."""

from __future__ import annotations

import enum
import logging
from collections.abc import ValuesView

from pydantic import Field, PrivateAttr, field_validator

from wgraph.event import dispatch
from wgraph.exceptions import EdgeNotFoundError
from wgraph.keys import next_default_key

from .base import GraphModel
from .edge import Edge
from .location import Location

log = logging.getLogger(__name__)


class Connection(enum.Enum):
    """Outcome of :meth:`Vertex.add_neighbor`."""

    ADDED = "added"
    UPDATED = "updated"
    REJECTED_SELF_LOOP = "rejected_self_loop"
    REJECTED_NEGATIVE_WEIGHT = "rejected_negative_weight"

    @property
    def accepted(self) -> bool:
        return self in (Connection.ADDED, Connection.UPDATED)


class Vertex(GraphModel):
    """A vertex of a directed weighted graph and its outgoing edges.

    Scalar state (``key``, ``tag``, ``info``, ``weight``, ``location``) is held
    in pydantic fields. Adjacency is held in two private maps keyed by
    destination key: one to the neighbor vertices (non-owning references, the
    owning graph holds the vertices) and one to the owned :class:`Edge`
    records. Both maps always have the same key set.

    Construct with an explicit key or let one be drawn from
    ``wgraph.keys.default_key_generator``:

        a = Vertex(key=5)
        b = Vertex(key=7, info="depot")
        a.add_neighbor(b, 3.2)
    """

    key: int = Field(default_factory=next_default_key, frozen=True)
    location: Location | None = None
    weight: float = 0.0

    _neighbors: dict[int, "Vertex"] = PrivateAttr(default_factory=dict)
    _edges: dict[int, Edge] = PrivateAttr(default_factory=dict)

    @field_validator("location")
    @classmethod
    def _copy_location(cls, value: Location | None) -> Location | None:
        # Never keep a reference to the caller's object.
        return value.model_copy() if value is not None else None

    @classmethod
    def copy_of(cls, other: "Vertex") -> "Vertex":
        """Copy ``other``'s scalar state into a new vertex with no connectivity.

        The key, tag, info and weight are copied, the location is copied into
        a distinct but equal instance, and the neighbor and edge maps start
        empty. Rebuilding edges is left to the caller (usually a graph copying
        itself vertex by vertex).
        """
        return cls(
            key=other.key,
            tag=other.tag,
            info=other.info,
            weight=other.weight,
            location=other.location,
        )

    def __copy__(self):
        return self.copy_of(self)

    def __deepcopy__(self, memo=None):
        return self.copy_of(self)

    # === Adjacency ===

    @property
    def neighbors(self) -> ValuesView["Vertex"]:
        """Live view of the neighbor vertices.

        The view reflects later changes. Adding or removing neighbors while
        iterating it raises ``RuntimeError``; iterate over ``list(...)`` of it
        when mutating.
        """
        return self._neighbors.values()

    @property
    def edges(self) -> ValuesView[Edge]:
        """Live view of the outgoing edges. Same iteration rules as :attr:`neighbors`."""
        return self._edges.values()

    @property
    def out_degree(self) -> int:
        return len(self._edges)

    def has_edge_to(self, dest_key: int) -> bool:
        return dest_key in self._edges

    def get_edge(self, dest_key: int) -> Edge | None:
        """Return the outgoing edge to ``dest_key``, or None if there is none."""
        if self.has_edge_to(dest_key):
            return self._edges[dest_key]
        return None

    def require_edge(self, dest_key: int) -> Edge:
        """Like :meth:`get_edge` but raise EdgeNotFoundError when absent."""
        edge = self.get_edge(dest_key)
        if edge is None:
            raise EdgeNotFoundError(f"Vertex {self.key} has no edge to {dest_key}")
        return edge

    def add_neighbor(self, target: "Vertex", weight: float) -> Connection:
        """Connect this vertex to ``target`` with the given edge weight.

        A new edge is created if none exists; otherwise the existing edge is
        re-weighted in place. Self-loops and negative (or NaN) weights leave
        the vertex unchanged. The returned :class:`Connection` tells which of
        these happened; invalid input never raises.
        """
        dispatch(self, "pre_add_neighbor", neighbor=target, weight=weight)

        dest = target.key
        if dest == self.key:
            outcome = Connection.REJECTED_SELF_LOOP
        elif not weight >= 0:
            outcome = Connection.REJECTED_NEGATIVE_WEIGHT
        elif dest in self._edges:
            self._edges[dest].weight = weight
            outcome = Connection.UPDATED
        else:
            self._neighbors[dest] = target
            self._edges[dest] = Edge(source=self.key, dest=dest, weight=weight)
            outcome = Connection.ADDED

        if outcome.accepted:
            log.debug("Edge %s -> %s %s (weight=%s)", self.key, dest, outcome.value, weight)
        else:
            log.debug("Ignored edge %s -> %s: %s (weight=%s)", self.key, dest, outcome.value, weight)

        dispatch(self, "post_add_neighbor", neighbor=target, weight=weight, outcome=outcome)
        return outcome

    def remove_node(self, node: "Vertex") -> bool:
        """Drop the edge to ``node`` (and the neighbor reference) if present.

        Returns True if an edge was removed.
        """
        dispatch(self, "pre_remove_node", node=node)

        removed = node.key in self._neighbors
        if removed:
            del self._neighbors[node.key]
            del self._edges[node.key]
            log.debug("Edge %s -> %s removed", self.key, node.key)

        dispatch(self, "post_remove_node", node=node, removed=removed)
        return removed

    # === Scratch / equality ===

    def reset_scratch(self) -> None:
        """Clear ``tag``, ``info`` and ``weight`` back to their defaults."""
        super().reset_scratch()
        self.weight = 0.0

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        if self.tag != other.tag or self.info != other.info:
            return False
        if self.key != other.key or not _same_edges(self._edges, other._edges):
            return False
        if self.weight != other.weight:
            return False
        if self.location is None or other.location is None:
            return self.location is None and other.location is None
        return self.location == other.location

    def __str__(self):
        return str(self.key)


def _same_edges(mine: dict[int, Edge], theirs: dict[int, Edge]) -> bool:
    """Compare edge maps by value: same destination keys, pointwise-equal edges."""
    if mine.keys() != theirs.keys():
        return False
    return all(mine[dest] == theirs[dest] for dest in mine)
