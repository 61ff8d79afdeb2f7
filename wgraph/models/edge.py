"""Edge model for directed, weighted edges owned by a vertex."""

from __future__ import annotations

from pydantic import Field

from .base import GraphModel


class Edge(GraphModel):
    """A directed, weighted connection from ``source`` to ``dest``.

    Edges are created by :meth:`Vertex.add_neighbor` and owned by the source
    vertex. ``source`` and ``dest`` are fixed at construction.

    Assigning ``weight`` directly performs no sign check; only
    ``Vertex.add_neighbor`` rejects negative weights. Code that writes
    ``edge.weight`` itself is trusted to keep it non-negative.
    """

    source: int = Field(frozen=True)
    dest: int = Field(frozen=True)
    weight: float

    def reversed(self, weight: float | None = None) -> "Edge":
        """Return a new, unowned edge pointing from ``dest`` back to ``source``.

        The returned edge keeps this edge's weight unless ``weight`` is given.
        Scratch fields start empty. Nothing is inserted into any vertex.
        """
        return Edge(
            source=self.dest,
            dest=self.source,
            weight=self.weight if weight is None else weight,
        )

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            self.weight == other.weight
            and self.source == other.source
            and self.dest == other.dest
            and self.tag == other.tag
            and self.info == other.info
        )

    def __str__(self):
        return str(self.dest)
