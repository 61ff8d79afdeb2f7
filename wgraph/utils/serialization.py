"""Snapshot helpers for converting vertices and edges to and from plain dicts.

The dicts are JSON-compatible. How they are written to disk or sent over
the wire is up to the persistence layer using them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from wgraph.exceptions import SnapshotError
from wgraph.models.edge import Edge
from wgraph.models.vertex import Vertex

log = logging.getLogger(__name__)


def dump_edge(edge: Edge) -> dict[str, Any]:
    """Serialize an edge's fields to a dict."""
    return edge.model_dump(mode="json")


def dump_vertex(vertex: Vertex, include_edges: bool = True) -> dict[str, Any]:
    """Serialize a vertex's scalar state, location and (optionally) its edges.

    Edges are listed in destination key order so equal vertices produce
    equal snapshots.
    """
    data = vertex.model_dump(mode="json")
    if include_edges:
        data["edges"] = [dump_edge(e) for e in sorted(vertex.edges, key=lambda e: e.dest)]
    return data


def load_vertex(data: Mapping[str, Any]) -> Vertex:
    """Hydrate a vertex's scalar state and location from a snapshot dict.

    Any ``edges`` entry is ignored; restore connectivity with
    :func:`load_edges` once every vertex of the graph exists.
    """
    if "key" not in data:
        raise SnapshotError(f"Vertex snapshot has no key: {dict(data)!r}")
    props = {k: v for k, v in data.items() if k != "edges"}
    return Vertex.model_validate(props)


def load_edges(
    vertex: Vertex,
    data: Mapping[str, Any],
    lookup: Mapping[int, Vertex],
) -> list[Edge]:
    """Recreate ``vertex``'s outgoing edges from its snapshot.

    Records are restored exactly as dumped, without going through
    :meth:`Vertex.add_neighbor`: no hooks fire and a negative weight written
    through ``Edge.weight`` comes back unchanged. Every record is checked
    first; on SnapshotError the vertex is left untouched.

    Args:
        vertex: The vertex the snapshot was taken from (matching key).
        data: The snapshot dict, as produced by :func:`dump_vertex`.
        lookup: Destination key to vertex, typically the owning graph's
            vertex table.

    Returns:
        The restored edges, in snapshot order.
    """
    pending: list[tuple[Vertex, Edge]] = []
    seen: set[int] = set()
    for record in data.get("edges", []):
        missing = [k for k in ("dest", "weight") if k not in record]
        if missing:
            raise SnapshotError(
                f"Edge record of vertex {vertex.key} is missing {', '.join(missing)}: {record!r}"
            )
        source = record.get("source", vertex.key)
        dest = record["dest"]
        if source != vertex.key:
            raise SnapshotError(f"Edge {source} -> {dest} does not start at vertex {vertex.key}")
        if dest == vertex.key:
            raise SnapshotError(f"Edge {vertex.key} -> {dest} is a self-loop")
        if dest in seen:
            raise SnapshotError(f"Edge {vertex.key} -> {dest} appears more than once")
        target = lookup.get(dest)
        if target is None:
            raise SnapshotError(f"Edge {vertex.key} -> {dest} points at an unknown vertex")

        try:
            edge = Edge(
                source=vertex.key,
                dest=dest,
                weight=record["weight"],
                tag=record.get("tag", 0),
                info=record.get("info", ""),
            )
        except ValidationError as e:
            raise SnapshotError(f"Edge {vertex.key} -> {dest} is invalid: {e}") from e
        seen.add(dest)
        pending.append((target, edge))

    restored = []
    for target, edge in pending:
        vertex._neighbors[edge.dest] = target
        vertex._edges[edge.dest] = edge
        restored.append(edge)

    log.debug("Restored %d edges for vertex %s", len(restored), vertex.key)
    return restored
