"""wgraph: vertex and edge models for directed weighted graphs."""

from .models import Connection, Edge, Location, Vertex
from .keys import KeyGenerator, default_key_generator
from .capabilities import Coordinate, EdgeCapability, VertexCapability
from .event import listen, listens_for, remove

__version__ = "0.1.0"

__all__ = [
    "Vertex",
    "Edge",
    "Location",
    "Connection",
    "KeyGenerator",
    "default_key_generator",
    "Coordinate",
    "EdgeCapability",
    "VertexCapability",
    "listen",
    "listens_for",
    "remove",
]
