from .base import GraphModel
from .edge import Edge
from .location import Location
from .vertex import Connection, Vertex

__all__ = ["GraphModel", "Edge", "Location", "Connection", "Vertex"]
