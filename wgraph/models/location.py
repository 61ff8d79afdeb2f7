"""Geographic location value type attached to vertices."""

from __future__ import annotations

import math
from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class Location(BaseModel):
    """A mutable 3D coordinate with value equality.

    Vertices never share a Location with their caller: every assignment to
    ``Vertex.location`` stores a copy.
    """

    model_config: ClassVar[dict] = ConfigDict(validate_assignment=True)

    x: float
    y: float
    z: float = 0.0

    def distance(self, other: "Location") -> float:
        """Euclidean distance to another location."""
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

    def __str__(self):
        return f"{self.x},{self.y},{self.z}"
