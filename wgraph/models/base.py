"""Base model shared by vertices and edges."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class GraphModel(BaseModel):
    """Base for all graph entities (vertices and edges).

    Carries the scratch fields external algorithms use to mark or annotate
    an entity without touching its structural state. ``tag`` and ``info``
    have no meaning inside wgraph.
    """

    model_config: ClassVar[dict] = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    tag: int = 0
    info: str = ""

    def reset_scratch(self) -> None:
        """Clear ``tag`` and ``info`` back to their defaults."""
        self.tag = 0
        self.info = ""
