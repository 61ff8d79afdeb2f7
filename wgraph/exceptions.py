"""Custom exceptions for wgraph."""


class WGraphError(Exception):
    """Base exception for all wgraph errors."""


class EdgeNotFoundError(WGraphError):
    """Raised when a required outgoing edge does not exist."""


class SnapshotError(WGraphError):
    """Raised when a vertex or edge snapshot cannot be restored."""
