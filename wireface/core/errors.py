"""Exception hierarchy for wireface."""
from __future__ import annotations


class WirefaceError(Exception):
    """Base class for every error raised by wireface."""


class InvalidGraphError(WirefaceError, ValueError):
    """Input arrays violate a precondition (shape, index range, degenerate edge)."""


class TraceConsistencyError(WirefaceError, RuntimeError):
    """A face trace failed to stop within the half-edge bound.

    This signals a broken adjacency table rather than bad data and is never
    recovered from inside the package.
    """


class MeshFormatError(WirefaceError, ValueError):
    """A serialized mesh document is malformed."""


__all__ = ['WirefaceError', 'InvalidGraphError', 'TraceConsistencyError', 'MeshFormatError']
