"""Configuration objects for face reconstruction."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import EPS_AREA, EPS_TURN, EPS_LENGTH

ORDERINGS = ('relative', 'global')
OUTER_BOUNDARY_RULES = ('turn', 'winding')


@dataclass(frozen=True)
class ReconstructionConfig:
    """Options for :func:`wireface.core.mesh.reconstruct`.

    Attributes
    ----------
    ordering : str
        ``'relative'`` ranks incident edges by clockwise turn from an entry
        edge; ``'global'`` sorts them by absolute atan2 angle.
    outer_boundary : str
        ``'turn'`` abandons a trace at the first turn sharper than a straight
        line. ``'winding'`` tolerates reflex turns and drops a closed cycle
        only when its signed area is not positive, which keeps concave faces.
    validate : bool
        Check index ranges, finiteness and edge lengths before building.
    workers : int
        Number of threads for the seed loop; 1 traces serially.
    turn_tol, area_tol, length_tol : float
        Tolerances for the turn test, the winding test and validation.
    """
    ordering: str = 'relative'
    outer_boundary: str = 'turn'
    validate: bool = False
    workers: int = 1
    turn_tol: float = EPS_TURN
    area_tol: float = EPS_AREA
    length_tol: float = EPS_LENGTH

    def __post_init__(self):
        if self.ordering not in ORDERINGS:
            raise ValueError(f"ordering must be one of {ORDERINGS}, got {self.ordering!r}")
        if self.outer_boundary not in OUTER_BOUNDARY_RULES:
            raise ValueError(
                f"outer_boundary must be one of {OUTER_BOUNDARY_RULES}, got {self.outer_boundary!r}")
        if int(self.workers) < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")


__all__ = ['ReconstructionConfig', 'ORDERINGS', 'OUTER_BOUNDARY_RULES']
