"""Simplex Tableau: the textbook tableau simplex method for max c.x, Ax <= b, x >= 0."""

from .lp import simplex_method, simplex_solve
from .schemas import (
    InapplicableResult,
    LPProblem,
    OptimalResult,
    SimplexResult,
    SolveOptions,
    UnboundedResult,
)

__all__ = [
    "simplex_method",
    "simplex_solve",
    "LPProblem",
    "SolveOptions",
    "SimplexResult",
    "OptimalResult",
    "UnboundedResult",
    "InapplicableResult",
]
