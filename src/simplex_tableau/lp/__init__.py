"""Tableau simplex routines for Simplex Tableau."""

from .simplex import simplex_method, simplex_solve
from .tableau import initialize_tableau, pivot, pivot_column, pivot_row

__all__ = [
    "simplex_method",
    "simplex_solve",
    "initialize_tableau",
    "pivot",
    "pivot_column",
    "pivot_row",
]
