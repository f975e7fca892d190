import numpy as np
from typing import List, Optional, Sequence, Tuple


def initialize_tableau(
    c: Sequence[float],
    A: Sequence[Sequence[float]],
    b: Sequence[float],
) -> Tuple[np.ndarray, List[int]]:
    """
    Build the (m + 1) x (n + m + 1) tableau for max c.x s.t. Ax <= b, x >= 0.

    Constraint rows carry [A_i | e_i | b_i]; the last row is [-c | 0 | 0].
    The starting basis is the slack columns n..n+m-1, which is feasible only
    when every b_i >= 0.
    """

    c_vec = np.asarray(c, dtype=float).reshape(-1)
    b_vec = np.asarray(b, dtype=float).reshape(-1)
    n = c_vec.size
    m = b_vec.size
    A_mat = np.asarray(A, dtype=float)
    if m == 0:
        A_mat = A_mat.reshape(0, n)
    if A_mat.shape != (m, n):
        raise ValueError(f"Constraint matrix has shape {A_mat.shape}, expected ({m}, {n}).")

    tableau = np.zeros((m + 1, n + m + 1), dtype=float)
    tableau[:m, :n] = A_mat
    tableau[:m, n : n + m] = np.eye(m)
    tableau[:m, -1] = b_vec
    tableau[m, :n] = -c_vec

    basis = list(range(n, n + m))
    return tableau, basis


def objective_value(tableau: np.ndarray) -> float:
    return float(tableau[-1, -1])


def pivot_column(tableau: np.ndarray) -> Optional[int]:
    """Dantzig rule: most negative reduced cost, leftmost on ties. None when optimal."""

    reduced = tableau[-1, :-1]
    if reduced.size == 0:
        return None
    col = int(np.argmin(reduced))
    if reduced[col] >= 0:
        return None
    return col


def pivot_row(tableau: np.ndarray, col: int) -> Optional[int]:
    """Minimum ratio test on column ``col``, lowest row on ties. None when unbounded."""

    entries = tableau[:-1, col]
    rhs = tableau[:-1, -1]
    positive = entries > 0
    if not np.any(positive):
        return None

    ratios = np.full(entries.shape, np.inf)
    ratios[positive] = rhs[positive] / entries[positive]
    row = int(np.argmin(ratios))
    if np.isinf(ratios[row]):
        return None
    return row


def pivot(tableau: np.ndarray, row: int, col: int) -> None:
    """Gauss-Jordan step in place: column ``col`` becomes the unit vector e_row."""

    tableau[row, :] = tableau[row, :] / tableau[row, col]
    for i in range(tableau.shape[0]):
        if i == row:
            continue
        factor = tableau[i, col]
        if factor != 0.0:
            tableau[i, :] -= factor * tableau[row, :]
