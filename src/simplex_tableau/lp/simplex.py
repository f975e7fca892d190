import logging
from typing import List, Optional, Sequence

import numpy as np

from .rounding import round_half_away
from .tableau import initialize_tableau, objective_value, pivot, pivot_column, pivot_row
from ..schemas import (
    InapplicableResult,
    LPProblem,
    OptimalResult,
    SimplexResult,
    SolveOptions,
    UnboundedResult,
)

logger = logging.getLogger(__name__)


def simplex_solve(problem: LPProblem, opts: Optional[SolveOptions] = None) -> SimplexResult:
    """Solve a validated ``LPProblem`` with the tableau simplex method."""

    opts = opts or SolveOptions()
    logger.debug(
        "Solving '%s': %d variables, %d constraints",
        problem.name,
        len(problem.objective),
        len(problem.rhs),
    )
    return simplex_method(
        problem.objective,
        problem.constraints,
        problem.rhs,
        precision=opts.precision,
        epsilon=opts.epsilon,
    )


def simplex_method(
    c: Sequence[float],
    A: Sequence[Sequence[float]],
    b: Sequence[float],
    precision: int = 6,
    epsilon: float = 1e-6,
) -> SimplexResult:
    """
    Maximise c.x subject to Ax <= b, x >= 0 starting from the all-slack basis.

    Every b_i must be nonnegative; this is not checked. Terminal states are
    returned, never raised: ``OptimalResult`` with rounded solution and value,
    ``UnboundedResult`` when the entering column has no positive entry, or
    ``InapplicableResult`` when a pivot leaves the objective where the previous
    pivot put it (within ``epsilon``) while some reduced cost is still negative.
    """

    tableau, basis = initialize_tableau(c, A, b)
    n = tableau.shape[1] - tableau.shape[0]
    iterations = 0
    # no pivot has run yet, so the first pivot can never look stalled
    previous_z = -np.inf

    while True:
        col = pivot_column(tableau)
        if col is None:
            solution = _extract_solution(tableau, basis, n, precision)
            value = round_half_away(objective_value(tableau), precision)
            logger.info("Optimal after %d pivots: objective %s", iterations, value)
            return OptimalResult(solution=solution, objective_value=value, iterations=iterations)

        row = pivot_row(tableau, col)
        if row is None:
            logger.info("Unbounded: column %d has no positive entry (after %d pivots)", col, iterations)
            return UnboundedResult(iterations=iterations)

        basis[row] = col
        pivot(tableau, row, col)
        iterations += 1
        current_z = objective_value(tableau)
        logger.debug("Pivot %d: enter %d, leave row %d, objective %.12g", iterations, col, row, current_z)

        if abs(current_z - previous_z) < epsilon and np.any(tableau[-1] < 0):
            logger.info(
                "Objective stalled at %.12g with negative reduced costs left; giving up after %d pivots",
                current_z,
                iterations,
            )
            return InapplicableResult(iterations=iterations)
        previous_z = current_z


def _extract_solution(tableau: np.ndarray, basis: List[int], n: int, precision: int) -> List[float]:
    x = np.zeros(n)
    for row, var in enumerate(basis):
        if var < n:
            x[var] = tableau[row, -1]
    return [round_half_away(value, precision) for value in x]
