import numpy as np
import pytest
from scipy.optimize import linprog

from scripts.generate_instances import generate_random_lp
from simplex_tableau.lp.simplex import simplex_solve
from simplex_tableau.schemas import OptimalResult, SolveOptions


@pytest.mark.parametrize("seed", range(8))
@pytest.mark.parametrize("num_vars, num_constraints", [(3, 3), (4, 2), (2, 5)])
def test_matches_highs_on_random_instances(seed, num_vars, num_constraints):
    model = generate_random_lp(num_vars, num_constraints, seed)
    result = simplex_solve(model, SolveOptions(precision=9))

    reference = linprog(
        -np.array(model.objective),
        A_ub=np.array(model.constraints),
        b_ub=np.array(model.rhs),
        bounds=[(0, None)] * num_vars,
        method="highs",
    )
    assert reference.success

    assert isinstance(result, OptimalResult)
    assert result.objective_value == pytest.approx(-reference.fun, rel=1e-6)
    x = np.array(result.solution)
    assert np.all(x >= 0)
    assert np.all(np.array(model.constraints) @ x <= np.array(model.rhs) + 1e-6)
