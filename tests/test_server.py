import pytest

from simplex_tableau.schemas import LPProblem, SolveOptions
from simplex_tableau.server import solve_lp


def test_solve_lp_tool_returns_plain_dict():
    problem = LPProblem(name="toy", objective=[3, 4], constraints=[[4, 1], [-1, 1]], rhs=[8, 3])
    payload = solve_lp(problem)

    assert payload["status"] == "optimal"
    assert payload["solution"] == pytest.approx([1.0, 4.0])
    assert payload["objective_value"] == pytest.approx(19.0)


def test_solve_lp_tool_reports_unbounded():
    problem = LPProblem(objective=[1], constraints=[[-1]], rhs=[1])
    payload = solve_lp(problem, SolveOptions(precision=2))

    assert payload == {"status": "unbounded", "iterations": 0, "message": "Unbounded solution"}
