#!/usr/bin/env python3
import argparse
import json
import logging
import time
from pathlib import Path
from typing import List, Tuple

from simplex_tableau.lp.simplex import simplex_solve
from simplex_tableau.schemas import LPProblem, OptimalResult, SolveOptions
from scripts.generate_instances import generate_random_lp, read_jsonl

FIXED_CASES = [
    LPProblem(
        name="Test 1",
        objective=[9, 10, 16],
        constraints=[[18, 15, 12], [6, 4, 8], [5, 3, 3]],
        rhs=[360, 192, 180],
    ),
    LPProblem(
        name="Test 2",
        objective=[1, 2, -1, 1],
        constraints=[[1, -1, 0, 1], [1, -2, 1, 0]],
        rhs=[1, 1],
    ),
    # negative rhs: the slack basis is infeasible, kept to show what the method does anyway
    LPProblem(
        name="Test 3",
        objective=[1, 2],
        constraints=[[1, -2], [-1, -1], [1, -1], [0, 1]],
        rhs=[-2, -4, 2, 6],
    ),
    LPProblem(
        name="Test 4",
        objective=[3, 4],
        constraints=[[4, 1], [-1, 1]],
        rhs=[8, 3],
    ),
    LPProblem(
        name="Test 5",
        objective=[5, 4],
        constraints=[[6, 4], [1, 2], [-1, 1], [0, 1]],
        rhs=[24, 6, 1, 2],
    ),
]


def load_example(name: str) -> LPProblem:
    path = Path(__file__).resolve().parent.parent / "examples" / name
    return LPProblem.model_validate(json.loads(path.read_text()))


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the fixed simplex test problems.")
    parser.add_argument("--precision", type=int, default=6, help="Decimal places in reported values")
    parser.add_argument("--epsilon", type=float, default=1e-6, help="Stagnation tolerance")
    parser.add_argument("--random", type=int, default=0, help="Also solve this many random instances")
    parser.add_argument("--instances", type=Path, default=None, help="Also solve the LPs in this JSONL file")
    parser.add_argument("--verbose", action="store_true", help="Log every pivot")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    opts = SolveOptions(precision=args.precision, epsilon=args.epsilon)
    cases: List[Tuple[str, LPProblem]] = [(problem.name, problem) for problem in FIXED_CASES]
    cases.append(("examples/textbook_lp.json", load_example("textbook_lp.json")))
    for seed in range(args.random):
        cases.append((f"random-{seed}", generate_random_lp(3, 3, seed)))
    if args.instances is not None:
        cases.extend((problem.name, problem) for problem in read_jsonl(args.instances))

    for name, problem in cases:
        start = time.perf_counter()
        result = simplex_solve(problem, opts)
        elapsed_ms = (time.perf_counter() - start) * 1000
        print(f"{name}:")
        if isinstance(result, OptimalResult):
            print(f"Solution: {result.solution}")
            print(f"Optimal Value: {result.objective_value}")
        else:
            print(result.message)
        print(f"({result.iterations} pivots, {elapsed_ms:.2f} ms)")
        print("------------------------------")


if __name__ == "__main__":
    main()
