#!/usr/bin/env python3
import argparse
import random
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from simplex_tableau.schemas import LPProblem


def generate_random_lp(num_vars: int, num_constraints: int, seed: Optional[int] = None) -> LPProblem:
    """Positive coefficients and rhs: the slack basis is feasible and every variable is capped."""
    rng = random.Random(seed)
    constraints: List[List[float]] = []
    rhs: List[float] = []
    for _ in range(num_constraints):
        constraints.append([rng.uniform(0.5, 5.0) for _ in range(num_vars)])
        rhs.append(rng.uniform(num_vars * 2.0, num_vars * 6.0))
    objective = [rng.uniform(1.0, 4.0) for _ in range(num_vars)]
    return LPProblem(
        name=f"random-{seed}",
        objective=objective,
        constraints=constraints,
        rhs=rhs,
    )


def write_jsonl(problems: Iterable[LPProblem], out) -> None:
    for problem in problems:
        out.write(problem.model_dump_json() + "\n")


def read_jsonl(path: Path) -> List[LPProblem]:
    lines = path.read_text().splitlines()
    return [LPProblem.model_validate_json(line) for line in lines if line.strip()]


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Write random feasible bounded LPs as JSON lines, one LPProblem per line."
    )
    parser.add_argument("shape", nargs="?", default="3x3", help="VARSxCONSTRAINTS, e.g. 4x2")
    parser.add_argument("-n", "--count", type=int, default=1)
    parser.add_argument("--first-seed", type=int, default=0)
    parser.add_argument("-o", "--output", type=Path, default=None, help="JSONL file (default: stdout)")
    args = parser.parse_args()

    num_vars, _, num_constraints = args.shape.lower().partition("x")
    problems = (
        generate_random_lp(int(num_vars), int(num_constraints), args.first_seed + offset)
        for offset in range(args.count)
    )

    if args.output is None:
        write_jsonl(problems, sys.stdout)
    else:
        with args.output.open("w") as fh:
            write_jsonl(problems, fh)


if __name__ == "__main__":
    main()
