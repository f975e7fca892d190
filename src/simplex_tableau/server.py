from mcp.server.fastmcp import FastMCP
from .schemas import LPProblem, SolveOptions
from .lp.simplex import simplex_solve

mcp = FastMCP("Simplex Tableau")


@mcp.tool()
def solve_lp(problem: LPProblem, options: SolveOptions | None = None) -> dict:
    "Maximise c.x subject to Ax <= b, x >= 0 with the tableau simplex method; b must be nonnegative."
    opts = options or SolveOptions()
    return simplex_solve(problem, opts).model_dump()


if __name__ == "__main__":
    # Allow: `python -m simplex_tableau.server` (stdio transport)
    mcp.run()
