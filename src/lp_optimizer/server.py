from __future__ import annotations

import logging
import os

from mcp.server.fastmcp import FastMCP

from .config import SolveOptions
from .errors import OptimizerError
from .lp.writer import render_lp
from .schemas import LPModel, build_problem, solution_of
from .solvers.cbc import CbcGateway

logger = logging.getLogger(__name__)

mcp = FastMCP("LP Optimizer")


@mcp.tool()
def render_lp_document(model: LPModel) -> str:
    "Render a model as the LP document handed to the solving engine."
    return render_lp(build_problem(model))


@mcp.tool()
def solve_lp_model(model: LPModel, options: SolveOptions | None = None) -> dict:
    """
    Solve a linear or mixed-integer model with an external CBC-compatible engine.

    Options default to the LP_OPTIMIZER_* environment variables. The engine's
    status string is returned as-is together with the variable values and any
    bound or constraint the values violate.
    """
    opts = options or SolveOptions.from_env()
    problem = build_problem(model)
    try:
        problem.solve(CbcGateway(options=opts), opts)
    except OptimizerError as e:
        logger.error(f"Solve of '{model.name}' failed: {e}")
        return {
            "error": str(e),
            "model": model.model_dump(),
            "solution": None,
        }
    return {
        "model": model.model_dump(),
        "solution": solution_of(problem).model_dump(),
    }


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    transport = os.environ.get("MCP_TRANSPORT", "stdio")
    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.settings.host = "0.0.0.0"
        mcp.settings.port = int(os.environ.get("PORT", "8081"))
        mcp.run(transport="streamable-http")
