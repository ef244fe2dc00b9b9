from lp_optimizer.schemas import LinearExpr, LinearTerm, LPModel, VariableSpec
from lp_optimizer.server import render_lp_document, solve_lp_model
from lp_optimizer import SolveOptions

from helpers import LOWER_BOUND_ENGINE, write_engine


def make_model() -> LPModel:
    return LPModel(
        name="tool",
        sense="max",
        objective=LinearExpr(terms=[LinearTerm(var="x", coef=1.0)]),
        variables=[VariableSpec(name="x", lb=1.0, ub=4.0)],
    )


def test_render_tool():
    text = render_lp_document(make_model())

    assert text.startswith("Maximize\nobj: 1.000000 x + 0.000000\n")
    assert "1.000000 <= x <= 4.000000\n" in text


def test_solve_tool_returns_solution(tmp_path):
    engine = write_engine(tmp_path, LOWER_BOUND_ENGINE)

    result = solve_lp_model(make_model(), SolveOptions(executable=engine, temp_dir=str(tmp_path)))

    assert result["solution"]["status"] == "Optimal"
    assert result["solution"]["x"] == {"x": 1.0}
    assert result["solution"]["objective_value"] == 1.0


def test_solve_tool_reports_errors(tmp_path):
    result = solve_lp_model(make_model(), SolveOptions(executable=str(tmp_path / "missing")))

    assert result["solution"] is None
    assert "could not launch" in result["error"]
