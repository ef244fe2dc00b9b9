from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .builders import ConstraintBuilder, ObjectiveBuilder
from .lp.utils import find_violations, objective_value
from .model import VarKind
from .problem import Problem

Sense = Literal["min", "max"]
Cmp = Literal["<=", ">=", "=="]


class VariableSpec(BaseModel):
    name: str
    lb: float | None = None
    ub: float | None = None
    kind: VarKind = "continuous"


class LinearTerm(BaseModel):
    var: str
    coef: float


class LinearExpr(BaseModel):
    terms: List[LinearTerm] = Field(default_factory=list)
    constant: float = 0.0


class ConstraintSpec(BaseModel):
    name: str
    lhs: LinearExpr
    cmp: Cmp
    rhs: float


class LPModel(BaseModel):
    name: str = "problem"
    sense: Sense
    objective: LinearExpr
    variables: List[VariableSpec]
    constraints: List[ConstraintSpec] = Field(default_factory=list)


class LPSolution(BaseModel):
    status: str
    objective_value: Optional[float]
    x: Dict[str, float] | None
    violations: List[str] = Field(default_factory=list)
    message: str = ""


def build_problem(model: LPModel) -> Problem:
    """Turn an LPModel payload into a Problem using the fluent builders.

    Missing bounds mean unbounded. ``lhs.constant`` is added on the left of the
    relation and ``rhs`` on the right, so the builder folds both into one
    right-hand constant.
    """
    problem = Problem(model.name)
    for spec in model.variables:
        lower = float("-inf") if spec.lb is None else spec.lb
        upper = float("inf") if spec.ub is None else spec.ub
        problem.add_variable(spec.name, lower, upper, spec.kind)

    objective = ObjectiveBuilder()
    for term in model.objective.terms:
        objective.add(term.coef, term.var)
    objective.add_constant(model.objective.constant)
    problem.set_objective(objective.maximize() if model.sense == "max" else objective.minimize())

    for cons in model.constraints:
        builder = ConstraintBuilder(cons.name)
        for term in cons.lhs.terms:
            builder.add(term.coef, term.var)
        builder.add_constant(cons.lhs.constant)
        if cons.cmp == "<=":
            builder.leq()
        elif cons.cmp == ">=":
            builder.geq()
        else:
            builder.eq()
        builder.add_constant(cons.rhs)
        problem.add_constraint(builder.done())
    return problem


def solution_of(problem: Problem, tol: float = 1e-6) -> LPSolution:
    """Snapshot a solved Problem as an LPSolution; the status is passed through untouched."""
    return LPSolution(
        status=problem.status,
        objective_value=objective_value(problem),
        x=problem.values(),
        violations=find_violations(problem, tol),
    )
