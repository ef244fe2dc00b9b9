import numpy as np
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..problem import Problem


def build_matrix_form(problem: "Problem") -> Tuple[np.ndarray, List[str], np.ndarray, np.ndarray, np.ndarray, List[str]]:
    """
    Dense row form of the constraints: A x (sense) b, with per-column bounds.
    Return A, row senses, b, lower bounds, upper bounds and column names.
    Terms naming unregistered variables raise ValueError.
    """

    names = list(problem.variables.keys())
    index: Dict[str, int] = {name: idx for idx, name in enumerate(names)}
    constraints = problem.constraints

    A = np.zeros((len(constraints), len(names)), dtype=float)
    b = np.zeros(len(constraints), dtype=float)
    senses: List[str] = []
    for row, cons in enumerate(constraints):
        for var_name, coef in cons.coefficients.items():
            if var_name not in index:
                raise ValueError(f"Constraint '{cons.name}' references unknown variable '{var_name}'.")
            A[row, index[var_name]] += coef
        b[row] = cons.rhs
        senses.append(cons.sense or "")

    lower = np.array([var.lower for var in problem.variables.values()], dtype=float)
    upper = np.array([var.upper for var in problem.variables.values()], dtype=float)
    return A, senses, b, lower, upper, names


def objective_value(problem: "Problem") -> Optional[float]:
    if problem.objective is None:
        return None
    return float(problem.objective.evaluate(problem.values()))


def find_violations(problem: "Problem", tol: float = 1e-6) -> List[str]:
    """List bounds and constraints the current variable values break by more than ``tol``."""

    A, senses, b, lower, upper, names = build_matrix_form(problem)
    x = np.array([problem.variables[name].value for name in names], dtype=float)
    violations: List[str] = []

    for idx in np.nonzero(x < lower - tol)[0]:
        violations.append(f"{names[idx]} = {x[idx]:g} is below its lower bound {lower[idx]:g}")
    for idx in np.nonzero(x > upper + tol)[0]:
        violations.append(f"{names[idx]} = {x[idx]:g} is above its upper bound {upper[idx]:g}")

    activity = A @ x
    constraints = problem.constraints
    for row, sense in enumerate(senses):
        lhs, rhs = activity[row], b[row]
        broken = (
            (sense == "<=" and lhs > rhs + tol)
            or (sense == ">=" and lhs < rhs - tol)
            or (sense == "=" and abs(lhs - rhs) > tol)
        )
        if broken:
            violations.append(f"constraint '{constraints[row].name}': {lhs:g} {sense} {rhs:g} does not hold")
    return violations
