from __future__ import annotations

import logging
import math
import os
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .config import SolveOptions
from .errors import (
    DuplicateVariableError,
    NoObjectiveError,
    ProblemValidationError,
    UnknownVariableError,
    ValidationIssue,
    VariableNameTooLongError,
)
from .lp.writer import render_lp, write_lp_file
from .model import Constraint, Objective, Variable, VarKind, normalize_name
from .solvers.base import SolverGateway

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 200
NOT_SOLVED = "Not solved"


class Problem:
    """A linear / mixed-integer model: variable registry, objective and constraints.

    Mistakes made while building (long or duplicate names, bad constraints,
    missing objective) are recorded and raised together by ``solve`` as a
    ``ProblemValidationError``; nothing is written or executed in that case.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._status = NOT_SOLVED
        self._objective: Optional[Objective] = None
        self._constraints: List[Constraint] = []
        self._vars: Dict[str, Variable] = {}
        self._issues: List[ValidationIssue] = []

    def __repr__(self) -> str:
        return (
            f"Problem(name={self.name!r}, variables={len(self._vars)}, "
            f"constraints={len(self._constraints)}, status={self._status!r})"
        )

    @property
    def status(self) -> str:
        return self._status

    @property
    def objective(self) -> Optional[Objective]:
        return self._objective

    @property
    def constraints(self) -> List[Constraint]:
        return list(self._constraints)

    @property
    def variables(self) -> Mapping[str, Variable]:
        return MappingProxyType(self._vars)

    def values(self) -> Dict[str, float]:
        return {name: var.value for name, var in self._vars.items()}

    # -- registry ---------------------------------------------------------

    def continuous_var(self, name: str, lower: float = -math.inf, upper: float = math.inf) -> Variable:
        return self.add_variable(name, lower, upper, "continuous")

    def integer_var(self, name: str, lower: float = -math.inf, upper: float = math.inf) -> Variable:
        return self.add_variable(name, lower, upper, "integer")

    def binary_var(self, name: str, lower: float = 0.0, upper: float = 1.0) -> Variable:
        return self.add_variable(name, lower, upper, "binary")

    def add_variable(self, name: str, lower: float, upper: float, kind: VarKind) -> Variable:
        """Register a variable; a name that is already taken returns the existing one."""
        if len(name) > MAX_NAME_LENGTH:
            self._issues.append(VariableNameTooLongError(name, MAX_NAME_LENGTH))
        name = normalize_name(name)
        existing = self._vars.get(name)
        if existing is not None:
            self._issues.append(DuplicateVariableError(name))
            return existing
        var = Variable(name=name, lower=lower, upper=upper, kind=kind)
        self._vars[name] = var
        return var

    # -- model ------------------------------------------------------------

    def set_objective(self, objective: Objective) -> "Problem":
        self._objective = objective
        return self

    def add_constraint(self, constraint: Constraint) -> "Problem":
        self._constraints.append(constraint)
        return self

    def validate(self) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = list(self._issues)
        if self._objective is None:
            issues.append(NoObjectiveError())
        else:
            for name in self._objective.coefficients:
                if name not in self._vars:
                    issues.append(UnknownVariableError("objective", name))
        for constraint in self._constraints:
            for name in constraint.coefficients:
                if name not in self._vars:
                    issues.append(UnknownVariableError(f"constraint '{constraint.name}'", name))
        for constraint in self._constraints:
            issues.extend(constraint.issues)
        return issues

    def check(self) -> None:
        issues = self.validate()
        if issues:
            raise ProblemValidationError(self.name, issues)

    def render(self) -> str:
        return render_lp(self)

    def write_lp(self, path: str) -> None:
        text = self.render()
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)

    # -- solving ----------------------------------------------------------

    def solve(self, gateway: SolverGateway, options: Optional[SolveOptions] = None) -> str:
        """Render, hand the document to ``gateway`` and merge the reported values.

        Only ``temp_dir`` and ``keep_files`` are read from ``options``; the
        engine settings belong to the gateway. Unless ``keep_files`` is set,
        the document and every file the gateway derived from it are removed.
        Returns the engine's status string. On any error the variable values
        and status are left as they were.
        """
        opts = options or SolveOptions()
        self.check()

        logger.info(f"Solving problem '{self.name}' ({len(self._vars)} variables, {len(self._constraints)} constraints)")
        lp_path = write_lp_file(self, opts.temp_dir)
        try:
            result = gateway.solve(lp_path)
        finally:
            if not opts.keep_files:
                for path in [lp_path, *gateway.artifacts(lp_path)]:
                    if os.path.exists(path):
                        os.remove(path)

        for name, value in result.values.items():
            var = self._vars.get(name)
            if var is None:
                logger.warning(f"Engine reported value for unknown variable '{name}'")
                continue
            var.value = value
        self._status = result.status
        logger.info(f"Problem '{self.name}' solved with status {self._status}")
        return self._status
