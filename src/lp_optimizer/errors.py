from __future__ import annotations

from typing import List, Sequence


class OptimizerError(Exception):
    """Base class for every error raised by lp_optimizer."""


class ValidationIssue(OptimizerError):
    """A model problem recorded when it happens and reported by ``Problem.solve``."""


class VariableNameTooLongError(ValidationIssue):
    def __init__(self, name: str, limit: int) -> None:
        super().__init__(f"variable name too long (>{limit}): {name[:20]}...")
        self.name = name
        self.limit = limit


class DuplicateVariableError(ValidationIssue):
    def __init__(self, name: str) -> None:
        super().__init__(f"duplicate variable: {name}")
        self.name = name


class NoObjectiveError(ValidationIssue):
    def __init__(self) -> None:
        super().__init__("no objective set")


class InvalidConstraintError(ValidationIssue):
    def __init__(self, constraint_name: str, reason: str = "") -> None:
        message = f"invalid subject to: {constraint_name}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.constraint_name = constraint_name


class UnknownVariableError(ValidationIssue):
    def __init__(self, owner: str, name: str) -> None:
        super().__init__(f"{owner} references unknown variable '{name}'")
        self.owner = owner
        self.name = name


class BuilderFinalizedError(OptimizerError):
    def __init__(self, what: str) -> None:
        super().__init__(f"{what} builder has already been finalized")


class ProblemValidationError(OptimizerError):
    """All validation issues of a Problem, raised as one error at solve time."""

    def __init__(self, problem_name: str, issues: Sequence[ValidationIssue]) -> None:
        self.problem_name = problem_name
        self.issues: List[ValidationIssue] = list(issues)
        message = f"problem '{problem_name}' is invalid: {self.issues[0]}"
        if len(self.issues) > 1:
            message += f" (and {len(self.issues) - 1} more)"
        super().__init__(message)

    @property
    def first(self) -> ValidationIssue:
        return self.issues[0]


class SolverError(OptimizerError):
    """Infrastructure failure while rendering, running or reading the engine."""


class DocumentWriteError(SolverError):
    pass


class SolverExecutionError(SolverError):
    pass


class ResultFormatError(SolverError):
    pass
