"""Build linear / mixed-integer models, write them as LP documents and solve them with an external engine."""

from .builders import ConstraintBuilder, ObjectiveBuilder
from .config import SolveOptions
from .errors import (
    BuilderFinalizedError,
    DocumentWriteError,
    DuplicateVariableError,
    InvalidConstraintError,
    NoObjectiveError,
    OptimizerError,
    ProblemValidationError,
    ResultFormatError,
    SolverError,
    SolverExecutionError,
    UnknownVariableError,
    ValidationIssue,
    VariableNameTooLongError,
)
from .model import Constraint, Objective, Variable
from .problem import Problem
from .solvers import CbcGateway, SolverGateway, SolverResult

__all__ = [
    "ConstraintBuilder",
    "ObjectiveBuilder",
    "SolveOptions",
    "BuilderFinalizedError",
    "DocumentWriteError",
    "DuplicateVariableError",
    "InvalidConstraintError",
    "NoObjectiveError",
    "OptimizerError",
    "ProblemValidationError",
    "ResultFormatError",
    "SolverError",
    "SolverExecutionError",
    "UnknownVariableError",
    "ValidationIssue",
    "VariableNameTooLongError",
    "Constraint",
    "Objective",
    "Variable",
    "Problem",
    "CbcGateway",
    "SolverGateway",
    "SolverResult",
]
