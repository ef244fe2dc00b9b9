from __future__ import annotations

import math
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .errors import InvalidConstraintError

VarKind = Literal["continuous", "integer", "binary"]
Direction = Literal["minimize", "maximize"]
Cmp = Literal["<=", ">=", "="]


class Variable(BaseModel):
    """A decision variable owned by one Problem.

    ``value`` stays 0.0 until a solve succeeds and is stored exactly as the
    engine reported it; rounding integer or binary values is up to the caller.
    """

    name: str
    lower: float = -math.inf
    upper: float = math.inf
    kind: VarKind = "continuous"
    value: float = 0.0

    @property
    def is_integer(self) -> bool:
        return self.kind != "continuous"


class Objective(BaseModel):
    model_config = ConfigDict(frozen=True)

    direction: Direction
    terms: Tuple[Tuple[str, float], ...] = ()
    constant: float = 0.0

    @property
    def coefficients(self) -> Mapping[str, float]:
        return MappingProxyType(dict(self.terms))

    def evaluate(self, values: Mapping[str, float]) -> float:
        total = self.constant
        for name, coef in self.coefficients.items():
            total += coef * values.get(name, 0.0)
        return total


class Constraint(BaseModel):
    """Canonical ``sum(coef * var) <sense> rhs`` row produced by ConstraintBuilder."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    sense: Optional[Cmp]
    terms: Tuple[Tuple[str, float], ...] = ()
    rhs: float = 0.0
    issues: Tuple[InvalidConstraintError, ...] = ()

    @property
    def coefficients(self) -> Mapping[str, float]:
        return MappingProxyType(dict(self.terms))

    def activity(self, values: Mapping[str, float]) -> float:
        return sum(coef * values.get(name, 0.0) for name, coef in self.coefficients.items())


def normalize_name(name: str) -> str:
    """Return ``name`` as it appears in the LP document (spaces become underscores)."""
    return name.replace(" ", "_")
