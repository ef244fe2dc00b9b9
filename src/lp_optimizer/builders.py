"""Fluent builders for objectives and constraints.

Both builders are single-use: once ``maximize``/``minimize`` or ``done`` has
produced an immutable result, every further call raises
``BuilderFinalizedError``.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from .errors import BuilderFinalizedError, InvalidConstraintError
from .model import Cmp, Constraint, Objective, Variable, normalize_name

VarRef = Union[Variable, str]


def _name_of(var: VarRef) -> str:
    return var.name if isinstance(var, Variable) else normalize_name(var)


class ObjectiveBuilder:
    def __init__(self) -> None:
        self._coefficients: Dict[str, float] = {}
        self._constant = 0.0
        self._finalized = False

    def _check_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError("objective")

    def add(self, coefficient: float, var: VarRef) -> "ObjectiveBuilder":
        self._check_open()
        name = _name_of(var)
        self._coefficients[name] = self._coefficients.get(name, 0.0) + coefficient
        return self

    def add_constant(self, value: float) -> "ObjectiveBuilder":
        self._check_open()
        self._constant += value
        return self

    def maximize(self) -> Objective:
        return self._finalize("maximize")

    def minimize(self) -> Objective:
        return self._finalize("minimize")

    def _finalize(self, direction: str) -> Objective:
        self._check_open()
        self._finalized = True
        return Objective(
            direction=direction,
            terms=tuple(self._coefficients.items()),
            constant=self._constant,
        )


class ConstraintBuilder:
    """Collects terms on both sides of a relation and folds them into canonical form.

    Terms and constants added before ``leq``/``geq``/``eq`` belong to the left
    side, those added after belong to the right side. ``done`` moves right-side
    terms and left-side constants across, so ``x1 + x2 <= x3 + 10`` becomes
    ``x1 + x2 - x3 <= 10``.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._sense: Optional[Cmp] = None
        self._left_terms: List[Tuple[str, float]] = []
        self._right_terms: List[Tuple[str, float]] = []
        self._left_constant = 0.0
        self._right_constant = 0.0
        self._issues: List[InvalidConstraintError] = []
        self._finalized = False

    def _check_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError(f"constraint '{self.name}'")

    @property
    def sense(self) -> Optional[Cmp]:
        return self._sense

    def add(self, coefficient: float, var: VarRef) -> "ConstraintBuilder":
        self._check_open()
        term = (_name_of(var), coefficient)
        if self._sense is None:
            self._left_terms.append(term)
        else:
            self._right_terms.append(term)
        return self

    def add_constant(self, value: float) -> "ConstraintBuilder":
        self._check_open()
        if self._sense is None:
            self._left_constant += value
        else:
            self._right_constant += value
        return self

    def leq(self) -> "ConstraintBuilder":
        return self._set_sense("<=")

    def geq(self) -> "ConstraintBuilder":
        return self._set_sense(">=")

    def eq(self) -> "ConstraintBuilder":
        return self._set_sense("=")

    def _set_sense(self, sense: Cmp) -> "ConstraintBuilder":
        self._check_open()
        if self._sense is not None:
            # the first operator stays; later terms keep landing on the right side
            self._issues.append(
                InvalidConstraintError(self.name, f"operator already set to '{self._sense}'")
            )
            return self
        self._sense = sense
        return self

    def done(self) -> Constraint:
        self._check_open()
        if self._sense is None:
            self._issues.append(InvalidConstraintError(self.name, "no operator chosen"))
        self._finalized = True

        coefficients: Dict[str, float] = {}
        for name, coef in self._left_terms:
            coefficients[name] = coefficients.get(name, 0.0) + coef
        for name, coef in self._right_terms:
            coefficients[name] = coefficients.get(name, 0.0) - coef
        if not coefficients:
            self._issues.append(InvalidConstraintError(self.name, "no variable terms"))

        return Constraint(
            name=self.name,
            sense=self._sense,
            terms=tuple(coefficients.items()),
            rhs=self._right_constant - self._left_constant,
            issues=tuple(self._issues),
        )
