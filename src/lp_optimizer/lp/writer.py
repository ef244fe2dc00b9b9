"""Render a Problem as a CPLEX-style LP document.

Layout::

    Maximize
    obj: 1.000000 x1 + 3.000000 x3 + 0.000000
    Subject To
    c0: -1.000000 x1 + 1.000000 x3 <= 40.000000
    Bounds
    0.000000 <= x1 <= 40.000000
    -inf <= x3 <= +inf
    General
     x1
    End

Constraint rows are named by position (``c0``, ``c1``, ...). Terms keep the
order in which they were added, bounds and kind lists follow variable
registration order, so rendering the same Problem twice gives the same text.
"""

from __future__ import annotations

import io
import logging
import os
import tempfile
from typing import TYPE_CHECKING, Iterable, Iterator, List, Mapping, Optional, TextIO

from ..errors import DocumentWriteError

if TYPE_CHECKING:
    from ..problem import Problem

logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 250
NEG_INF_TOKEN = "-inf"
POS_INF_TOKEN = "+inf"

_SENSE_TOKENS = {"<=": " <= ", ">=": " >= ", "=": " = "}


def format_number(value: float) -> str:
    # adding zero turns -0.0 into 0.0
    return f"{value + 0:f}"


def format_bound(value: float) -> str:
    if value == float("inf"):
        return POS_INF_TOKEN
    if value == float("-inf"):
        return NEG_INF_TOKEN
    return format_number(value)


def term_tokens(coefficients: Mapping[str, float]) -> Iterator[str]:
    """Yield one token per term: the first bare, the rest with a leading sign."""
    for index, (name, coef) in enumerate(coefficients.items()):
        coef = coef + 0
        if index == 0:
            yield f"{format_number(coef)} {name}"
        elif coef >= 0:
            yield f" + {format_number(coef)} {name}"
        else:
            yield f" {format_number(coef)} {name}"


class LineBuffer:
    """Accumulates tokens into lines no longer than ``max_length`` where possible.

    A token that would overflow the current line starts a new one. A single
    token longer than the limit is written on a line of its own.
    """

    def __init__(self, stream: TextIO, max_length: int = MAX_LINE_LENGTH) -> None:
        self.stream = stream
        self.max_length = max_length
        self._parts: List[str] = []
        self._length = 0

    def append(self, token: str) -> None:
        if self._parts and self._length + len(token) > self.max_length:
            self.next_line()
        self._parts.append(token)
        self._length += len(token)

    def extend(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.append(token)

    def next_line(self) -> None:
        if not self._parts:
            return
        self.stream.write("".join(self._parts) + "\n")
        self._parts = []
        self._length = 0

    def flush(self) -> None:
        self.next_line()


class DocumentGenerator:
    def __init__(self, problem: "Problem", max_length: int = MAX_LINE_LENGTH) -> None:
        if problem.objective is None:
            raise ValueError(f"problem '{problem.name}' has no objective to render")
        self.problem = problem
        self.max_length = max_length

    def write(self, stream: TextIO) -> None:
        buffer = LineBuffer(stream, self.max_length)
        self._write_objective(buffer)
        self._write_constraints(buffer)
        self._write_bounds(buffer)
        self._write_kinds(buffer)
        buffer.append("End")
        buffer.flush()

    def _write_objective(self, buffer: LineBuffer) -> None:
        objective = self.problem.objective
        buffer.append("Maximize" if objective.direction == "maximize" else "Minimize")
        buffer.next_line()
        buffer.append("obj: ")
        buffer.extend(term_tokens(objective.coefficients))
        constant = objective.constant + 0
        if not objective.coefficients:
            buffer.append(format_number(constant))
        elif constant >= 0:
            buffer.append(f" + {format_number(constant)}")
        else:
            buffer.append(f" {format_number(constant)}")
        buffer.next_line()

    def _write_constraints(self, buffer: LineBuffer) -> None:
        buffer.append("Subject To")
        buffer.next_line()
        for index, constraint in enumerate(self.problem.constraints):
            buffer.append(f"c{index}: ")
            buffer.extend(term_tokens(constraint.coefficients))
            buffer.append(_SENSE_TOKENS[constraint.sense])
            buffer.append(format_number(constraint.rhs))
            buffer.next_line()

    def _write_bounds(self, buffer: LineBuffer) -> None:
        buffer.append("Bounds")
        buffer.next_line()
        for var in self.problem.variables.values():
            buffer.append(f"{format_bound(var.lower)} <= {var.name} <= {format_bound(var.upper)}")
            buffer.next_line()

    def _write_kinds(self, buffer: LineBuffer) -> None:
        general = [var.name for var in self.problem.variables.values() if var.kind == "integer"]
        binary = [var.name for var in self.problem.variables.values() if var.kind == "binary"]
        for heading, names in (("General", general), ("Binary", binary)):
            if not names:
                continue
            buffer.append(heading)
            buffer.next_line()
            buffer.extend(f" {name}" for name in names)
            buffer.next_line()


def render_lp(problem: "Problem", max_length: int = MAX_LINE_LENGTH) -> str:
    """Validate ``problem`` and return its LP document as a string."""
    problem.check()
    out = io.StringIO()
    DocumentGenerator(problem, max_length).write(out)
    return out.getvalue()


def write_lp_file(problem: "Problem", directory: Optional[str] = None) -> str:
    """Validate ``problem``, write it to a new temporary ``.lp`` file and return its path.

    Raises:
        ProblemValidationError: the problem has pending validation issues.
        DocumentWriteError: the file could not be created or written.
    """
    problem.check()
    try:
        handle = tempfile.NamedTemporaryFile(
            mode="w",
            prefix=problem.name,
            suffix=".lp",
            dir=directory,
            delete=False,
            encoding="utf-8",
        )
    except OSError as exc:
        raise DocumentWriteError(f"could not create LP file for '{problem.name}': {exc}") from exc

    path = handle.name
    try:
        with handle:
            DocumentGenerator(problem).write(handle)
    except OSError as exc:
        _remove_quietly(path)
        raise DocumentWriteError(f"could not write LP file {path}: {exc}") from exc

    logger.debug(f"Wrote LP document for '{problem.name}' to {path}")
    return path


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
