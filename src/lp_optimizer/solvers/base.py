from __future__ import annotations

import abc
from typing import Dict, List

from pydantic import BaseModel, Field


class SolverResult(BaseModel):
    """What an engine reported: its status token verbatim and the variable values."""

    status: str
    values: Dict[str, float] = Field(default_factory=dict)


class SolverGateway(abc.ABC):
    """Anything that can solve an LP document on disk."""

    @abc.abstractmethod
    def solve(self, document_path: str) -> SolverResult:
        """Solve the LP file at ``document_path``.

        Raises:
            SolverExecutionError: the engine could not be run or its output read.
            ResultFormatError: the engine's output does not have the expected layout.
        """

    def artifacts(self, document_path: str) -> List[str]:
        """Files the engine writes next to ``document_path``; the caller cleans them up."""
        return []
