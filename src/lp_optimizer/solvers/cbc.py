from __future__ import annotations

import logging
import subprocess
from typing import Dict, List, Optional, Tuple

from ..config import SolveOptions
from ..errors import ResultFormatError, SolverExecutionError
from .base import SolverGateway, SolverResult

logger = logging.getLogger(__name__)

RESULT_SUFFIX = "res.txt"
HEADER_TOKENS = 4


def result_path_for(document_path: str) -> str:
    return document_path + RESULT_SUFFIX


def parse_solution_text(text: str) -> Tuple[str, Dict[str, float]]:
    """Parse a CBC ``solu`` report.

    The first line is ``<status> <4 header tokens>`` (for example
    ``Optimal - objective value 3.00000000``). Every following line is
    ``<index> <name> <value> <reduced cost>``; reading stops at the first line
    that does not have that shape, such as the ``**``-prefixed rows CBC
    writes for infeasibilities.
    """
    lines = text.splitlines()
    if not lines or not lines[0].split():
        raise ResultFormatError("unexpected result file format: missing status line")
    header = lines[0].split()
    if len(header) < 1 + HEADER_TOKENS:
        raise ResultFormatError(f"unexpected result file format: short header {lines[0]!r}")
    status = header[0]

    values: Dict[str, float] = {}
    for lineno, line in enumerate(lines[1:], start=2):
        tokens = line.split()
        if not tokens:
            continue
        row = _parse_row(tokens)
        if row is None:
            remaining = sum(1 for rest in lines[lineno - 1:] if rest.strip())
            logger.warning(f"Stopped reading solution at line {lineno}: {line.strip()!r} ({remaining} lines ignored)")
            break
        name, value = row
        values[name] = value
    return status, values


def _parse_row(tokens: List[str]) -> Optional[Tuple[str, float]]:
    if len(tokens) != 4:
        return None
    try:
        int(tokens[0])
        value = float(tokens[2])
        float(tokens[3])
    except ValueError:
        return None
    return tokens[1], value


def parse_solution_file(path: str) -> Tuple[str, Dict[str, float]]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as exc:
        raise SolverExecutionError(f"could not read result file {path}: {exc}") from exc
    return parse_solution_text(text)


class CbcGateway(SolverGateway):
    """Runs a CBC-compatible executable as ``<exe> <lp> solve solu <lp>res.txt``.

    Only the result file is read; stdout is logged at DEBUG level and the exit
    code only matters when it is non-zero.
    """

    def __init__(self, executable: Optional[str] = None, options: Optional[SolveOptions] = None) -> None:
        self.options = options or SolveOptions()
        self.executable = executable or self.options.executable

    def artifacts(self, document_path: str) -> List[str]:
        return [result_path_for(document_path)]

    def command(self, document_path: str) -> List[str]:
        return [self.executable, document_path, "solve", "solu", result_path_for(document_path)]

    def solve(self, document_path: str) -> SolverResult:
        result_path = result_path_for(document_path)
        cmd = self.command(document_path)
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            completed = subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=self.options.timeout,
            )
        except OSError as exc:
            raise SolverExecutionError(f"could not launch {self.executable}: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise SolverExecutionError(f"{self.executable} timed out after {exc.timeout}s") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            raise SolverExecutionError(
                f"{self.executable} exited with status {exc.returncode}: {detail}"
            ) from exc
        if completed.stdout:
            logger.debug(completed.stdout)

        status, values = parse_solution_file(result_path)
        logger.debug(f"Parsed {len(values)} values with status {status} from {result_path}")
        return SolverResult(status=status, values=values)
