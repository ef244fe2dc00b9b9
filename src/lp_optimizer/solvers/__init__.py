"""Solving engines that accept an LP document path."""

from .base import SolverGateway, SolverResult
from .cbc import CbcGateway, parse_solution_file, parse_solution_text

__all__ = ["SolverGateway", "SolverResult", "CbcGateway", "parse_solution_file", "parse_solution_text"]
