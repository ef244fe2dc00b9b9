"""LP document rendering and model utilities for lp_optimizer."""

from .writer import DocumentGenerator, LineBuffer, render_lp, write_lp_file
from .utils import build_matrix_form, find_violations, objective_value

__all__ = [
    "DocumentGenerator",
    "LineBuffer",
    "render_lp",
    "write_lp_file",
    "build_matrix_form",
    "find_violations",
    "objective_value",
]
