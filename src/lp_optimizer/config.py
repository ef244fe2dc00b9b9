from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field

ENV_EXECUTABLE = "LP_OPTIMIZER_CBC"
ENV_TEMP_DIR = "LP_OPTIMIZER_TMPDIR"
ENV_KEEP_FILES = "LP_OPTIMIZER_KEEP_FILES"
ENV_TIMEOUT = "LP_OPTIMIZER_TIMEOUT"

_TRUTHY = {"1", "true", "yes", "on"}


class SolveOptions(BaseModel):
    executable: str = "cbc"
    temp_dir: Optional[str] = None
    keep_files: bool = False
    timeout: Optional[float] = Field(default=None, gt=0)

    @classmethod
    def from_env(cls) -> "SolveOptions":
        """Build options from ``LP_OPTIMIZER_*`` environment variables, falling back to defaults."""
        values = {}
        if os.environ.get(ENV_EXECUTABLE):
            values["executable"] = os.environ[ENV_EXECUTABLE]
        if os.environ.get(ENV_TEMP_DIR):
            values["temp_dir"] = os.environ[ENV_TEMP_DIR]
        if os.environ.get(ENV_KEEP_FILES):
            values["keep_files"] = os.environ[ENV_KEEP_FILES].strip().lower() in _TRUTHY
        if os.environ.get(ENV_TIMEOUT):
            values["timeout"] = float(os.environ[ENV_TIMEOUT])
        return cls(**values)
