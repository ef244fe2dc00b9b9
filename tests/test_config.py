import pytest
from pydantic import ValidationError

from lp_optimizer import SolveOptions


def test_defaults():
    opts = SolveOptions()

    assert opts.executable == "cbc"
    assert opts.temp_dir is None
    assert opts.keep_files is False
    assert opts.timeout is None


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LP_OPTIMIZER_CBC", "/opt/cbc/bin/cbc")
    monkeypatch.setenv("LP_OPTIMIZER_TMPDIR", str(tmp_path))
    monkeypatch.setenv("LP_OPTIMIZER_KEEP_FILES", "yes")
    monkeypatch.setenv("LP_OPTIMIZER_TIMEOUT", "30")

    opts = SolveOptions.from_env()

    assert opts.executable == "/opt/cbc/bin/cbc"
    assert opts.temp_dir == str(tmp_path)
    assert opts.keep_files is True
    assert opts.timeout == pytest.approx(30.0)


def test_from_env_without_variables(monkeypatch):
    for name in ("LP_OPTIMIZER_CBC", "LP_OPTIMIZER_TMPDIR", "LP_OPTIMIZER_KEEP_FILES", "LP_OPTIMIZER_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    assert SolveOptions.from_env() == SolveOptions()


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        SolveOptions(timeout=0)
