import math
import stat
import sys
from pathlib import Path
from typing import Dict, List, Optional

from lp_optimizer import ConstraintBuilder, ObjectiveBuilder, Problem, SolverGateway, SolverResult


def make_optimal_problem() -> Problem:
    p = Problem("a")
    x1 = p.continuous_var("x1", 0, 40)
    x2 = p.continuous_var("x2", -math.inf, math.inf)
    x3 = p.continuous_var("x3", -math.inf, math.inf)
    x4 = p.integer_var("x4", 2, 3)
    p.set_objective(ObjectiveBuilder().add(1, x1).add(1, x2).add(3, x3).add(1, x4).maximize())
    p.add_constraint(ConstraintBuilder("c1").add(-1, x1).add(1, x2).add(1, x3).add(10, x4).leq().add_constant(40).done())
    p.add_constraint(ConstraintBuilder("c2").add(1, x1).add(-3, x2).add(1, x3).leq().add_constant(30).done())
    p.add_constraint(ConstraintBuilder("c3").add(1, x2).add(-3.5, x4).eq().add_constant(0).done())
    return p


def make_unbounded_problem() -> Problem:
    p = Problem("a")
    x1 = p.continuous_var("x1", 0, 40)
    x2 = p.continuous_var("x2")
    p.set_objective(ObjectiveBuilder().add(1, x1).add(-1, x2).maximize())
    p.add_constraint(ConstraintBuilder("c1").add(1, x1).add(1, x2).leq().add_constant(40).done())
    return p


def make_infeasible_problem() -> Problem:
    p = Problem("a")
    x1 = p.continuous_var("x1", 0, 40)
    x2 = p.continuous_var("x2")
    p.set_objective(ObjectiveBuilder().add(1, x1).add(-1, x2).minimize())
    p.add_constraint(ConstraintBuilder("c1").add(1, x1).add(1, x2).leq().add_constant(40).done())
    p.add_constraint(ConstraintBuilder("c2").add(1, x1).add(1, x2).geq().add_constant(50).done())
    return p


def make_large_problem(count: int = 1000) -> Problem:
    p = Problem("large")
    builder = ObjectiveBuilder()
    for i in range(1, count + 1):
        builder.add(1, p.continuous_var(f"x{i}", 15, 25))
    p.set_objective(builder.minimize())
    return p


class FakeGateway(SolverGateway):
    """Returns a canned result and remembers the documents it was given."""

    def __init__(self, status: str = "Optimal", values: Optional[Dict[str, float]] = None, error: Optional[Exception] = None):
        self.status = status
        self.values = values or {}
        self.error = error
        self.paths: List[str] = []
        self.documents: List[str] = []

    def solve(self, document_path: str) -> SolverResult:
        self.paths.append(document_path)
        self.documents.append(Path(document_path).read_text())
        if self.error is not None:
            raise self.error
        return SolverResult(status=self.status, values=self.values)


LOWER_BOUND_ENGINE = '''
import sys

doc, action, solu, res = sys.argv[1:5]
if (action, solu) != ("solve", "solu") or res != doc + "res.txt":
    sys.exit(2)
rows = []
in_bounds = False
for line in open(doc):
    line = line.strip()
    if line == "Bounds":
        in_bounds = True
        continue
    if line in ("General", "Binary", "End"):
        in_bounds = False
    if in_bounds and line:
        lower, _, name, _, _ = line.split()
        rows.append((name, float(lower)))
with open(res, "w") as out:
    out.write("Optimal - objective value 0.00000000\\n")
    for idx, (name, value) in enumerate(rows):
        out.write("%7d %-24s %24g %24g\\n" % (idx, name, value, 1))
'''


def write_engine(directory: Path, body: str, name: str = "fake_cbc") -> str:
    """Write an executable Python script standing in for the CBC binary."""
    path = directory / name
    path.write_text(f"#!{sys.executable}\n{body}")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


def canned_engine(directory: Path, report: str, exit_code: int = 0) -> str:
    body = (
        "import sys\n"
        f"with open(sys.argv[4], 'w') as out:\n"
        f"    out.write({report!r})\n"
        f"sys.exit({exit_code})\n"
    )
    return write_engine(directory, body)
