#!/usr/bin/env python3
import argparse
import json
import random
from pathlib import Path
from typing import List, Optional

from lp_optimizer.schemas import ConstraintSpec, LinearExpr, LinearTerm, LPModel, VariableSpec


def generate_random_lp(
    num_vars: int, num_constraints: int, seed: Optional[int] = None, integer_share: float = 0.0
) -> LPModel:
    """Random model that is feasible at x = lb: packing rows with positive coefficients."""
    rng = random.Random(seed)
    variables = [
        VariableSpec(
            name=f"x{i}",
            lb=0.0,
            ub=rng.choice([None, float(rng.randint(5, 50))]),
            kind="integer" if rng.random() < integer_share else "continuous",
        )
        for i in range(num_vars)
    ]
    constraints: List[ConstraintSpec] = []
    for j in range(num_constraints):
        terms = [
            LinearTerm(var=f"x{i}", coef=round(rng.uniform(0.5, 5.0), 3))
            for i in range(num_vars)
        ]
        rhs = round(rng.uniform(num_vars * 2.0, num_vars * 6.0), 3)
        constraints.append(
            ConstraintSpec(
                name=f"row {j}",
                lhs=LinearExpr(terms=terms, constant=0.0),
                cmp="<=",
                rhs=rhs,
            )
        )
    objective = LinearExpr(
        terms=[LinearTerm(var=f"x{i}", coef=round(rng.uniform(1.0, 4.0), 3)) for i in range(num_vars)],
        constant=0.0,
    )
    return LPModel(
        name="random-lp",
        sense="max",
        objective=objective,
        variables=variables,
        constraints=constraints,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random feasible LP instances.")
    parser.add_argument("--vars", type=int, default=3, help="Number of variables")
    parser.add_argument("--constraints", type=int, default=3, help="Number of constraints")
    parser.add_argument("--integer-share", type=float, default=0.0, help="Fraction of integer variables")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output file")
    args = parser.parse_args()

    instances = [
        generate_random_lp(args.vars, args.constraints, (args.seed or 0) + idx, args.integer_share)
        for idx in range(args.count)
    ]
    payload = [instance.model_dump() for instance in instances]

    if args.out:
        Path(args.out).write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
