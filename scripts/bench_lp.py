#!/usr/bin/env python3
import argparse
import logging
import time

from lp_optimizer import CbcGateway, OptimizerError, SolveOptions
from lp_optimizer.lp.utils import find_violations
from lp_optimizer.schemas import build_problem
from scripts.generate_instances import generate_random_lp


def main() -> None:
    parser = argparse.ArgumentParser(description="Render and solve random instances with a CBC binary.")
    parser.add_argument("--sizes", type=int, nargs="+", default=[10, 100, 1000])
    parser.add_argument("--seeds", type=int, default=3)
    parser.add_argument("--render-only", action="store_true", help="Skip the external engine")
    args = parser.parse_args()
    logging.basicConfig(level=logging.WARNING)

    opts = SolveOptions.from_env()
    gateway = CbcGateway(options=opts)

    print("name,status,violations,render_ms,solve_ms")
    for size in args.sizes:
        for seed in range(args.seeds):
            name = f"random-{size}-{seed}"
            problem = build_problem(generate_random_lp(size, max(1, size // 2), seed, integer_share=0.2))

            start = time.perf_counter()
            problem.render()
            render_ms = (time.perf_counter() - start) * 1000
            if args.render_only:
                print(f"{name},{problem.status},,{render_ms:.2f},")
                continue

            start = time.perf_counter()
            try:
                status = problem.solve(gateway, opts)
            except OptimizerError as exc:
                print(f"{name},error: {exc},,{render_ms:.2f},")
                continue
            solve_ms = (time.perf_counter() - start) * 1000
            print(f"{name},{status},{len(find_violations(problem))},{render_ms:.2f},{solve_ms:.2f}")


if __name__ == "__main__":
    main()
