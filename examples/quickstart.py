from __future__ import annotations

import logging
import math


def main() -> None:
    from solvers1d import (
        FunctionObjective,
        Newton,
        PolynomialObjective,
        RootMethod,
        get_solver,
    )

    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    # x**2 - 2 on [0, 2]; the first Newton step from 0.1 leaves the bracket
    f = PolynomialObjective([-2.0, 0.0, 1.0])
    res = Newton().solve_result(f, 1e-12, guess=0.1, x_min=0.0, x_max=2.0)
    print(f"root={res.root:.15f}  evaluations={res.evaluations}  method={res.method}")

    # bracket found by expanding outwards from a guess
    g = FunctionObjective(lambda x: math.exp(x) - 5.0, math.exp)
    solver = get_solver(RootMethod.NEWTON_SAFE)
    print(f"log(5) ~ {solver.solve_from_guess(g, 1e-12, guess=0.0, step=0.5):.15f}")


if __name__ == "__main__":
    main()
