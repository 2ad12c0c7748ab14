"""1-D solvers and a small registry to pick one by name."""

from __future__ import annotations

from enum import Enum

from solvers1d.config import SolverConfig
from solvers1d.objective import ObjectiveFunction
from solvers1d.solvers.base import RootResult, Solver1D, SolverState
from solvers1d.solvers.newton import Handoff, Newton
from solvers1d.solvers.newton_safe import SafeguardedNewton


class RootMethod(str, Enum):
    NEWTON = "newton"
    NEWTON_SAFE = "newton_safe"


_SOLVERS: dict[RootMethod, type[Solver1D]] = {
    RootMethod.NEWTON: Newton,
    RootMethod.NEWTON_SAFE: SafeguardedNewton,
}


def get_solver(
    method: RootMethod | str, config: SolverConfig | None = None
) -> Solver1D:
    """Instantiate the solver registered under `method`."""
    try:
        key = RootMethod(method)
    except ValueError as exc:
        known = ", ".join(m.value for m in RootMethod)
        raise ValueError(f"Unknown root method {method!r} (known: {known})") from exc
    return _SOLVERS[key](config)


# ---------------------------
# Convenience wrappers: float return
# ---------------------------


def newton_root(
    f: ObjectiveFunction,
    x_accuracy: float,
    guess: float,
    x_min: float,
    x_max: float,
    *,
    max_evaluations: int = 100,
) -> float:
    return Newton(max_evaluations=max_evaluations).solve(
        f, x_accuracy, guess, x_min, x_max
    )


def newton_safe_root(
    f: ObjectiveFunction,
    x_accuracy: float,
    guess: float,
    x_min: float,
    x_max: float,
    *,
    max_evaluations: int = 100,
) -> float:
    return SafeguardedNewton(max_evaluations=max_evaluations).solve(
        f, x_accuracy, guess, x_min, x_max
    )


__all__ = [
    "Handoff",
    "Newton",
    "RootMethod",
    "RootResult",
    "SafeguardedNewton",
    "Solver1D",
    "SolverState",
    "get_solver",
    "newton_root",
    "newton_safe_root",
]
