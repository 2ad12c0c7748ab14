"""
solvers1d

One-dimensional root finding: plain Newton-Raphson that falls back to a
bisection-safeguarded Newton when it leaves its bracket.

    from solvers1d import Newton, PolynomialObjective

    f = PolynomialObjective([-2.0, 0.0, 1.0])  # x**2 - 2
    Newton().solve(f, 1e-10, guess=1.0, x_min=0.0, x_max=2.0)
"""

from .config import SolverConfig
from .exceptions import (
    BracketingError,
    ConfigurationError,
    ConvergenceError,
    RootFindingError,
)
from .objective import (
    NO_DERIVATIVE,
    FunctionObjective,
    ObjectiveFunction,
    PolynomialObjective,
    with_numerical_derivative,
)
from .solvers import (
    Newton,
    RootMethod,
    RootResult,
    SafeguardedNewton,
    Solver1D,
    get_solver,
    newton_root,
    newton_safe_root,
)

__all__ = [
    # Config
    "SolverConfig",
    # Errors
    "RootFindingError",
    "ConfigurationError",
    "BracketingError",
    "ConvergenceError",
    # Objectives
    "NO_DERIVATIVE",
    "ObjectiveFunction",
    "FunctionObjective",
    "PolynomialObjective",
    "with_numerical_derivative",
    # Solvers
    "Solver1D",
    "Newton",
    "SafeguardedNewton",
    "RootMethod",
    "RootResult",
    "get_solver",
    "newton_root",
    "newton_safe_root",
]
