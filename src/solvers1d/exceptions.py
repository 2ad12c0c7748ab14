class RootFindingError(Exception):
    """Base class for root-finding failures."""


class ConfigurationError(RootFindingError, ValueError):
    """Raised when a solver is misconfigured or the objective lacks a derivative.

    Detected before (or at) the first evaluation; retrying with the same inputs
    fails the same way.
    """


class BracketingError(RootFindingError):
    """Raised when ``f(x_min)`` and ``f(x_max)`` do not straddle a root."""


class ConvergenceError(RootFindingError):
    """Raised when the evaluation budget is spent before reaching the accuracy.

    Parameters
    ----------
    message : str
        Human-readable description, always mentioning the budget.
    max_evaluations : int
        The budget that was exhausted.
    """

    def __init__(self, message: str, max_evaluations: int) -> None:
        super().__init__(message)
        self.max_evaluations = max_evaluations


def max_evaluations_exceeded(solver: str, max_evaluations: int) -> ConvergenceError:
    return ConvergenceError(
        f"{solver}: maximum number of function evaluations "
        f"({max_evaluations}) exceeded",
        max_evaluations,
    )
