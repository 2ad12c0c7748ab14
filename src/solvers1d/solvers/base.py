"""Shared plumbing for the 1-D solvers.

A solver instance only holds a frozen :class:`SolverConfig`. Each call to
``solve`` builds a fresh :class:`SolverState` and passes it through the
subclass' ``_solve`` loop, so repeated solves never see each other's state.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar

from solvers1d.bracketing import find_bracket
from solvers1d.config import SolverConfig, effective_accuracy
from solvers1d.exceptions import ConfigurationError
from solvers1d.objective import NO_DERIVATIVE, ObjectiveFunction
from solvers1d.typing import Bracket

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RootResult:
    root: float
    evaluations: int
    method: str
    bracket: Bracket
    delegated: bool = False


@dataclass(slots=True)
class SolverState:
    """Iteration record of a single solve."""

    root: float
    x_min: float
    x_max: float
    max_evaluations: int
    evaluation_number: int = 0
    fx_min: float | None = None
    fx_max: float | None = None

    @property
    def remaining(self) -> int:
        return self.max_evaluations - self.evaluation_number

    @property
    def exhausted(self) -> bool:
        return self.evaluation_number >= self.max_evaluations

    def evaluate(self, f: ObjectiveFunction, x: float) -> float:
        self.evaluation_number += 1
        return f(x)


def derivative_at(f: ObjectiveFunction, x: float, solver: str) -> float:
    dfx = f.derivative(x)
    if dfx is NO_DERIVATIVE:
        raise ConfigurationError(f"{solver} requires function's derivative")
    return dfx


class Solver1D(ABC):
    """Base class for bracketed 1-D solvers.

    Parameters
    ----------
    config : SolverConfig, optional
        Budget and enforced bounds; defaults to ``SolverConfig()``.
    max_evaluations : int, optional
        Shortcut overriding ``config.max_evaluations``.
    """

    name: ClassVar[str]

    def __init__(
        self,
        config: SolverConfig | None = None,
        *,
        max_evaluations: int | None = None,
    ) -> None:
        cfg = SolverConfig() if config is None else config
        if max_evaluations is not None:
            cfg = replace(cfg, max_evaluations=max_evaluations)
        self._config = cfg

    @property
    def config(self) -> SolverConfig:
        return self._config

    @property
    def max_evaluations(self) -> int:
        return self._config.max_evaluations

    def set_max_evaluations(self, max_evaluations: int) -> None:
        self._config = replace(self._config, max_evaluations=max_evaluations)

    def set_lower_bound(self, lower_bound: float | None) -> None:
        self._config = replace(self._config, lower_bound=lower_bound)

    def set_upper_bound(self, upper_bound: float | None) -> None:
        self._config = replace(self._config, upper_bound=upper_bound)

    # ---------------------------
    # Entry points
    # ---------------------------

    def solve(
        self,
        f: ObjectiveFunction,
        x_accuracy: float,
        guess: float,
        x_min: float,
        x_max: float,
    ) -> float:
        """Find a root of `f` in ``[x_min, x_max]`` starting from `guess`."""
        return self.solve_result(f, x_accuracy, guess, x_min, x_max).root

    def solve_result(
        self,
        f: ObjectiveFunction,
        x_accuracy: float,
        guess: float,
        x_min: float,
        x_max: float,
    ) -> RootResult:
        accuracy = effective_accuracy(x_accuracy)
        self._check_bracket(x_min, x_max, guess)
        state = SolverState(
            root=float(guess),
            x_min=float(x_min),
            x_max=float(x_max),
            max_evaluations=self._config.max_evaluations,
        )
        return self._solve(f, accuracy, state)

    def solve_from_guess(
        self,
        f: ObjectiveFunction,
        x_accuracy: float,
        guess: float,
        step: float,
    ) -> float:
        """Bracket the root by expanding around `guess`, then solve."""
        return self.solve_from_guess_result(f, x_accuracy, guess, step).root

    def solve_from_guess_result(
        self,
        f: ObjectiveFunction,
        x_accuracy: float,
        guess: float,
        step: float,
    ) -> RootResult:
        accuracy = effective_accuracy(x_accuracy)
        search = find_bracket(f, float(guess), step, self._config)
        bracket = (search.x_min, search.x_max)
        if search.root is not None:
            return RootResult(
                root=search.root,
                evaluations=search.evaluations,
                method=self.name,
                bracket=bracket,
            )

        state = SolverState(
            root=0.5 * (search.x_min + search.x_max),
            x_min=search.x_min,
            x_max=search.x_max,
            max_evaluations=self._config.max_evaluations,
            evaluation_number=search.evaluations,
            fx_min=search.fx_min,
            fx_max=search.fx_max,
        )
        logger.debug(
            "%s: starting from bracket [%g, %g] with %d evaluations left",
            self.name,
            state.x_min,
            state.x_max,
            state.remaining,
        )
        return self._solve(f, accuracy, state)

    # ---------------------------
    # Subclass hooks
    # ---------------------------

    @abstractmethod
    def _solve(
        self, f: ObjectiveFunction, x_accuracy: float, state: SolverState
    ) -> RootResult:
        """Iterate from ``state.root``; `x_accuracy` is already validated."""

    def _result(self, state: SolverState, *, root: float | None = None) -> RootResult:
        return RootResult(
            root=state.root if root is None else root,
            evaluations=state.evaluation_number,
            method=self.name,
            bracket=(state.x_min, state.x_max),
        )

    def _check_bracket(self, x_min: float, x_max: float, guess: float) -> None:
        if x_min > x_max:
            raise ConfigurationError(
                f"invalid range: x_min ({x_min}) > x_max ({x_max})"
            )
        if not x_min <= guess <= x_max:
            raise ConfigurationError(
                f"guess ({guess}) outside [x_min, x_max] = [{x_min}, {x_max}]"
            )
        cfg = self._config
        if cfg.lower_bound is not None and x_min < cfg.lower_bound:
            raise ConfigurationError(
                f"x_min ({x_min}) < enforced lower bound ({cfg.lower_bound})"
            )
        if cfg.upper_bound is not None and x_max > cfg.upper_bound:
            raise ConfigurationError(
                f"x_max ({x_max}) > enforced upper bound ({cfg.upper_bound})"
            )
