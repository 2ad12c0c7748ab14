"""Plain Newton-Raphson with a bracket-preserving fallback."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace

from solvers1d.exceptions import max_evaluations_exceeded
from solvers1d.objective import ObjectiveFunction
from solvers1d.solvers.base import RootResult, Solver1D, SolverState, derivative_at
from solvers1d.solvers.newton_safe import SafeguardedNewton

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Handoff:
    """Newton gave up on its own iteration; continue with SafeguardedNewton."""

    guess: float  # last in-bracket iterate
    reason: str


class Newton(Solver1D):
    """Newton-Raphson iteration.

    The bracket ``[x_min, x_max]`` is only used as a fence: when a step lands
    outside it (or the step is not finite), the solve continues with a fresh
    :class:`SafeguardedNewton` that receives whatever budget is left.
    """

    name = "Newton"

    def _solve(
        self, f: ObjectiveFunction, x_accuracy: float, state: SolverState
    ) -> RootResult:
        outcome = self._iterate(f, x_accuracy, state)
        if isinstance(outcome, Handoff):
            return self._hand_off(f, x_accuracy, state, outcome)
        return outcome

    def _iterate(
        self, f: ObjectiveFunction, x_accuracy: float, state: SolverState
    ) -> RootResult | Handoff:
        dfroot = derivative_at(f, state.root, self.name)
        if state.exhausted:
            raise max_evaluations_exceeded(self.name, state.max_evaluations)
        froot = state.evaluate(f, state.root)

        while True:
            previous = state.root
            if froot == 0.0:
                return self._result(state)
            dx = froot / dfroot if dfroot != 0.0 else math.inf
            if not math.isfinite(dx):
                return Handoff(previous, f"non-finite step (f'={dfroot!r})")

            state.root -= dx
            logger.debug(
                "%s eval %d: x=%r f=%g f'=%g dx=%g",
                self.name,
                state.evaluation_number,
                state.root,
                froot,
                dfroot,
                dx,
            )
            # jumped out of brackets
            if (state.x_min - state.root) * (state.root - state.x_max) < 0.0:
                return Handoff(previous, f"step to {state.root!r} left the bracket")
            if abs(dx) < x_accuracy:
                return self._result(state)

            if state.exhausted:
                raise max_evaluations_exceeded(self.name, state.max_evaluations)
            froot = state.evaluate(f, state.root)
            dfroot = derivative_at(f, state.root, self.name)

    def _hand_off(
        self,
        f: ObjectiveFunction,
        x_accuracy: float,
        state: SolverState,
        handoff: Handoff,
    ) -> RootResult:
        if state.remaining <= 0:
            raise max_evaluations_exceeded(self.name, state.max_evaluations)

        logger.info(
            "%s: %s after %d evaluations; switching to %s with %d left",
            self.name,
            handoff.reason,
            state.evaluation_number,
            SafeguardedNewton.name,
            state.remaining,
        )
        safe = SafeguardedNewton(replace(self.config, max_evaluations=state.remaining))
        sub_state = SolverState(
            root=handoff.guess,
            x_min=state.x_min,
            x_max=state.x_max,
            max_evaluations=state.remaining,
            fx_min=state.fx_min,
            fx_max=state.fx_max,
        )
        result = safe._solve(f, x_accuracy, sub_state)
        return replace(
            result,
            evaluations=state.evaluation_number + result.evaluations,
            delegated=True,
        )
