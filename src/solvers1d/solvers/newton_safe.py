"""Newton-Raphson safeguarded by bisection.

Keeps a bracket ``[x_low, x_high]`` with ``f(x_low) < 0 < f(x_high)`` and takes a
Newton step only when it lands strictly inside the bracket and shrinks the
step at least as fast as bisection would; otherwise it bisects.
"""

from __future__ import annotations

import logging
import math

from solvers1d.exceptions import BracketingError, max_evaluations_exceeded
from solvers1d.objective import ObjectiveFunction
from solvers1d.solvers.base import RootResult, Solver1D, SolverState, derivative_at

logger = logging.getLogger(__name__)


def _newton_step_ok(
    root: float,
    froot: float,
    dfroot: float,
    x_low: float,
    x_high: float,
    dx_old: float,
) -> bool:
    if dfroot == 0.0 or not math.isfinite(dfroot):
        return False
    # sign of (x_new - x_high) * (x_new - x_low), scaled by dfroot**2
    outside = ((root - x_high) * dfroot - froot) * ((root - x_low) * dfroot - froot)
    if not outside < 0.0:
        return False
    return abs(2.0 * froot) <= abs(dx_old * dfroot)


class SafeguardedNewton(Solver1D):
    name = "NewtonSafe"

    def _evaluate(self, f: ObjectiveFunction, state: SolverState) -> float:
        froot = state.evaluate(f, state.root)
        if math.isnan(froot):
            # a point of unknown sign cannot shrink the bracket
            raise BracketingError(
                f"{self.name}: f({state.root!r}) is NaN inside the bracket "
                f"[{state.x_min:g}, {state.x_max:g}]"
            )
        return froot

    def _solve(
        self, f: ObjectiveFunction, x_accuracy: float, state: SolverState
    ) -> RootResult:
        dfroot = derivative_at(f, state.root, self.name)

        if state.fx_min is None or state.fx_max is None:
            if state.remaining < 2:
                raise max_evaluations_exceeded(self.name, state.max_evaluations)
            state.fx_min = state.evaluate(f, state.x_min)
            state.fx_max = state.evaluate(f, state.x_max)

        if state.fx_min == 0.0:
            return self._result(state, root=state.x_min)
        if state.fx_max == 0.0:
            return self._result(state, root=state.x_max)
        if not state.fx_min * state.fx_max < 0.0:
            raise BracketingError(
                f"root not bracketed: f[{state.x_min:g}, {state.x_max:g}] -> "
                f"[{state.fx_min:g}, {state.fx_max:g}]"
            )

        # orient the search so that f(x_low) < 0
        if state.fx_min < 0.0:
            x_low, x_high = state.x_min, state.x_max
        else:
            x_low, x_high = state.x_max, state.x_min

        dx_old = state.x_max - state.x_min
        dx = dx_old

        if state.exhausted:
            raise max_evaluations_exceeded(self.name, state.max_evaluations)
        froot = self._evaluate(f, state)

        while True:
            if froot == 0.0:
                return self._result(state)

            use_newton = _newton_step_ok(
                state.root, froot, dfroot, x_low, x_high, dx_old
            )
            dx_old = dx
            if use_newton:
                dx = froot / dfroot
                state.root -= dx
            else:
                dx = 0.5 * (x_high - x_low)
                state.root = x_low + dx
            logger.debug(
                "%s eval %d: %s step to %r (dx=%g, dx_old=%g)",
                self.name,
                state.evaluation_number,
                "newton" if use_newton else "bisection",
                state.root,
                dx,
                dx_old,
            )

            if abs(dx) < x_accuracy:
                return self._result(state)

            if state.exhausted:
                raise max_evaluations_exceeded(self.name, state.max_evaluations)
            froot = self._evaluate(f, state)
            dfroot = derivative_at(f, state.root, self.name)

            if froot < 0.0:
                x_low = state.root
            else:
                x_high = state.root
            state.x_min, state.x_max = min(x_low, x_high), max(x_low, x_high)
