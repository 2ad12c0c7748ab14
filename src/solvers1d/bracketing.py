"""Bracket search for solvers started from a single guess."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from solvers1d.config import SolverConfig
from solvers1d.exceptions import BracketingError, ConfigurationError
from solvers1d.typing import ScalarFn

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BracketSearch:
    x_min: float
    x_max: float
    fx_min: float
    fx_max: float
    evaluations: int
    root: float | None = None  # set when f vanished exactly at a probed point


def find_bracket(
    f: ScalarFn,
    guess: float,
    step: float,
    config: SolverConfig | None = None,
) -> BracketSearch:
    """
    Expand an interval around `guess` until f changes sign across it.

    - The first probe goes downhill: to ``guess - step`` when ``f(guess) > 0``,
      else to ``guess + step``.
    - Afterwards the side with the smaller ``|f|`` is pushed out by
      ``config.growth_factor`` times the current width; ties alternate sides.
    - Probes are clamped to the enforced bounds of `config`.

    Every call of `f` counts against ``config.max_evaluations``.
    Returns a :class:`BracketSearch` with ``fx_min * fx_max <= 0``.
    """
    cfg = SolverConfig() if config is None else config
    if not step > 0.0:
        raise ConfigurationError(f"step ({step}) must be positive")
    if cfg.enforce_bounds(guess) != guess:
        raise ConfigurationError(
            f"guess ({guess}) outside enforced bounds "
            f"[{cfg.lower_bound}, {cfg.upper_bound}]"
        )

    x = float(guess)
    fx = f(x)
    if fx == 0.0:
        return BracketSearch(x, x, fx, fx, 1, root=x)
    if cfg.max_evaluations < 2:
        raise _unable_to_bracket(cfg.max_evaluations, x, x, fx, fx)

    if fx > 0.0:
        x_min = cfg.enforce_bounds(x - step)
        fx_min = f(x_min)
        x_max, fx_max = x, fx
    else:
        x_min, fx_min = x, fx
        x_max = cfg.enforce_bounds(x + step)
        fx_max = f(x_max)
    evaluations = 2

    flipflop = False
    while True:
        if fx_min * fx_max <= 0.0:
            root = None
            if fx_min == 0.0:
                root = x_min
            elif fx_max == 0.0:
                root = x_max
            logger.debug(
                "Bracket [%g, %g] found after %d evaluations", x_min, x_max, evaluations
            )
            return BracketSearch(x_min, x_max, fx_min, fx_max, evaluations, root=root)

        if evaluations >= cfg.max_evaluations:
            break

        a, b = abs(fx_min), abs(fx_max)
        if a < b:
            expand_low = True
        elif a > b:
            expand_low = False
        else:
            # equal (or NaN): alternate sides
            expand_low = not flipflop
            flipflop = not flipflop

        width = x_max - x_min
        if expand_low:
            x_min = cfg.enforce_bounds(x_min - cfg.growth_factor * width)
            fx_min = f(x_min)
        else:
            x_max = cfg.enforce_bounds(x_max + cfg.growth_factor * width)
            fx_max = f(x_max)
        evaluations += 1

    raise _unable_to_bracket(cfg.max_evaluations, x_min, x_max, fx_min, fx_max)


def _unable_to_bracket(
    max_evaluations: int, x_min: float, x_max: float, fx_min: float, fx_max: float
) -> BracketingError:
    return BracketingError(
        f"unable to bracket root in {max_evaluations} function evaluations "
        f"(last bracket attempt: f[{x_min:g}, {x_max:g}] -> [{fx_min:g}, {fx_max:g}])"
    )
