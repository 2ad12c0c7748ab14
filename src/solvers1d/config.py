from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from solvers1d.exceptions import ConfigurationError

MACHINE_EPSILON = float(np.finfo(float).eps)


@dataclass(frozen=True, slots=True)
class SolverConfig:
    max_evaluations: int = 100
    lower_bound: float | None = None
    upper_bound: float | None = None
    growth_factor: float = 1.6

    def __post_init__(self) -> None:
        if self.max_evaluations <= 0:
            raise ConfigurationError("max_evaluations must be > 0")
        if self.growth_factor <= 1.0:
            raise ConfigurationError("growth_factor must be > 1.0")
        if (
            self.lower_bound is not None
            and self.upper_bound is not None
            and self.lower_bound > self.upper_bound
        ):
            raise ConfigurationError(
                f"lower_bound ({self.lower_bound}) > upper_bound ({self.upper_bound})"
            )

    def enforce_bounds(self, x: float) -> float:
        """Clamp ``x`` into the enforced ``[lower_bound, upper_bound]`` range."""
        if self.lower_bound is not None and x < self.lower_bound:
            return self.lower_bound
        if self.upper_bound is not None and x > self.upper_bound:
            return self.upper_bound
        return x


def effective_accuracy(x_accuracy: float) -> float:
    if not (x_accuracy > 0.0) or not math.isfinite(x_accuracy):
        raise ConfigurationError(f"accuracy ({x_accuracy}) must be positive")
    return max(x_accuracy, MACHINE_EPSILON)
