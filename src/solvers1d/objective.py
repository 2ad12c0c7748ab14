"""Objective functions consumed by the solvers.

A solver needs two things from an objective:
- ``f(x)``, the value whose root is sought
- ``f.derivative(x)``, or :data:`NO_DERIVATIVE` when the derivative is unknown

Plain callables can be adapted with :class:`FunctionObjective`; polynomials get
an exact derivative through :class:`PolynomialObjective`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final, Protocol, runtime_checkable

import numpy as np
from numpy.polynomial import Polynomial

from solvers1d.exceptions import ConfigurationError
from solvers1d.typing import ScalarFn

NO_DERIVATIVE: Final = None


@runtime_checkable
class ObjectiveFunction(Protocol):
    """Scalar function with an (optional) first derivative."""

    def __call__(self, x: float) -> float:  # pragma: no cover
        ...

    def derivative(self, x: float) -> float | None:  # pragma: no cover
        ...


class FunctionObjective:
    """Wrap a callable ``fn`` and, optionally, its derivative ``dfn``."""

    __slots__ = ("_fn", "_dfn")

    def __init__(self, fn: ScalarFn, dfn: ScalarFn | None = None) -> None:
        self._fn = fn
        self._dfn = dfn

    def __call__(self, x: float) -> float:
        return float(self._fn(x))

    def derivative(self, x: float) -> float | None:
        if self._dfn is None:
            return NO_DERIVATIVE
        return float(self._dfn(x))


class PolynomialObjective:
    """Polynomial objective with an exact derivative.

    Parameters
    ----------
    coefficients : sequence of float
        Coefficients in increasing degree, as in :class:`numpy.polynomial.Polynomial`
        (``[-2, 0, 1]`` is ``x**2 - 2``).
    """

    __slots__ = ("poly", "_dpoly")

    def __init__(self, coefficients: Sequence[float] | np.ndarray) -> None:
        self.poly = Polynomial(np.asarray(coefficients, dtype=np.float64))
        self._dpoly = self.poly.deriv()

    def __call__(self, x: float) -> float:
        return float(self.poly(x))

    def derivative(self, x: float) -> float | None:
        return float(self._dpoly(x))

    def roots(self) -> np.ndarray:
        """All real roots, sorted."""
        r = self.poly.roots()
        return np.sort(r[np.isreal(r)].real)


def with_numerical_derivative(fn: ScalarFn, rel_step: float = 1e-5) -> FunctionObjective:
    """Attach a central-difference derivative to ``fn``.

    The step is ``rel_step * max(1, |x|)``; each derivative costs two extra calls
    of ``fn`` that are not charged to the solver's evaluation budget.
    """
    if rel_step <= 0.0:
        raise ConfigurationError("rel_step must be > 0")

    def dfn(x: float) -> float:
        eps = rel_step * max(1.0, abs(x))
        return (fn(x + eps) - fn(x - eps)) / (2.0 * eps)

    return FunctionObjective(fn, dfn)
