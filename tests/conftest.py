"""Pytest helpers for the solvers1d library."""

from __future__ import annotations

import pytest

from solvers1d import FunctionObjective, PolynomialObjective


class CountingObjective:
    """Wraps an objective and counts calls of ``f(x)`` (not of the derivative)."""

    def __init__(self, inner) -> None:
        self.inner = inner
        self.calls = 0
        self.points: list[float] = []

    def __call__(self, x: float) -> float:
        self.calls += 1
        self.points.append(x)
        return self.inner(x)

    def derivative(self, x: float) -> float | None:
        return self.inner.derivative(x)


@pytest.fixture
def counting():
    """Factory fixture: ``counting(objective)`` -> CountingObjective."""

    def _wrap(objective) -> CountingObjective:
        return CountingObjective(objective)

    return _wrap


@pytest.fixture
def sqrt2() -> PolynomialObjective:
    """x**2 - 2, root at sqrt(2)."""
    return PolynomialObjective([-2.0, 0.0, 1.0])


@pytest.fixture
def no_derivative() -> FunctionObjective:
    return FunctionObjective(lambda x: x * x - 2.0)
