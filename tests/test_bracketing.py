from __future__ import annotations

import math

import pytest

from solvers1d import (
    BracketingError,
    ConfigurationError,
    ConvergenceError,
    Newton,
    PolynomialObjective,
    SafeguardedNewton,
    SolverConfig,
)
from solvers1d.bracketing import find_bracket


def test_first_probe_goes_downhill(counting, sqrt2):
    g = counting(sqrt2)
    search = find_bracket(g, 1.0, 0.5)
    assert (search.x_min, search.x_max) == (1.0, 1.5)
    assert search.evaluations == 2 == g.calls
    assert search.fx_min * search.fx_max < 0
    assert search.root is None


def test_expands_geometrically_from_far_guess(sqrt2):
    search = find_bracket(sqrt2, 10.0, 0.1)
    assert search.x_min < math.sqrt(2.0) < search.x_max
    assert search.evaluations > 2


def test_exact_zero_at_guess(counting):
    g = counting(PolynomialObjective([-3.0, 1.0]))
    search = find_bracket(g, 3.0, 1.0)
    assert search.root == 3.0
    assert g.calls == 1


def test_no_sign_change_uses_whole_budget(counting):
    g = counting(PolynomialObjective([1.0, 0.0, 1.0]))  # x**2 + 1
    with pytest.raises(BracketingError, match="20 function evaluations"):
        find_bracket(g, 0.0, 1.0, SolverConfig(max_evaluations=20))
    assert g.calls == 20


def test_enforced_bounds_clamp_probes(counting):
    g = counting(PolynomialObjective([-0.5, 1.0]))  # x - 0.5
    search = find_bracket(g, 3.0, 5.0, SolverConfig(lower_bound=0.0))
    assert search.x_min == 0.0
    assert all(x >= 0.0 for x in g.points)


@pytest.mark.parametrize("step", [0.0, -1.0])
def test_step_must_be_positive(sqrt2, step: float):
    with pytest.raises(ConfigurationError):
        find_bracket(sqrt2, 1.0, step)


def test_guess_outside_enforced_bounds(sqrt2):
    with pytest.raises(ConfigurationError):
        find_bracket(sqrt2, -1.0, 0.5, SolverConfig(lower_bound=0.0))


@pytest.mark.parametrize("solver_cls", [Newton, SafeguardedNewton])
def test_solve_from_guess(counting, solver_cls):
    g = counting(PolynomialObjective([-2.0, 0.0, 0.0, 1.0]))  # x**3 - 2
    res = solver_cls().solve_from_guess_result(g, 1e-10, 10.0, 0.1)
    assert res.root == pytest.approx(2.0 ** (1.0 / 3.0), abs=1e-10)
    assert res.evaluations == g.calls <= 100


def test_solve_from_guess_reuses_endpoint_values(counting, sqrt2):
    g = counting(sqrt2)
    SafeguardedNewton().solve_from_guess(g, 1e-10, 1.0, 0.5)
    # bracket [1, 1.5] came from the search; the solver starts at its midpoint
    assert g.points[:3] == [1.0, 1.5, 1.25]


def test_solve_from_guess_exact_root():
    f = PolynomialObjective([-4.0, 0.0, 1.0])  # x**2 - 4
    res = Newton().solve_from_guess_result(f, 1e-10, 1.0, 1.0)
    assert res.root == 2.0
    assert res.evaluations == 2


def test_search_evaluations_charged_to_budget(counting, sqrt2):
    g = counting(sqrt2)
    with pytest.raises(ConvergenceError):
        SafeguardedNewton(max_evaluations=3).solve_from_guess(g, 1e-10, 1.0, 0.5)
    assert g.calls == 3


def test_solve_from_guess_with_lower_bound(counting):
    g = counting(PolynomialObjective([-0.5, 1.0]))
    s = SafeguardedNewton()
    s.set_lower_bound(0.0)
    assert s.solve_from_guess(g, 1e-12, 3.0, 5.0) == pytest.approx(0.5, abs=1e-12)
    assert all(x >= 0.0 for x in g.points)
