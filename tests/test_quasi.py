import pytest

from nonlinear_voter.quasi import (
    RecursiveResult,
    q_nifty,
    q_recursive,
    quasi_stationary_dist_analytic,
)
from nonlinear_voter.rates import all_t_minus, all_t_plus


def _rates(population, zealots, q):
    return all_t_plus(population, zealots, q), all_t_minus(population, zealots, q)


def test_recursive_two_state_converges_to_exact():
    plus, minus = _rates(4, 2, 1.0)
    result = q_recursive([0.5, 0.5], plus, minus, 10_000, 1e-12)
    assert result.converged
    assert result.distribution == pytest.approx([1 / 3, 2 / 3], abs=1e-8)


def test_recursive_result_is_normalised():
    plus, minus = _rates(4, 2, 1.0)
    result = q_recursive([0.2, 0.8], plus, minus, 5, 1e-12)
    assert sum(result.distribution) == pytest.approx(1.0)
    assert result.iterations == 5
    assert not result.converged


def test_recursive_zero_iterations_returns_initial():
    plus, minus = _rates(4, 2, 1.0)
    result = q_recursive([0.25, 0.75], plus, minus, 0, 1e-10)
    assert result == RecursiveResult(distribution=[0.25, 0.75], converged=False, iterations=0)


def test_recursive_fixed_point_is_stable():
    plus, minus = _rates(4, 2, 1.0)
    first = q_recursive([0.5, 0.5], plus, minus, 10_000, 1e-13)
    again = q_recursive(first.distribution, plus, minus, 1, 1e-13)
    assert again.distribution == pytest.approx(first.distribution, abs=1e-10)


def test_recursive_rejects_short_distribution():
    plus, minus = _rates(4, 2, 1.0)
    with pytest.raises(ValueError):
        q_recursive([1.0], plus, minus, 10, 1e-10)


def test_nifty_normalised_and_product_form():
    plus, minus = _rates(20, 6, 1.5)
    size = 14
    dist = q_nifty(plus, minus, size)
    assert len(dist) == size
    assert sum(dist) == pytest.approx(1.0)
    assert all(x > 0 for x in dist)
    for n in range(size - 1):
        assert dist[n + 1] / dist[n] == pytest.approx(plus[n] / minus[n + 1])


def test_nifty_rejects_short_rates():
    with pytest.raises(ValueError):
        q_nifty([1.0], [0.0], 3)


def test_analytic_returns_both_distributions():
    recursive, nifty = quasi_stationary_dist_analytic(1.0, 4, 2)
    assert recursive.converged
    assert recursive.distribution == pytest.approx([1 / 3, 2 / 3], abs=1e-6)
    assert len(nifty) == 2
    assert sum(nifty) == pytest.approx(1.0)


def test_analytic_rejects_tiny_system():
    with pytest.raises(ValueError):
        quasi_stationary_dist_analytic(1.0, 5, 4)