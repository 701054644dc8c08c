import math

import pytest

from nonlinear_voter.rates import (
    all_t_minus,
    all_t_plus,
    fixation_time,
    fixation_times_against_z,
    gammas,
    t_minus,
    t_plus,
)


def test_t_plus_small_linear_case():
    assert t_plus(3, 0, 1, 1.0) == pytest.approx(1.0)


def test_t_plus_vanishes_at_absorbing_state():
    assert t_plus(100, 70, 30, 1.5) == 0.0


def test_t_minus_vanishes_with_no_up_nodes():
    assert t_minus(100, 0, 30, 0.8) == 0.0


def test_rates_positive_in_interior():
    for n in range(1, 70):
        assert t_plus(100, n, 30, 2.0) > 0
        assert t_minus(100, n, 30, 2.0) > 0


def test_all_rates_match_single_rates():
    plus = all_t_plus(20, 5, 1.5)
    minus = all_t_minus(20, 5, 1.5)
    assert len(plus) == 16
    assert len(minus) == 16
    assert plus == [t_plus(20, n, 5, 1.5) for n in range(16)]
    assert minus == [t_minus(20, n, 5, 1.5) for n in range(16)]


def test_invalid_up_rejected():
    with pytest.raises(ValueError):
        t_plus(10, 9, 3, 1.0)


def test_fixation_time_two_state():
    assert fixation_time(2, 0, 1, 2.5) == pytest.approx(1.0)


def test_fixation_time_zero_at_absorbing_state():
    assert fixation_time(50, 40, 10, 1.2) == 0.0


def test_fixation_time_decreases_with_start():
    times = [fixation_time(30, n, 8, 1.5) for n in range(23)]
    assert all(a > b for a, b in zip(times, times[1:]))


def test_fixation_time_requires_zealots():
    with pytest.raises(ValueError):
        fixation_time(10, 0, 0, 1.0)
    with pytest.raises(ValueError):
        fixation_time(10, 0, 10, 1.0)


def test_fixation_times_against_z_consistent():
    results = fixation_times_against_z(10, 1.0)
    assert len(results) == 9
    assert [z for z, _ in results] == pytest.approx([k / 10 for k in range(1, 10)])
    for zealots, (_, time) in enumerate(results, start=1):
        assert time == pytest.approx(fixation_time(10, 0, zealots, 1.0))
        assert time > 0