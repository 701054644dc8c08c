"""Stochastic simulation of the nonlinear voter model with absorbing zealots.

States are counted by the number of up susceptibles. The state
``population - zealots`` is absorbing.
"""

from __future__ import annotations

import math
import random
from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .rates import fixation_time, t_minus, t_plus

__all__ = [
    "Trajectory",
    "linspace",
    "integer_linspace",
    "evolve_x_in_time",
    "fixation_time_single",
    "fixation_times_against_z_single",
    "average_fixation_times_against_z",
    "quasi_stationary_distribution_simulation",
]

_CLONE_ATTEMPTS = 10


@dataclass(frozen=True)
class Trajectory:
    """Fraction of up nodes sampled at evenly spaced times."""

    times: list[float]
    x: list[float]

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return zip(self.times, self.x)


def linspace(start: float, stop: float, num: int) -> list[float]:
    """``num`` evenly spaced values from ``start`` to ``stop`` inclusive."""
    if num < 1:
        raise ValueError("num must be at least 1")
    if num == 1:
        return [float(start)]
    step = (stop - start) / (num - 1)
    values = [start + i * step for i in range(num - 1)]
    values.append(float(stop))
    return values


def integer_linspace(start: int, stop: int, num: int) -> list[int]:
    """``num`` evenly spaced values from ``start`` to ``stop``, rounded to integers."""
    return [round(value) for value in linspace(start, stop, num)]


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _check(population: int, zealots: int, initial_up: int) -> int:
    if population < 2:
        raise ValueError("population must be at least 2")
    if not 1 <= zealots <= population - 1:
        raise ValueError("zealots must lie in [1, population - 1]")
    susceptible = population - zealots
    if not 0 <= initial_up < susceptible:
        raise ValueError("initial_up must lie in [0, population - zealots - 1]")
    return susceptible


def _events(
    q: float,
    population: int,
    zealots: int,
    up: int,
    t_max: float,
    rng: random.Random,
) -> Iterator[tuple[float, int, int]]:
    """Yield (event time, state before, state after) until absorption or t >= t_max."""
    absorbing = population - zealots
    t = 0.0
    while t < t_max:
        rate_up = t_plus(population, up, zealots, q)
        rate_down = t_minus(population, up, zealots, q)
        total = rate_up + rate_down
        t += -math.log(1.0 - rng.random()) / total
        new = up + 1 if rng.random() <= rate_up / total else up - 1
        yield t, up, new
        up = new
        if up == absorbing:
            return


def _run(
    q: float,
    population: int,
    zealots: int,
    initial_up: int,
    t_max: float,
    rng: random.Random,
) -> tuple[float, bool]:
    absorbing = _check(population, zealots, initial_up)
    t = 0.0
    absorbed = False
    for t, _, after in _events(q, population, zealots, initial_up, t_max, rng):
        absorbed = after == absorbing
    return t, absorbed


def evolve_x_in_time(
    q: float = 3.0,
    z: float = 0.3,
    population: int = 100,
    initial_up: int = 1,
    t_max: float = 1e3,
    samples: int = 1000,
    rng: random.Random | None = None,
) -> Trajectory:
    """Simulate one realisation and sample x = up/N at ``samples + 1`` times."""
    if samples < 1:
        raise ValueError("samples must be at least 1")
    rng = _rng(rng)
    zealots = int(z * population)
    absorbing = _check(population, zealots, initial_up)
    times = linspace(0.0, t_max, samples + 1)
    xs: list[float] = []

    for t, before, after in _events(q, population, zealots, initial_up, t_max, rng):
        while len(xs) < len(times) and times[len(xs)] <= t:
            xs.append(before / population)
        if after == absorbing:
            xs.extend([absorbing / population] * (len(times) - len(xs)))
            break

    xs.extend([0.0] * (len(times) - len(xs)))
    return Trajectory(times=times, x=xs)


def fixation_time_single(
    q: float,
    population: int,
    zealots: int,
    initial_up: int = 1,
    t_max: float = 1e3,
    rng: random.Random | None = None,
) -> float:
    """Time at which one realisation is absorbed, or passes ``t_max``."""
    t, _ = _run(q, population, zealots, initial_up, t_max, _rng(rng))
    return t


def fixation_times_against_z_single(
    q: float = 1.5,
    z_values: Sequence[float] | None = None,
    population: int = 100,
    initial_up: int = 1,
    t_max: float = 1e3,
    rng: random.Random | None = None,
) -> list[tuple[float, float]]:
    """Pairs (z, single-realisation fixation time) for each zealot fraction."""
    rng = _rng(rng)
    if z_values is None:
        z_values = linspace(0.01, 0.99, 1000)
    return [
        (z, fixation_time_single(q, population, int(z * population), initial_up, t_max, rng))
        for z in z_values
    ]


def average_fixation_times_against_z(
    q: float = 0.8,
    zealot_values: Sequence[int] | None = None,
    population: int = 100,
    initial_up: int = 0,
    t_max: float = 1e3,
    number_of_sims: int = 1000,
    rng: random.Random | None = None,
) -> list[tuple[float, float]]:
    """Pairs (Z/N, mean fixation time over realisations that were absorbed).

    The mean is nan where no realisation reached absorption before ``t_max``.
    """
    if number_of_sims < 1:
        raise ValueError("number_of_sims must be at least 1")
    rng = _rng(rng)
    if zealot_values is None:
        zealot_values = integer_linspace(1, population - 1, 25)

    results = []
    for zealots in zealot_values:
        absorbed_times = [
            t
            for t, absorbed in (
                _run(q, population, zealots, initial_up, t_max, rng)
                for _ in range(number_of_sims)
            )
            if absorbed
        ]
        mean = sum(absorbed_times) / len(absorbed_times) if absorbed_times else math.nan
        results.append((zealots / population, mean))
    return results


def quasi_stationary_distribution_simulation(
    q: float,
    population: int,
    zealots: int,
    number_of_sims: int = 10_000,
    dt: float = 0.01,
    t_max: float | None = None,
    rng: random.Random | None = None,
) -> list[float]:
    """Estimate the quasi-stationary distribution with a cloning ensemble.

    Each step every surviving member makes at most one jump with probability
    ``(T+ + T-) * dt``; absorbed members are then replaced by copies of
    randomly chosen survivors. ``t_max`` defaults to twice the mean
    fixation time from n = 0.
    """
    if dt <= 0:
        raise ValueError("dt must be positive")
    if number_of_sims < 1:
        raise ValueError("number_of_sims must be at least 1")
    absorbing = _check(population, zealots, 0)
    rng = _rng(rng)
    if t_max is None:
        t_max = 2.0 * fixation_time(population, 0, zealots, q)

    ensemble = [rng.randrange(absorbing) for _ in range(number_of_sims)]

    for _ in range(int(t_max / dt)):
        for j, state in enumerate(ensemble):
            if state == absorbing:
                continue
            rate_up = t_plus(population, state, zealots, q)
            rate_down = t_minus(population, state, zealots, q)
            total = rate_up + rate_down
            if rng.random() < total * dt:
                state += 1 if rng.random() < rate_up / total else -1
                ensemble[j] = min(max(state, 0), absorbing)

        for j, state in enumerate(ensemble):
            if state != absorbing:
                continue
            for _ in range(_CLONE_ATTEMPTS):
                candidate = rng.randrange(number_of_sims)
                if candidate == j:
                    continue
                if ensemble[candidate] != absorbing:
                    ensemble[j] = ensemble[candidate]
                    break

    counts = Counter(state for state in ensemble if state != absorbing)
    survived = sum(counts.values())
    if not survived:
        return [0.0] * absorbing
    return [counts[n] / survived for n in range(absorbing)]