"""Transition rates and mean fixation times for the nonlinear voter model
with absorbing zealots in a finite population."""

from __future__ import annotations

import math

__all__ = [
    "t_plus",
    "t_minus",
    "gammas",
    "all_t_plus",
    "all_t_minus",
    "fixation_time",
    "fixation_times_against_z",
]


def _validate(population: int, up: float, zealots: int) -> int:
    if population < 2:
        raise ValueError("population must be at least 2")
    if not 0 <= zealots <= population:
        raise ValueError("zealots must lie in [0, population]")
    susceptible = population - zealots
    if not 0 <= up <= susceptible:
        raise ValueError("number of up susceptibles must lie in [0, population - zealots]")
    return susceptible


def t_plus(population: int, up: float, zealots: int, q: float) -> float:
    """Rate at which a down susceptible flips up (T+)."""
    susceptible = _validate(population, up, zealots)
    return (susceptible - up) * ((up + zealots) / (population - 1.0)) ** q


def t_minus(population: int, up: float, zealots: int, q: float) -> float:
    """Rate at which an up susceptible flips down (T-)."""
    susceptible = _validate(population, up, zealots)
    return up * ((susceptible - up) / (population - 1.0)) ** q


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator)


def gammas(population: int, zealots: int, q: float) -> list[float]:
    """Return gamma_n = T-/T+ for n in [0, population].

    Entries beyond population - zealots are zero; a vanishing T+ yields
    nan or inf as in IEEE arithmetic.
    """
    _validate(population, 0, zealots)
    result = [0.0] * (population + 1)
    for n in range(population - zealots + 1):
        result[n] = _ratio(
            t_minus(population, n, zealots, q), t_plus(population, n, zealots, q)
        )
    return result


def all_t_plus(population: int, zealots: int, q: float) -> list[float]:
    """T+ for every n in [0, population - zealots]."""
    _validate(population, 0, zealots)
    return [t_plus(population, n, zealots, q) for n in range(population - zealots + 1)]


def all_t_minus(population: int, zealots: int, q: float) -> list[float]:
    """T- for every n in [0, population - zealots]."""
    _validate(population, 0, zealots)
    return [t_minus(population, n, zealots, q) for n in range(population - zealots + 1)]


def fixation_time(population: int, up: int, zealots: int, q: float) -> float:
    """Mean time to reach the absorbing state starting from ``up`` up susceptibles."""
    if not 1 <= zealots <= population - 1:
        raise ValueError("zealots must lie in [1, population - 1]")
    susceptible = _validate(population, up, zealots)
    gamma = gammas(population, zealots, q)
    tplus = all_t_plus(population, zealots, q)

    sum1 = 0.0
    sum2 = 0.0
    prod1 = 1.0
    inner = 0.0
    for k in range(susceptible):
        if k >= 1:
            prod1 *= gamma[k]
            inner = gamma[k] * inner + 1.0 / tplus[k]
        if k >= up:
            sum1 += prod1
            sum2 += inner
    return sum1 / tplus[0] + sum2


def fixation_times_against_z(population: int, q: float) -> list[tuple[float, float]]:
    """Pairs (Z/N, mean fixation time from n=0) for every Z in [1, N-1]."""
    if population < 2:
        raise ValueError("population must be at least 2")
    return [
        (zealots / population, fixation_time(population, 0, zealots, q))
        for zealots in range(1, population)
    ]