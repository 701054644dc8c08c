"""Analytic approximations of the quasi-stationary distribution of the
nonlinear voter model with absorbing zealots."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate

from .rates import all_t_minus, all_t_plus

__all__ = [
    "RecursiveResult",
    "q_recursive",
    "q_nifty",
    "quasi_stationary_dist_analytic",
]

_OMEGA = 0.5


@dataclass(frozen=True)
class RecursiveResult:
    """Outcome of the damped recursive solve."""

    distribution: list[float]
    converged: bool
    iterations: int


def q_recursive(
    initial: list[float],
    tplus: list[float],
    tminus: list[float],
    max_iter: int = 10_000,
    tolerance: float = 1e-10,
) -> RecursiveResult:
    """Iterate the flux-balance recursion for the quasi-stationary distribution."""
    q = [float(x) for x in initial]
    size = len(q)
    if size < 2:
        raise ValueError("distribution must have at least two states")
    if len(tplus) < size or len(tminus) < size:
        raise ValueError("rate lists are shorter than the distribution")

    alpha = [0.0] + [tplus[n - 1] / tminus[n] for n in range(1, size)]
    beta = [0.0] + [tplus[size - 1] / tminus[n] for n in range(1, size)]

    iterations = 0
    converged = False
    while iterations < max_iter:
        iterations += 1
        cum = list(accumulate(q))
        last = q[-1]
        first = (1.0 - _OMEGA) * q[0] + _OMEGA * (tminus[1] * q[1]) / (
            tplus[0] - tplus[size - 1] * last
        )
        rest = [
            (1.0 - _OMEGA) * q[n]
            + _OMEGA * (alpha[n] * q[n - 1] - beta[n] * last * cum[n - 1])
            for n in range(1, size)
        ]
        new_q = [first, *rest]
        norm = sum(new_q)
        new_q = [x / norm for x in new_q]
        diff = sum(abs(a - b) for a, b in zip(new_q, q))
        q = new_q
        if diff < tolerance:
            converged = True
            break

    return RecursiveResult(distribution=q, converged=converged, iterations=iterations)


def q_nifty(tplus: list[float], tminus: list[float], size: int) -> list[float]:
    """Product-form approximation of the quasi-stationary distribution."""
    if size < 1:
        raise ValueError("size must be positive")
    if len(tplus) < size or len(tminus) < size:
        raise ValueError("rate lists are shorter than size")
    weights = [1.0]
    for j in range(size - 1):
        weights.append(weights[-1] * tplus[j] / tminus[j + 1])
    total = sum(weights)
    return [w / total for w in weights]


def quasi_stationary_dist_analytic(
    q: float,
    population: int,
    zealots: int,
    max_iter: int = 10_000,
    tolerance: float = 1e-10,
) -> tuple[RecursiveResult, list[float]]:
    """Recursive solution and product-form approximation, starting from a flat distribution."""
    size = population - zealots
    if size < 2:
        raise ValueError("population - zealots must be at least 2")
    tplus = all_t_plus(population, zealots, q)
    tminus = all_t_minus(population, zealots, q)
    flat = [1.0 / size] * size
    recursive = q_recursive(flat, tplus, tminus, max_iter, tolerance)
    return recursive, q_nifty(tplus, tminus, size)