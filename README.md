# nonlinear-voter

Tools for the nonlinear voter model (parameter `q`) in a finite population
of size `N` with `Z` zealots that hold the +1 opinion. The remaining
`S = N - Z` susceptible nodes switch opinion. The state is the number `n`
of susceptibles holding +1. The state where every susceptible holds +1
(`n = S`) is absorbing.

The package has three modules:

- `nonlinear_voter.rates`: the transition rates `T+` and `T-`, and the mean
  time to fixation;
- `nonlinear_voter.quasi`: the quasi-stationary distribution, found with a
  relaxed recursive iteration and with a closed-form product approximation;
- `nonlinear_voter.simulation`: stochastic simulation: single trajectories,
  fixation times, averages over many runs, and a cloning (resampling)
  estimate of the quasi-stationary distribution.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Rates and fixation times

```python
from nonlinear_voter.rates import (
    t_plus, t_minus, gammas, all_t_plus, all_t_minus,
    fixation_time, fixation_times_against_z,
)

t_plus(100, 10, 30, 1.5)        # rate for n -> n + 1
t_minus(100, 10, 30, 1.5)       # rate for n -> n - 1
all_t_plus(100, 30, 1.5)        # T+ for n = 0 .. N - Z
gammas(100, 30, 1.5)            # T- / T+ for n = 0 .. N (zero beyond N - Z)
fixation_time(100, 0, 30, 1.5)  # mean time from n = 0 to absorption

# (Z / N, fixation time from n = 0) for every Z in 1 .. N - 1
curve = fixation_times_against_z(100, 3.0)
```

Arguments outside their valid range (for example more zealots than the
population, or `n` above `N - Z`) raise `ValueError`. `fixation_time`
requires `1 <= Z <= N - 1`.

## Quasi-stationary distribution

```python
from nonlinear_voter.quasi import q_recursive, q_nifty, quasi_stationary_dist_analytic
from nonlinear_voter.rates import all_t_plus, all_t_minus

recursive, approx = quasi_stationary_dist_analytic(0.8, 100, 30, 10_000, 1e-10)
recursive.distribution   # list of N - Z probabilities
recursive.converged      # True if the change fell below the tolerance
recursive.iterations     # number of iterations performed

tplus = all_t_plus(100, 30, 0.8)
tminus = all_t_minus(100, 30, 0.8)
approx = q_nifty(tplus, tminus, 70)
result = q_recursive([1 / 70] * 70, tplus, tminus, 10_000, 1e-10)
```

`quasi_stationary_dist_analytic` starts the recursion from a flat
distribution and returns a pair: the `RecursiveResult` and the product-form
approximation from `q_nifty`.

## Simulation

Every simulation function takes a `random.Random` instance, so a seeded
generator gives runs you can repeat. When none is given, a fresh unseeded
generator is used.

```python
import random
from nonlinear_voter.simulation import (
    evolve_x_in_time,
    fixation_time_single,
    fixation_times_against_z_single,
    average_fixation_times_against_z,
    quasi_stationary_distribution_simulation,
    integer_linspace,
    linspace,
)

rng = random.Random(1)

trajectory = evolve_x_in_time(3.0, 0.3, 100, 1, 1e3, 1000, rng)
for time, x in trajectory:
    ...

t = fixation_time_single(1.5, 100, 30, 1, 1e3, rng)

pairs = fixation_times_against_z_single(1.5, linspace(0.1, 0.9, 9), 100, 1, 1e3, rng)

zealots = integer_linspace(1, 99, 25)
averages = average_fixation_times_against_z(0.8, zealots, 100, 0, 1e3, 1000, rng)

qsd = quasi_stationary_distribution_simulation(0.8, 50, 10, 2000, 0.01, 50.0, rng)
```

- `evolve_x_in_time` returns a `Trajectory` holding `samples + 1` evenly
  spaced times from 0 to `t_max` and the fraction `n / N` at each time.
  Once absorption happens, all later samples take the absorbed value.
- `fixation_time_single` returns the time at which one run is absorbed, or
  the first event time past `t_max` if it is not.
- `average_fixation_times_against_z` averages only over runs that were
  absorbed before `t_max`; the mean is `nan` where none were.
- `quasi_stationary_distribution_simulation` evolves an ensemble in steps
  of `dt`, replacing absorbed members by copies of survivors. `t_max`
  defaults to twice the mean fixation time from `n = 0`. It returns the
  fraction of survivors in each state `0 .. S - 1`.

## What the package does not do

There is no command-line program and nothing is written to disk: every
function returns its results as Python lists, tuples or dataclasses, and
saving or plotting them is left to the caller. Simulations run in a single
process.