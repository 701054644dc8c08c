"""Nonlinear voter model with absorbing zealots: rates, fixation times, quasi-stationary distributions and simulation."""

__version__ = "0.1.0"
__all__ = ["rates", "quasi", "simulation"]