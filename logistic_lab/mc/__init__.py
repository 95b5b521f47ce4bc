"""Monte Carlo evaluation of the estimators."""

from .harness import run_monte_carlo, submit_monte_carlo

__all__ = ["run_monte_carlo", "submit_monte_carlo"]
