"""Maximum-likelihood estimator driven by the Nelder-Mead simplex."""

from __future__ import annotations

import time
from typing import Sequence

import numpy as np

from logistic_lab.distributions.stats import describe, validate_sample
from logistic_lab.estimation.likelihood import log_likelihood, log_likelihood_gradient
from logistic_lab.estimation.mom import estimate_mom
from logistic_lab.models import SCALE_FLOOR, MLEEstimate
from logistic_lab.optimizers.nelder_mead import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, minimize
from logistic_lab.utils.logging import get_logger
from logistic_lab.utils.profiling import elapsed_ms

log = get_logger(__name__, component="mle")

INITIAL_SCALE_FLOOR = 0.1
INFEASIBLE_PENALTY = 1e10


def initial_guess(sample: np.ndarray, init_with_mom: bool = True) -> np.ndarray:
    if init_with_mom:
        mom = estimate_mom(sample)
        return np.array([mom.location, max(INITIAL_SCALE_FLOOR, mom.scale)])
    stats = describe(sample)
    return np.array([stats.mean, max(INITIAL_SCALE_FLOOR, stats.std)])


def negative_log_likelihood(sample: np.ndarray):
    """Objective for the simplex: finite penalty below the scale floor."""

    def objective(params: np.ndarray) -> float:
        location, scale = params
        if scale <= SCALE_FLOOR:
            return INFEASIBLE_PENALTY
        return -log_likelihood(sample, location, scale)

    return objective


def estimate_mle(
    sample: Sequence[float] | np.ndarray,
    init_with_mom: bool = True,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> MLEEstimate:
    """Maximise the logistic likelihood of ``sample``.

    The start point is the MoM estimate (or mean/std when ``init_with_mom`` is
    False) with the scale raised to at least 0.1. The returned scale is
    floored at 0.01. Non-convergence is reported on the result, not raised.
    """
    start = time.perf_counter()
    data = validate_sample(sample)
    x0 = initial_guess(data, init_with_mom)

    result = minimize(
        negative_log_likelihood(data),
        x0,
        max_iterations=max_iterations,
        tolerance=tolerance,
    )
    location = float(result.point[0])
    scale = max(SCALE_FLOOR, float(result.point[1]))
    gradient = log_likelihood_gradient(data, location, scale)
    elapsed = elapsed_ms(start)

    if not result.converged:
        log.warning(
            "MLE hit the iteration budget",
            extra={"method": "mle", "n": data.size, "iterations": result.iterations},
        )

    return MLEEstimate(
        location=location,
        scale=scale,
        log_likelihood=-result.value,
        iterations=result.iterations,
        converged=result.converged,
        stop_reason=result.stop_reason,
        elapsed_ms=elapsed,
        gradient=gradient,
    )


__all__ = ["estimate_mle", "initial_guess", "negative_log_likelihood"]
