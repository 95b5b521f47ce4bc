"""Logistic log-likelihood and its analytic gradient."""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
from scipy.special import expit


def log_likelihood(sample: np.ndarray, location: float, scale: float) -> float:
    """Log-likelihood ``-n ln s - sum(z) - 2 sum(log(1 + exp(-z)))``.

    Returns ``-inf`` for ``scale <= 0`` instead of raising so optimizers can
    treat the point as infeasible. The softplus term uses ``logaddexp`` and
    stays finite for any finite z.
    """
    if not scale > 0:
        return -math.inf
    x = np.asarray(sample, dtype=float)
    z = (x - location) / scale
    return float(-x.size * math.log(scale) - z.sum() - 2.0 * np.logaddexp(0.0, -z).sum())


def log_likelihood_gradient(sample: np.ndarray, location: float, scale: float) -> Tuple[float, float]:
    """Partial derivatives of :func:`log_likelihood` w.r.t. location and scale."""
    if not scale > 0:
        return math.nan, math.nan
    x = np.asarray(sample, dtype=float)
    z = (x - location) / scale
    centred = 2.0 * expit(z) - 1.0
    d_location = float(centred.sum() / scale)
    d_scale = float((z * centred - 1.0).sum() / scale)
    return d_location, d_scale


__all__ = ["log_likelihood", "log_likelihood_gradient"]
