"""Logistic distribution functions and inverse-transform sampler."""

from __future__ import annotations

import numpy as np
from scipy.stats import logistic

from logistic_lab.distributions.prng import Mulberry32
from logistic_lab.exceptions import ConfigValidationError
from logistic_lab.utils.logging import get_logger

log = get_logger(__name__, component="sampler")

# Uniform draws are clamped into this band before inversion so no sample is infinite.
P_MIN = 0.0001
P_MAX = 0.9999


def pdf(x, location: float, scale: float):
    """Logistic density. Returns 0 everywhere when ``scale <= 0``."""
    x = np.asarray(x, dtype=float)
    if not scale > 0:
        out = np.zeros_like(x)
    else:
        out = logistic.pdf(x, loc=location, scale=scale)
    return float(out) if out.ndim == 0 else out


def cdf(x, location: float, scale: float):
    """Logistic CDF, strictly increasing in (0, 1). NaN when ``scale <= 0``."""
    x = np.asarray(x, dtype=float)
    if not scale > 0:
        out = np.full_like(x, np.nan)
    else:
        out = logistic.cdf(x, loc=location, scale=scale)
    return float(out) if out.ndim == 0 else out


def quantile(p, location: float, scale: float):
    """Inverse CDF ``location + scale * log(p / (1 - p))``.

    Diverges to -inf/+inf at p = 0/1; clamp with :func:`clamp_probability` first.
    NaN when ``scale <= 0``.
    """
    p = np.asarray(p, dtype=float)
    out = logistic.ppf(p, loc=location, scale=scale)
    return float(out) if out.ndim == 0 else out


def clamp_probability(p):
    return np.clip(p, P_MIN, P_MAX)


def simulate(n: int, location: float, scale: float, seed: int) -> np.ndarray:
    """Draw ``n`` logistic variates by inverse-transform sampling.

    A fresh :class:`Mulberry32` is seeded on every call and consumed exactly
    once per observation, so equal arguments always give the same sample.
    """
    if n < 1:
        raise ConfigValidationError(f"n must be >= 1, got {n}")
    if not scale > 0:
        raise ConfigValidationError(f"scale must be > 0, got {scale}")

    rng = Mulberry32(seed)
    uniforms = clamp_probability(rng.random_array(n))
    sample = np.asarray(quantile(uniforms, location, scale), dtype=float)
    log.debug("Simulated sample", extra={"n": n, "seed": seed})
    return sample


__all__ = ["P_MAX", "P_MIN", "cdf", "clamp_probability", "pdf", "quantile", "simulate"]
