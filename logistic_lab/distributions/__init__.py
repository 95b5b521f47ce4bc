"""Logistic distribution functions, sampler and sample statistics."""

from __future__ import annotations

from .logistic import cdf, clamp_probability, pdf, quantile, simulate
from .prng import Mulberry32
from .stats import describe, validate_sample

__all__ = [
    "Mulberry32",
    "cdf",
    "clamp_probability",
    "describe",
    "pdf",
    "quantile",
    "simulate",
    "validate_sample",
]
