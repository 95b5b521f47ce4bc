"""Descriptive statistics over a sample."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from logistic_lab.exceptions import InsufficientDataError, InvalidSampleError
from logistic_lab.models import DescriptiveStats


def validate_sample(sample: Sequence[float] | np.ndarray, min_size: int = 1) -> np.ndarray:
    """Return the sample as a 1-D float array, rejecting empty or non-finite input."""
    try:
        arr = np.asarray(sample, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidSampleError(f"Sample is not numeric: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidSampleError(f"Sample must be one-dimensional, got shape {arr.shape}")
    if arr.size < min_size:
        raise InsufficientDataError(f"Sample needs at least {min_size} observation(s), got {arr.size}")
    if not np.isfinite(arr).all():
        bad = int((~np.isfinite(arr)).sum())
        raise InvalidSampleError(f"Sample contains {bad} non-finite value(s)")
    return arr


def describe(sample: Sequence[float] | np.ndarray) -> DescriptiveStats:
    """Population moments (divide by n), median and range of a sample."""
    arr = validate_sample(sample)
    n = arr.size
    mean = float(arr.sum() / n)
    variance = float(((arr - mean) ** 2).sum() / n)
    ordered = np.sort(arr)
    mid = n // 2
    median = float((ordered[mid - 1] + ordered[mid]) / 2) if n % 2 == 0 else float(ordered[mid])
    return DescriptiveStats(
        n=n,
        mean=mean,
        variance=variance,
        std=float(np.sqrt(variance)),
        median=median,
        min=float(ordered[0]),
        max=float(ordered[-1]),
    )


__all__ = ["describe", "validate_sample"]
