"""Method-of-moments estimator."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from logistic_lab.distributions.stats import describe
from logistic_lab.models import Estimate

# Var = s^2 * pi^2 / 3, so s = std * sqrt(3) / pi.
STD_TO_SCALE = math.sqrt(3.0) / math.pi


def estimate_mom(sample: Sequence[float] | np.ndarray) -> Estimate:
    """Match the sample mean and standard deviation to the logistic moments.

    The scale is not floored here; callers feeding an optimizer apply their own
    lower bound.
    """
    stats = describe(sample)
    return Estimate(location=stats.mean, scale=stats.std * STD_TO_SCALE, method="mom")


__all__ = ["STD_TO_SCALE", "estimate_mom"]
