"""Wald tests and confidence intervals built on asymptotic variances."""

from __future__ import annotations

import math

from logistic_lab.exceptions import EstimationError
from logistic_lab.models import ConfidenceInterval, WaldTestResult
from logistic_lab.utils.logging import get_logger

log = get_logger(__name__, component="inference")

# Two-sided 5% critical value. Used for every alpha (see wald_test).
CRITICAL_Z = 1.96
DEFAULT_ALPHA = 0.05

# Abramowitz & Stegun 7.1.26, |error| < 1.5e-7.
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911


def normal_cdf(x: float) -> float:
    """Standard normal CDF via the A&S rational erf approximation."""
    sign = -1.0 if x < 0 else 1.0
    x = abs(x) / math.sqrt(2.0)
    t = 1.0 / (1.0 + _P * x)
    y = 1.0 - (((((_A5 * t + _A4) * t) + _A3) * t + _A2) * t + _A1) * t * math.exp(-x * x)
    return 0.5 * (1.0 + sign * y)


def _standard_error(variance: float) -> float:
    if not variance > 0 or not math.isfinite(variance):
        raise EstimationError(f"variance must be finite and > 0, got {variance}")
    return math.sqrt(variance)


def _warn_fixed_critical_value(alpha: float, what: str) -> None:
    if alpha != DEFAULT_ALPHA:
        log.warning(f"{what} uses the fixed critical value {CRITICAL_Z}; alpha={alpha} is not applied")


def wald_test(estimate: float, null_value: float, variance: float, alpha: float = DEFAULT_ALPHA) -> WaldTestResult:
    """Two-sided Wald test of ``H0: theta = null_value``.

    Rejection uses ``|z| > 1.96`` whatever ``alpha`` is; a non-default alpha
    only triggers a warning. The p-value is exact up to the normal CDF
    approximation.
    """
    _warn_fixed_critical_value(alpha, "Wald test")
    se = _standard_error(variance)
    z = (estimate - null_value) / se
    p_value = 2.0 * (1.0 - normal_cdf(abs(z)))
    return WaldTestResult(
        estimate=float(estimate),
        null_value=float(null_value),
        standard_error=se,
        z_score=z,
        p_value=p_value,
        rejected=abs(z) > CRITICAL_Z,
        alpha=alpha,
    )


def confidence_interval(estimate: float, variance: float, alpha: float = DEFAULT_ALPHA) -> ConfidenceInterval:
    """Symmetric ``estimate +/- 1.96 * se`` interval labelled with level ``1 - alpha``."""
    _warn_fixed_critical_value(alpha, "Confidence interval")
    se = _standard_error(variance)
    half_width = CRITICAL_Z * se
    return ConfidenceInterval(lower=estimate - half_width, upper=estimate + half_width, level=1.0 - alpha)


__all__ = ["CRITICAL_Z", "confidence_interval", "normal_cdf", "wald_test"]
