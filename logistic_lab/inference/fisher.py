"""Asymptotic Fisher information for the logistic location-scale family."""

from __future__ import annotations

import math

from logistic_lab.exceptions import ConfigValidationError
from logistic_lab.models import SCALE_FLOOR, FisherInfo

PI_SQ_PLUS_3 = math.pi**2 + 3.0


def fisher_information(n: int, scale: float) -> FisherInfo:
    """Inverse diagonal of the n-observation information matrix.

    The off-diagonal term vanishes for the symmetric logistic law, so
    ``var_location = 3 s^2 / n`` and ``var_scale = 9 s^2 / (n (pi^2 + 3))``.
    Only meaningful in the large-n limit.
    """
    if n < 1:
        raise ConfigValidationError(f"n must be >= 1, got {n}")
    s = max(SCALE_FLOOR, float(scale))
    info_location = n / (3.0 * s * s)
    info_scale = n * PI_SQ_PLUS_3 / (9.0 * s * s)
    return FisherInfo(
        var_location=3.0 * s * s / n,
        var_scale=9.0 * s * s / (n * PI_SQ_PLUS_3),
        matrix=((info_location, 0.0), (0.0, info_scale)),
    )


__all__ = ["fisher_information"]
