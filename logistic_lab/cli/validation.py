"""CLI input validation helpers."""

from __future__ import annotations

from logistic_lab.exceptions import ConfigValidationError


def require_positive(name: str, value: int | float) -> None:
    if value <= 0:
        raise ConfigValidationError(f"{name} must be > 0")


def validate_sample_inputs(*, n: int, scale: float, seed: int | None) -> None:
    require_positive("n", n)
    require_positive("scale", scale)
    if seed is None:
        raise ConfigValidationError("seed is required for reproducibility")


def validate_montecarlo_inputs(*, sims: int, n: int, scale: float) -> None:
    require_positive("sims", sims)
    require_positive("scale", scale)
    if n < 2:
        raise ConfigValidationError("n must be >= 2 for a Monte Carlo study")
