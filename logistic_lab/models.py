"""Shared result models for sampling, estimation and inference."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Tuple

from logistic_lab.exceptions import ConfigValidationError

EstimationMethod = Literal["mom", "mle"]
StopReason = Literal["tolerance", "max_iterations"]

# Floor applied to every returned scale estimate; the log-likelihood is undefined at s <= 0.
SCALE_FLOOR = 0.01


@dataclass(frozen=True, slots=True)
class DistributionParams:
    location: float
    scale: float

    def __post_init__(self) -> None:
        if not self.scale > 0:
            raise ConfigValidationError(f"scale must be > 0, got {self.scale}")


@dataclass(frozen=True, slots=True)
class DescriptiveStats:
    n: int
    mean: float
    variance: float
    std: float
    median: float
    min: float
    max: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "n": self.n,
            "mean": self.mean,
            "variance": self.variance,
            "std": self.std,
            "median": self.median,
            "min": self.min,
            "max": self.max,
        }


@dataclass(frozen=True, slots=True)
class Estimate:
    location: float
    scale: float
    method: EstimationMethod

    def to_dict(self) -> Dict[str, object]:
        return {"method": self.method, "location": self.location, "scale": self.scale}


@dataclass(frozen=True, slots=True)
class MLEEstimate:
    """Maximum-likelihood estimate with optimizer diagnostics.

    ``converged`` only means the simplex collapsed before the iteration budget
    ran out; check ``stop_reason`` and ``gradient`` for anything stronger.
    """

    location: float
    scale: float
    log_likelihood: float
    iterations: int
    converged: bool
    stop_reason: StopReason
    elapsed_ms: float
    gradient: Tuple[float, float] = (float("nan"), float("nan"))
    method: EstimationMethod = "mle"

    def to_dict(self) -> Dict[str, object]:
        return {
            "method": self.method,
            "location": self.location,
            "scale": self.scale,
            "log_likelihood": self.log_likelihood,
            "iterations": self.iterations,
            "converged": self.converged,
            "stop_reason": self.stop_reason,
            "elapsed_ms": self.elapsed_ms,
            "gradient": list(self.gradient),
        }


@dataclass(frozen=True, slots=True)
class FisherInfo:
    var_location: float
    var_scale: float
    matrix: Tuple[Tuple[float, float], Tuple[float, float]]

    def to_dict(self) -> Dict[str, object]:
        return {
            "var_location": self.var_location,
            "var_scale": self.var_scale,
            "matrix": [list(row) for row in self.matrix],
        }


@dataclass(frozen=True, slots=True)
class WaldTestResult:
    estimate: float
    null_value: float
    standard_error: float
    z_score: float
    p_value: float
    rejected: bool
    alpha: float = 0.05

    @property
    def decision(self) -> str:
        return "reject" if self.rejected else "fail to reject"

    def to_dict(self) -> Dict[str, object]:
        return {
            "estimate": self.estimate,
            "null_value": self.null_value,
            "standard_error": self.standard_error,
            "z_score": self.z_score,
            "p_value": self.p_value,
            "rejected": self.rejected,
            "decision": self.decision,
            "alpha": self.alpha,
        }


@dataclass(frozen=True, slots=True)
class ConfidenceInterval:
    lower: float
    upper: float
    level: float

    def to_dict(self) -> Dict[str, float]:
        return {"lower": self.lower, "upper": self.upper, "level": self.level}


@dataclass(slots=True)
class ParameterSummary:
    """Bias/MSE aggregate of one parameter's estimates across trials."""

    true_value: float
    mean: float
    bias: float
    mse: float
    std: float
    estimates: List[float] = field(default_factory=list)

    def to_dict(self, include_estimates: bool = False) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "true_value": self.true_value,
            "mean": self.mean,
            "bias": self.bias,
            "mse": self.mse,
            "std": self.std,
        }
        if include_estimates:
            payload["estimates"] = list(self.estimates)
        return payload


@dataclass(slots=True)
class MethodSummary:
    location: ParameterSummary
    scale: ParameterSummary

    def to_dict(self, include_estimates: bool = False) -> Dict[str, object]:
        return {
            "location": self.location.to_dict(include_estimates),
            "scale": self.scale.to_dict(include_estimates),
        }


@dataclass(slots=True)
class MonteCarloResult:
    n_sims: int
    n: int
    params: DistributionParams
    mom: MethodSummary
    mle: MethodSummary
    avg_elapsed_ms: float
    non_converged: int = 0
    warnings: List[str] = field(default_factory=list)

    def to_dict(self, include_estimates: bool = False) -> Dict[str, object]:
        return {
            "n_sims": self.n_sims,
            "n": self.n,
            "location": self.params.location,
            "scale": self.params.scale,
            "mom": self.mom.to_dict(include_estimates),
            "mle": self.mle.to_dict(include_estimates),
            "avg_elapsed_ms": self.avg_elapsed_ms,
            "non_converged": self.non_converged,
            "warnings": list(self.warnings),
        }


__all__ = [
    "SCALE_FLOOR",
    "ConfidenceInterval",
    "DescriptiveStats",
    "DistributionParams",
    "Estimate",
    "EstimationMethod",
    "FisherInfo",
    "MLEEstimate",
    "MethodSummary",
    "MonteCarloResult",
    "ParameterSummary",
    "StopReason",
    "WaldTestResult",
]
