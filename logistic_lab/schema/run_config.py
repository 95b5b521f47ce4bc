"""Lab configuration schema and validation."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

from logistic_lab.exceptions import ConfigValidationError


@dataclass(slots=True)
class LabConfig:
    location: float = 5.0
    scale: float = 2.0
    n: int = 1000
    seed: int = 42
    location_test: float = 5.0
    scale_test: float = 2.0
    mc_sims: int = 200
    init_with_mom: bool = True

    def __post_init__(self) -> None:
        if self.scale <= 0:
            raise ConfigValidationError("scale must be > 0")
        if self.n <= 0:
            raise ConfigValidationError("n must be > 0")
        if self.seed is None:
            raise ConfigValidationError("seed is required for reproducibility")
        if self.scale_test <= 0:
            raise ConfigValidationError("scale_test must be > 0")
        if self.mc_sims <= 0:
            raise ConfigValidationError("mc_sims must be > 0")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LabConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if v is not None})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = ["LabConfig"]
