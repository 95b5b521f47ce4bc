"""Resolve a LabConfig from CLI options, environment and config file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from logistic_lab.config.loader import load_config_with_precedence, parse_bool
from logistic_lab.schema.run_config import LabConfig

CASTERS = {
    "location": float,
    "scale": float,
    "n": int,
    "seed": int,
    "location_test": float,
    "scale_test": float,
    "mc_sims": int,
    "init_with_mom": parse_bool,
}


def resolve_lab_config(config: Optional[Path], cli_values: Mapping[str, Any]) -> LabConfig:
    defaults = LabConfig().to_dict()
    merged = load_config_with_precedence(
        config_path=config,
        cli_values=cli_values,
        defaults=defaults,
        casters=CASTERS,
    )
    return LabConfig.from_dict(merged)
