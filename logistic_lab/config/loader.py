"""Configuration loading with defaults < file < environment < CLI precedence."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from logistic_lab.exceptions import ConfigValidationError
from logistic_lab.utils.logging import get_logger

log = get_logger(__name__, component="config")

ENV_PREFIX = "LLAB_"

Caster = Callable[[Any], Any]


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    text = path.read_text()
    try:
        if path.suffix.lower() == ".json":
            content = json.loads(text)
        elif path.suffix.lower() in {".yml", ".yaml"}:
            content = yaml.safe_load(text)
        else:
            raise ConfigValidationError("Config file must be JSON or YAML")
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigValidationError(f"Could not parse config {path}: {exc}") from exc
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config {path} must contain a mapping at the top level")
    return content


def _cast(key: str, value: Any, casters: Mapping[str, Caster]) -> Any:
    caster = casters.get(key)
    if caster is None or value is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {key}: {value!r}") from exc


def load_config_with_precedence(
    *,
    config_path: Optional[Path],
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Optional[Mapping[str, Caster]] = None,
    env_prefix: str = ENV_PREFIX,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Merge configuration layers for the keys named in ``defaults``.

    CLI values of ``None`` mean "not given" and fall through to the
    environment (``{env_prefix}{KEY}``), then the config file, then defaults.
    """
    casters = casters or {}
    environ = os.environ if environ is None else environ
    file_values = _load_yaml(config_path) if config_path is not None else {}

    merged: Dict[str, Any] = {}
    sources: Dict[str, str] = {}
    for key, default in defaults.items():
        value, source = default, "default"
        if key in file_values:
            value, source = file_values[key], "file"
        env_key = f"{env_prefix}{key.upper()}"
        if env_key in environ:
            value, source = environ[env_key], "env"
        if cli_values.get(key) is not None:
            value, source = cli_values[key], "cli"
        merged[key] = _cast(key, value, casters)
        sources[key] = source

    log.debug("Configuration resolved", extra={"sources": sources})
    return merged


__all__ = ["ENV_PREFIX", "load_config_with_precedence", "parse_bool"]
