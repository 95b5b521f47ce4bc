"""Import externally supplied samples from delimited text."""

from __future__ import annotations

import re
from pathlib import Path

import numpy as np
import pandas as pd

from logistic_lab.distributions.logistic import simulate
from logistic_lab.distributions.stats import validate_sample
from logistic_lab.exceptions import DataSourceError, InsufficientDataError
from logistic_lab.schema.run_config import LabConfig
from logistic_lab.utils.logging import get_logger

log = get_logger(__name__, component="data_loader")

DELIMITERS = re.compile(r"[,;\s]+")


def parse_sample_text(text: str) -> np.ndarray:
    """Split on commas, semicolons and whitespace; keep finite numbers.

    Tokens that are not numbers (headers, blanks, "nan", "inf") are dropped.
    A token with trailing junk such as "3.2abc" is dropped whole; no numeric
    prefix is salvaged from it.
    Raises :class:`InsufficientDataError` when nothing numeric remains.
    """
    tokens = pd.Series([tok for tok in DELIMITERS.split(text) if tok], dtype=object)
    values = pd.to_numeric(tokens, errors="coerce").astype(float)
    finite = values[np.isfinite(values)]
    dropped = len(tokens) - len(finite)
    if dropped:
        log.info("Dropped non-numeric tokens", extra={"dropped": dropped})
    if finite.empty:
        raise InsufficientDataError("No numeric values found in input")
    return validate_sample(finite.to_numpy())


def load_sample(path: Path) -> np.ndarray:
    """Read a delimited text/CSV file into a validated sample."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise DataSourceError(f"Could not read sample file {path}: {exc}") from exc
    sample = parse_sample_text(text)
    log.info("Sample loaded", extra={"n": int(sample.size), "path": str(path)})
    return sample


def load_or_simulate(config: LabConfig, path: Path | None = None) -> np.ndarray:
    """Return the sample in ``path`` if given, else simulate one from ``config``."""
    if path is not None:
        return load_sample(path)
    return simulate(config.n, config.location, config.scale, config.seed)


__all__ = ["load_or_simulate", "load_sample", "parse_sample_text"]
