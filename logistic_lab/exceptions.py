"""Project-wide exception types."""

class LogisticLabError(Exception):
    """Base exception for all lab errors."""


class ConfigError(LogisticLabError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class DataSourceError(LogisticLabError):
    """Raised when an externally supplied sample cannot be read."""


class InsufficientDataError(DataSourceError):
    """Raised when a sample is empty or too short for the requested statistic."""


class InvalidSampleError(DataSourceError):
    """Raised when a sample holds non-finite values or has the wrong shape."""


class EstimationError(LogisticLabError):
    """Raised when an estimate or test statistic cannot be computed."""


class RunCancelledError(LogisticLabError):
    """Raised when a Monte Carlo run is cancelled between trials."""
