"""Point estimators for the logistic location and scale."""

from .likelihood import log_likelihood, log_likelihood_gradient
from .mle import estimate_mle
from .mom import estimate_mom

__all__ = ["estimate_mle", "estimate_mom", "log_likelihood", "log_likelihood_gradient"]
