"""Asymptotic inference: Fisher information, Wald tests, intervals."""

from .fisher import fisher_information
from .wald import confidence_interval, normal_cdf, wald_test

__all__ = ["confidence_interval", "fisher_information", "normal_cdf", "wald_test"]
