"""Logistic distribution estimation lab.

Seeded sampling, method-of-moments and maximum-likelihood estimation, Wald
inference and Monte Carlo bias/MSE studies for the logistic law.
"""

from logistic_lab.distributions import Mulberry32, cdf, describe, pdf, quantile, simulate
from logistic_lab.estimation import estimate_mle, estimate_mom, log_likelihood, log_likelihood_gradient
from logistic_lab.inference import confidence_interval, fisher_information, normal_cdf, wald_test
from logistic_lab.lab.analysis import analyze_sample
from logistic_lab.mc import run_monte_carlo, submit_monte_carlo
from logistic_lab.optimizers import minimize

__version__ = "0.1.0"

__all__ = [
    "Mulberry32",
    "analyze_sample",
    "cdf",
    "confidence_interval",
    "describe",
    "estimate_mle",
    "estimate_mom",
    "fisher_information",
    "log_likelihood",
    "log_likelihood_gradient",
    "minimize",
    "normal_cdf",
    "pdf",
    "quantile",
    "run_monte_carlo",
    "simulate",
    "submit_monte_carlo",
    "wald_test",
]
