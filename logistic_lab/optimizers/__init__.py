"""Numerical optimizers."""

from .nelder_mead import NelderMeadOptions, OptimizeResult, minimize

__all__ = ["NelderMeadOptions", "OptimizeResult", "minimize"]
