"""Derivative-free Nelder-Mead simplex minimizer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np

from logistic_lab.models import StopReason

Objective = Callable[[np.ndarray], float]

DEFAULT_MAX_ITERATIONS = 500
DEFAULT_TOLERANCE = 1e-8
ZERO_STEP = 0.00025
RELATIVE_STEP = 0.05


@dataclass(frozen=True)
class NelderMeadOptions:
    """Simplex transformation coefficients."""

    reflection: float = 1.0
    expansion: float = 2.0
    contraction: float = 0.5
    shrink: float = 0.5


@dataclass(frozen=True)
class OptimizeResult:
    point: np.ndarray
    value: float
    iterations: int
    stop_reason: StopReason
    max_iterations: int

    @property
    def converged(self) -> bool:
        # Weak signal: only says the iteration budget was not exhausted.
        return self.iterations < self.max_iterations


def initial_simplex(x0: Sequence[float]) -> np.ndarray:
    """Return ``dim + 1`` vertices: x0 and one vertex per nudged coordinate."""
    base = np.asarray(x0, dtype=float)
    vertices = [base.copy()]
    for i in range(base.size):
        point = base.copy()
        point[i] += RELATIVE_STEP * abs(point[i]) if point[i] != 0 else ZERO_STEP
        vertices.append(point)
    return np.array(vertices)


def minimize(
    objective: Objective,
    x0: Sequence[float],
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    options: NelderMeadOptions | None = None,
) -> OptimizeResult:
    """Minimize ``objective`` starting from ``x0``.

    Stops when the spread between the worst and best vertex values drops below
    ``tolerance`` or after ``max_iterations`` simplex updates. The returned
    point is the lowest-valued vertex of the final simplex, so its value is
    never worse than the objective at ``x0``.
    """
    opts = options or NelderMeadOptions()
    simplex = initial_simplex(x0)
    dim = simplex.shape[1]
    values = np.array([float(objective(v)) for v in simplex])

    iterations = 0
    stop_reason: StopReason = "max_iterations"
    while iterations < max_iterations:
        order = np.argsort(values, kind="stable")
        simplex = simplex[order]
        values = values[order]

        if values[dim] - values[0] < tolerance:
            stop_reason = "tolerance"
            break

        centroid = simplex[:dim].mean(axis=0)
        worst = simplex[dim]

        reflected = centroid + opts.reflection * (centroid - worst)
        f_reflected = float(objective(reflected))

        if values[0] <= f_reflected < values[dim - 1]:
            simplex[dim], values[dim] = reflected, f_reflected
        elif f_reflected < values[0]:
            expanded = centroid + opts.expansion * (reflected - centroid)
            f_expanded = float(objective(expanded))
            if f_expanded < f_reflected:
                simplex[dim], values[dim] = expanded, f_expanded
            else:
                simplex[dim], values[dim] = reflected, f_reflected
        else:
            contracted = centroid + opts.contraction * (worst - centroid)
            f_contracted = float(objective(contracted))
            if f_contracted < values[dim]:
                simplex[dim], values[dim] = contracted, f_contracted
            else:
                best = simplex[0]
                for i in range(1, dim + 1):
                    simplex[i] = best + opts.shrink * (simplex[i] - best)
                    values[i] = float(objective(simplex[i]))

        iterations += 1

    best_idx = int(np.argmin(values))
    return OptimizeResult(
        point=simplex[best_idx].copy(),
        value=float(values[best_idx]),
        iterations=iterations,
        stop_reason=stop_reason,
        max_iterations=max_iterations,
    )


__all__ = ["NelderMeadOptions", "OptimizeResult", "initial_simplex", "minimize"]
