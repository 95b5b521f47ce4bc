import numpy as np
import pytest

from logistic_lab.optimizers.nelder_mead import NelderMeadOptions, initial_simplex, minimize


def quadratic(p):
    x, y = p
    return (x - 3.0) ** 2 + (y + 1.0) ** 2


def test_converges_on_convex_quadratic():
    result = minimize(quadratic, [0.0, 0.0])
    assert result.point[0] == pytest.approx(3.0, abs=1e-4)
    assert result.point[1] == pytest.approx(-1.0, abs=1e-4)
    assert result.converged
    assert result.stop_reason == "tolerance"


def test_initial_simplex_perturbation():
    simplex = initial_simplex([0.0, 4.0])
    expected = np.array([[0.0, 4.0], [0.00025, 4.0], [0.0, 4.2]])
    assert np.allclose(simplex, expected)


def test_negative_coordinates_step_by_magnitude():
    simplex = initial_simplex([-2.0])
    assert simplex[1, 0] == pytest.approx(-1.9)


def test_iteration_budget_reports_non_convergence():
    result = minimize(quadratic, [0.0, 0.0], max_iterations=5)
    assert result.iterations == 5
    assert not result.converged
    assert result.stop_reason == "max_iterations"


def test_never_returns_worse_than_start():
    def bumpy(p):
        return float(np.sin(3 * p[0]) + 0.1 * p[0] ** 2 + (p[1] - 0.5) ** 2)

    x0 = [1.7, -2.0]
    result = minimize(bumpy, x0, max_iterations=50)
    assert result.value <= bumpy(np.array(x0))


def test_tolerance_stop_on_symmetric_simplex_is_weak_convergence():
    # In 1-D the simplex can straddle the minimum with equal values at both ends.
    result = minimize(lambda p: (p[0] - 7.5) ** 2, [1.0])
    assert result.point[0] == pytest.approx(7.45)
    assert result.value == pytest.approx(0.0025)
    assert result.iterations == 12
    assert result.stop_reason == "tolerance"
    assert result.converged


def test_flat_objective_stops_immediately():
    result = minimize(lambda p: 1.0, [1.0, 2.0])
    assert result.iterations == 0
    assert result.stop_reason == "tolerance"
    assert result.point.tolist() == [1.0, 2.0]


def test_custom_coefficients_are_used():
    options = NelderMeadOptions(reflection=1.0, expansion=3.0, contraction=0.25, shrink=0.25)
    result = minimize(quadratic, [0.0, 0.0], options=options)
    assert result.point[0] == pytest.approx(3.0, abs=1e-3)
