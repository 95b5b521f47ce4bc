import numpy as np
import pytest

from logistic_lab.distributions.logistic import simulate
from logistic_lab.estimation.likelihood import log_likelihood
from logistic_lab.estimation.mle import (
    INFEASIBLE_PENALTY,
    estimate_mle,
    initial_guess,
    negative_log_likelihood,
)
from logistic_lab.estimation.mom import estimate_mom
from logistic_lab.exceptions import InsufficientDataError
from logistic_lab.models import SCALE_FLOOR


@pytest.fixture(scope="module")
def sample():
    return simulate(1000, 5.0, 2.0, seed=42)


def test_mle_improves_on_starting_point(sample):
    objective = negative_log_likelihood(sample)
    start = initial_guess(sample, init_with_mom=True)
    mle = estimate_mle(sample)
    assert objective(np.array([mle.location, mle.scale])) <= objective(start)
    assert mle.log_likelihood >= log_likelihood(sample, *start)


def test_mle_is_deterministic(sample):
    a = estimate_mle(sample, init_with_mom=True)
    b = estimate_mle(sample, init_with_mom=True)
    assert (a.location, a.scale, a.iterations) == (b.location, b.scale, b.iterations)


def test_mle_reports_diagnostics(sample):
    mle = estimate_mle(sample)
    assert mle.method == "mle"
    assert mle.converged
    assert mle.stop_reason == "tolerance"
    assert 0 < mle.iterations < 500
    assert mle.elapsed_ms >= 0.0
    assert abs(mle.gradient[0]) < 0.1
    assert abs(mle.gradient[1]) < 0.1


def test_mle_close_to_truth(sample):
    mle = estimate_mle(sample)
    assert mle.location == pytest.approx(5.0, abs=0.3)
    assert mle.scale == pytest.approx(2.0, abs=0.2)


def test_raw_initialisation_reaches_same_optimum(sample):
    from_mom = estimate_mle(sample, init_with_mom=True)
    from_raw = estimate_mle(sample, init_with_mom=False)
    assert from_raw.location == pytest.approx(from_mom.location, abs=1e-3)
    assert from_raw.scale == pytest.approx(from_mom.scale, abs=1e-3)


def test_initial_guess_floors_scale():
    data = np.array([1.0, 1.0, 1.0, 1.0])
    assert initial_guess(data, init_with_mom=True).tolist() == [1.0, 0.1]
    assert initial_guess(data, init_with_mom=False).tolist() == [1.0, 0.1]


def test_objective_penalises_small_scale(sample):
    objective = negative_log_likelihood(sample)
    assert objective(np.array([5.0, SCALE_FLOOR])) == INFEASIBLE_PENALTY
    assert objective(np.array([5.0, -3.0])) == INFEASIBLE_PENALTY


def test_mle_scale_is_floored_for_degenerate_sample():
    mle = estimate_mle([2.0, 2.0, 2.0, 2.0, 2.0])
    assert mle.scale >= SCALE_FLOOR
    assert mle.location == pytest.approx(2.0, abs=1e-2)


def test_mle_beats_mom_likelihood(sample):
    mom = estimate_mom(sample)
    mle = estimate_mle(sample)
    assert mle.log_likelihood >= log_likelihood(sample, mom.location, mom.scale) - 1e-9


def test_mle_rejects_empty_sample():
    with pytest.raises(InsufficientDataError):
        estimate_mle([])
