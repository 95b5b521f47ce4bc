import math

import numpy as np
import pytest
from scipy import stats

from logistic_lab.distributions.logistic import simulate
from logistic_lab.estimation.likelihood import log_likelihood, log_likelihood_gradient


@pytest.fixture(scope="module")
def sample():
    return simulate(400, 1.5, 0.8, seed=5)


def test_matches_scipy_logpdf(sample):
    expected = stats.logistic.logpdf(sample, loc=1.2, scale=0.9).sum()
    assert log_likelihood(sample, 1.2, 0.9) == pytest.approx(expected, rel=1e-12)


@pytest.mark.parametrize("scale", [0.0, -1.0])
def test_non_positive_scale_is_minus_infinity(sample, scale):
    assert log_likelihood(sample, 0.0, scale) == -math.inf
    d_loc, d_scale = log_likelihood_gradient(sample, 0.0, scale)
    assert math.isnan(d_loc) and math.isnan(d_scale)


def test_extreme_outliers_stay_finite():
    data = np.array([-1e6, 0.0, 1e6])
    value = log_likelihood(data, 0.0, 0.01)
    assert math.isfinite(value)
    d_loc, d_scale = log_likelihood_gradient(data, 0.0, 0.01)
    assert math.isfinite(d_loc) and math.isfinite(d_scale)


def test_gradient_matches_finite_differences(sample):
    loc, scale, h = 1.1, 0.7, 1e-6
    d_loc, d_scale = log_likelihood_gradient(sample, loc, scale)
    num_loc = (log_likelihood(sample, loc + h, scale) - log_likelihood(sample, loc - h, scale)) / (2 * h)
    num_scale = (log_likelihood(sample, loc, scale + h) - log_likelihood(sample, loc, scale - h)) / (2 * h)
    assert d_loc == pytest.approx(num_loc, rel=1e-5, abs=1e-5)
    assert d_scale == pytest.approx(num_scale, rel=1e-5, abs=1e-5)
