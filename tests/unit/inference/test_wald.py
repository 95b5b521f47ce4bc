import logging
import math

import numpy as np
import pytest
from scipy import stats

from logistic_lab.exceptions import EstimationError
from logistic_lab.inference.wald import CRITICAL_Z, confidence_interval, normal_cdf, wald_test


def test_normal_cdf_within_approximation_error():
    xs = np.linspace(-6.0, 6.0, 241)
    approx = np.array([normal_cdf(x) for x in xs])
    assert np.max(np.abs(approx - stats.norm.cdf(xs))) < 1.5e-7


def test_normal_cdf_symmetry():
    assert normal_cdf(1.3) + normal_cdf(-1.3) == pytest.approx(1.0, abs=1e-12)


def test_null_hypothesis_at_estimate_is_not_rejected():
    result = wald_test(estimate=5.0, null_value=5.0, variance=0.01)
    assert result.z_score == pytest.approx(0.0)
    assert result.p_value == pytest.approx(1.0, abs=1e-6)
    assert not result.rejected
    assert result.decision == "fail to reject"


def test_far_null_is_rejected():
    result = wald_test(estimate=5.5, null_value=5.0, variance=0.01)
    assert result.standard_error == pytest.approx(0.1)
    assert result.z_score == pytest.approx(5.0)
    assert result.p_value < 1e-5
    assert result.rejected
    assert result.decision == "reject"


def test_rejection_boundary_is_fixed_critical_value():
    just_inside = wald_test(estimate=1.95, null_value=0.0, variance=1.0)
    just_outside = wald_test(estimate=1.97, null_value=0.0, variance=1.0)
    assert not just_inside.rejected
    assert just_outside.rejected


def test_alpha_does_not_move_critical_value(caplog):
    with caplog.at_level(logging.WARNING):
        result = wald_test(estimate=2.0, null_value=0.0, variance=1.0, alpha=0.01)
    assert result.rejected
    assert result.alpha == 0.01
    assert any("fixed critical value" in r.message for r in caplog.records)


def test_non_positive_variance_raises():
    with pytest.raises(EstimationError):
        wald_test(1.0, 0.0, 0.0)
    with pytest.raises(EstimationError):
        confidence_interval(1.0, -1.0)


def test_confidence_interval_is_symmetric():
    ci = confidence_interval(5.0, 0.04)
    assert ci.lower == pytest.approx(5.0 - CRITICAL_Z * 0.2)
    assert ci.upper == pytest.approx(5.0 + CRITICAL_Z * 0.2)
    assert ci.level == pytest.approx(0.95)


def test_confidence_interval_level_follows_alpha_but_width_does_not():
    wide = confidence_interval(0.0, 1.0, alpha=0.05)
    labelled = confidence_interval(0.0, 1.0, alpha=0.10)
    assert labelled.level == pytest.approx(0.90)
    assert math.isclose(wide.upper, labelled.upper)
