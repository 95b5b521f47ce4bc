import math

import pytest

from logistic_lab.distributions.logistic import simulate
from logistic_lab.estimation.mom import STD_TO_SCALE, estimate_mom
from logistic_lab.exceptions import InsufficientDataError


def test_mom_uses_closed_form_scale():
    est = estimate_mom([1.0, 2.0, 3.0, 4.0])
    assert est.method == "mom"
    assert est.location == pytest.approx(2.5)
    assert est.scale == pytest.approx(math.sqrt(1.25) * math.sqrt(3) / math.pi)
    assert STD_TO_SCALE == pytest.approx(0.5513288954217921)


def test_mom_recovers_parameters_on_large_sample():
    sample = simulate(100_000, 5.0, 2.0, seed=42)
    est = estimate_mom(sample)
    assert est.location == pytest.approx(5.0, abs=0.05)
    assert est.scale == pytest.approx(2.0, abs=0.05)


def test_mom_does_not_floor_scale():
    est = estimate_mom([1.0, 1.0, 1.0])
    assert est.scale == 0.0


def test_mom_rejects_empty_sample():
    with pytest.raises(InsufficientDataError):
        estimate_mom([])
