"""One-shot analysis of a sample: statistics, estimates, intervals and tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np

from logistic_lab.distributions.stats import describe, validate_sample
from logistic_lab.estimation.mle import estimate_mle
from logistic_lab.estimation.mom import estimate_mom
from logistic_lab.inference.fisher import fisher_information
from logistic_lab.inference.wald import confidence_interval, wald_test
from logistic_lab.models import (
    ConfidenceInterval,
    DescriptiveStats,
    Estimate,
    FisherInfo,
    MLEEstimate,
    WaldTestResult,
)


@dataclass(frozen=True)
class SampleAnalysis:
    stats: DescriptiveStats
    mom: Estimate
    mle: MLEEstimate
    fisher: FisherInfo
    ci_location: ConfidenceInterval
    ci_scale: ConfidenceInterval
    wald_location: WaldTestResult
    wald_scale: WaldTestResult

    def to_dict(self) -> Dict[str, object]:
        return {
            "stats": self.stats.to_dict(),
            "mom": self.mom.to_dict(),
            "mle": self.mle.to_dict(),
            "fisher": self.fisher.to_dict(),
            "confidence_intervals": {
                "location": self.ci_location.to_dict(),
                "scale": self.ci_scale.to_dict(),
            },
            "wald_tests": {
                "location": self.wald_location.to_dict(),
                "scale": self.wald_scale.to_dict(),
            },
        }


def analyze_sample(
    sample: Sequence[float] | np.ndarray,
    location_test: float,
    scale_test: float,
    init_with_mom: bool = True,
) -> SampleAnalysis:
    """Describe ``sample``, fit it both ways and test the MLE against H0.

    Fisher variances, intervals and Wald tests are all evaluated at the MLE.
    """
    data = validate_sample(sample)
    mle = estimate_mle(data, init_with_mom=init_with_mom)
    fisher = fisher_information(data.size, mle.scale)
    return SampleAnalysis(
        stats=describe(data),
        mom=estimate_mom(data),
        mle=mle,
        fisher=fisher,
        ci_location=confidence_interval(mle.location, fisher.var_location),
        ci_scale=confidence_interval(mle.scale, fisher.var_scale),
        wald_location=wald_test(mle.location, location_test, fisher.var_location),
        wald_scale=wald_test(mle.scale, scale_test, fisher.var_scale),
    )


__all__ = ["SampleAnalysis", "analyze_sample"]
