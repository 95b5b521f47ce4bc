"""Monte Carlo bias/MSE study of the MoM and MLE estimators."""

from __future__ import annotations

import math
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from logistic_lab.distributions.logistic import simulate
from logistic_lab.estimation.mle import estimate_mle
from logistic_lab.estimation.mom import estimate_mom
from logistic_lab.exceptions import ConfigValidationError, RunCancelledError
from logistic_lab.models import DistributionParams, MethodSummary, MonteCarloResult, ParameterSummary
from logistic_lab.utils.logging import get_logger
from logistic_lab.utils.profiling import track_time

log = get_logger(__name__, component="monte_carlo")

BASE_SEED = 1000
PROGRESS_EVERY = 10
WARN_RATIO = 0.5

ProgressCallback = Callable[[float], None]


def trial_seed(index: int) -> int:
    return BASE_SEED + index


def summarize(estimates: Sequence[float], true_value: float) -> ParameterSummary:
    """Bias, MSE and spread of ``estimates`` around ``true_value``."""
    count = len(estimates)
    mean = sum(estimates) / count
    bias = mean - true_value
    mse = sum((e - true_value) ** 2 for e in estimates) / count
    # mse - bias^2 is the variance; rounding can push it a hair below zero.
    std = math.sqrt(max(mse - bias * bias, 0.0))
    return ParameterSummary(
        true_value=true_value, mean=mean, bias=bias, mse=mse, std=std, estimates=list(estimates)
    )


def run_monte_carlo(
    n_sims: int,
    location: float,
    scale: float,
    n: int,
    on_progress: Optional[ProgressCallback] = None,
    cancel_event: Optional[threading.Event] = None,
    progress_every: int = PROGRESS_EVERY,
    time_budget: Optional[float] = None,
) -> MonteCarloResult:
    """Repeat simulate -> MoM -> MLE over ``n_sims`` seeded trials.

    Trial ``i`` always uses seed ``1000 + i``. Every ``progress_every`` trials
    (starting with the first) ``on_progress`` receives the completed
    percentage and ``cancel_event`` is checked; a set event aborts the run
    with :class:`RunCancelledError`.

    With ``time_budget`` (seconds) the run logs a warning past half the
    budget and an error once it is exceeded; the run is never cut short.
    """
    if n_sims < 1:
        raise ConfigValidationError(f"n_sims must be >= 1, got {n_sims}")
    if progress_every < 1:
        raise ConfigValidationError("progress_every must be >= 1")
    if time_budget is not None and time_budget < 0:
        raise ConfigValidationError("time_budget must be >= 0")
    params = DistributionParams(location=location, scale=scale)

    mom_location: List[float] = []
    mom_scale: List[float] = []
    mle_location: List[float] = []
    mle_scale: List[float] = []
    mle_times: List[float] = []
    non_converged = 0

    log.info("Monte Carlo run started", extra={"n_sims": n_sims, "n": n})
    warn_budget = time_budget * WARN_RATIO if time_budget is not None else None
    with track_time("monte_carlo", warn_budget=warn_budget, error_budget=time_budget):
        for i in range(n_sims):
            sample = simulate(n, params.location, params.scale, trial_seed(i))

            mom = estimate_mom(sample)
            mom_location.append(mom.location)
            mom_scale.append(mom.scale)

            mle = estimate_mle(sample, init_with_mom=True)
            mle_location.append(mle.location)
            mle_scale.append(mle.scale)
            mle_times.append(mle.elapsed_ms)
            if not mle.converged:
                non_converged += 1

            if i % progress_every == 0:
                if on_progress is not None:
                    on_progress((i + 1) / n_sims * 100.0)
                if cancel_event is not None and cancel_event.is_set():
                    log.warning("Monte Carlo run cancelled", extra={"trial": i, "n_sims": n_sims})
                    raise RunCancelledError(f"Monte Carlo run cancelled after {i + 1} of {n_sims} trials")

    warnings: List[str] = []
    if non_converged:
        warnings.append(f"{non_converged} of {n_sims} MLE fits hit the iteration budget")

    return MonteCarloResult(
        n_sims=n_sims,
        n=n,
        params=params,
        mom=MethodSummary(
            location=summarize(mom_location, params.location),
            scale=summarize(mom_scale, params.scale),
        ),
        mle=MethodSummary(
            location=summarize(mle_location, params.location),
            scale=summarize(mle_scale, params.scale),
        ),
        avg_elapsed_ms=sum(mle_times) / n_sims,
        non_converged=non_converged,
        warnings=warnings,
    )


def submit_monte_carlo(
    n_sims: int,
    location: float,
    scale: float,
    n: int,
    executor: Optional[ThreadPoolExecutor] = None,
    on_progress: Optional[ProgressCallback] = None,
    cancel_event: Optional[threading.Event] = None,
    time_budget: Optional[float] = None,
) -> Future:
    """Run :func:`run_monte_carlo` on a worker thread and return its future.

    Trials still run one after another inside the worker. A private
    single-thread executor is created (and shut down once the run finishes)
    when none is supplied.
    """
    owned = executor is None
    pool = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="monte-carlo")
    future = pool.submit(
        run_monte_carlo,
        n_sims,
        location,
        scale,
        n,
        on_progress=on_progress,
        cancel_event=cancel_event,
        time_budget=time_budget,
    )
    if owned:
        future.add_done_callback(lambda _: pool.shutdown(wait=False))
    return future


__all__ = ["BASE_SEED", "run_monte_carlo", "submit_monte_carlo", "summarize", "trial_seed"]
