"""Estimate CLI command: MoM and MLE fits with Fisher-based intervals."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from logistic_lab.cli.settings import resolve_lab_config
from logistic_lab.data.loader import load_or_simulate
from logistic_lab.lab.analysis import SampleAnalysis, analyze_sample
from logistic_lab.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli_estimate")


def render_estimates(analysis: SampleAnalysis) -> Table:
    table = Table(title=f"Estimates (n={analysis.stats.n})")
    table.add_column("Method")
    table.add_column("mu", justify="right")
    table.add_column("s", justify="right")
    table.add_column("log-lik", justify="right")
    table.add_column("Iterations", justify="right")
    table.add_column("Converged")
    table.add_column("Time (ms)", justify="right")
    table.add_row("MoM", f"{analysis.mom.location:.4f}", f"{analysis.mom.scale:.4f}", "-", "-", "-", "-")
    mle = analysis.mle
    table.add_row(
        "MLE",
        f"{mle.location:.4f}",
        f"{mle.scale:.4f}",
        f"{mle.log_likelihood:.4f}",
        str(mle.iterations),
        "yes" if mle.converged else "no",
        f"{mle.elapsed_ms:.2f}",
    )
    return table


def render_intervals(analysis: SampleAnalysis) -> Table:
    table = Table(title="Asymptotic variances and 95% intervals (at the MLE)")
    table.add_column("Parameter")
    table.add_column("Variance", justify="right")
    table.add_column("Interval", justify="right")
    rows = (
        ("mu", analysis.fisher.var_location, analysis.ci_location),
        ("s", analysis.fisher.var_scale, analysis.ci_scale),
    )
    for name, variance, ci in rows:
        table.add_row(name, f"{variance:.6f}", f"[{ci.lower:.4f}, {ci.upper:.4f}]")
    return table


def estimate(
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    data: Optional[Path] = typer.Option(None, "--data", help="Delimited file with observations (skips simulation)"),
    location: Optional[float] = typer.Option(None, help="True location used for simulation"),
    scale: Optional[float] = typer.Option(None, help="True scale used for simulation"),
    n: Optional[int] = typer.Option(None, help="Sample size"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    init_with_mom: Optional[bool] = typer.Option(
        None, "--init-mom/--init-raw", help="Start the MLE search from MoM or from mean/std"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of tables"),
) -> None:
    """Fit the logistic location and scale by MoM and MLE."""
    cfg = resolve_lab_config(
        config,
        {"location": location, "scale": scale, "n": n, "seed": seed, "init_with_mom": init_with_mom},
    )
    sample = load_or_simulate(cfg, data)
    analysis = analyze_sample(sample, cfg.location_test, cfg.scale_test, init_with_mom=cfg.init_with_mom)
    log.info("estimate command completed", extra={"n": analysis.stats.n, "method": "mle"})

    if as_json:
        payload = analysis.to_dict()
        payload.pop("wald_tests")
        typer.echo(json.dumps(payload, indent=2))
        return

    console.print(render_estimates(analysis))
    console.print(render_intervals(analysis))
