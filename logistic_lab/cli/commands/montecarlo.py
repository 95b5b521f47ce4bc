"""Monte Carlo CLI command with a live progress bar."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn, TimeElapsedColumn
from rich.table import Table

from logistic_lab.cli.settings import resolve_lab_config
from logistic_lab.cli.validation import validate_montecarlo_inputs
from logistic_lab.mc.harness import run_monte_carlo
from logistic_lab.models import MonteCarloResult
from logistic_lab.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli_montecarlo")


def render_summary(result: MonteCarloResult) -> Table:
    table = Table(title=f"Monte Carlo: {result.n_sims} trials of n={result.n}")
    for column in ("Method", "Parameter", "True", "Mean", "Bias", "MSE", "Std"):
        table.add_column(column, justify="left" if column in {"Method", "Parameter"} else "right")
    for method_name, method in (("MoM", result.mom), ("MLE", result.mle)):
        for param_name, summary in (("mu", method.location), ("s", method.scale)):
            table.add_row(
                method_name,
                param_name,
                f"{summary.true_value:g}",
                f"{summary.mean:.4f}",
                f"{summary.bias:+.5f}",
                f"{summary.mse:.6f}",
                f"{summary.std:.5f}",
            )
    return table


def montecarlo(
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    location: Optional[float] = typer.Option(None, help="True location"),
    scale: Optional[float] = typer.Option(None, help="True scale"),
    n: Optional[int] = typer.Option(None, help="Sample size per trial"),
    sims: Optional[int] = typer.Option(None, "--sims", help="Number of Monte Carlo trials"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
    include_estimates: bool = typer.Option(False, "--include-estimates", help="Add per-trial estimates to JSON output"),
) -> None:
    """Compare bias and MSE of MoM and MLE over seeded trials (seeds 1000, 1001, ...)."""
    cfg = resolve_lab_config(
        config, {"location": location, "scale": scale, "n": n, "mc_sims": sims}
    )
    validate_montecarlo_inputs(sims=cfg.mc_sims, n=cfg.n, scale=cfg.scale)

    if as_json:
        result = run_monte_carlo(cfg.mc_sims, cfg.location, cfg.scale, cfg.n)
        typer.echo(json.dumps(result.to_dict(include_estimates=include_estimates), indent=2))
        return

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.percentage:>5.1f}%"),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Running trials...", total=100.0)
        result = run_monte_carlo(
            cfg.mc_sims,
            cfg.location,
            cfg.scale,
            cfg.n,
            on_progress=lambda pct: progress.update(task, completed=pct),
        )
        progress.update(task, completed=100.0)

    console.print(render_summary(result))
    console.print(f"Average MLE time: {result.avg_elapsed_ms:.2f} ms")
    for warning in result.warnings:
        console.print(f"[yellow]{warning}[/yellow]")
    log.info("montecarlo command completed", extra={"n_sims": result.n_sims, "n": result.n})
