"""Wald CLI command: test hypothesised parameters against the MLE."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from logistic_lab.cli.settings import resolve_lab_config
from logistic_lab.data.loader import load_or_simulate
from logistic_lab.lab.analysis import analyze_sample
from logistic_lab.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli_wald")


def wald(
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    data: Optional[Path] = typer.Option(None, "--data", help="Delimited file with observations (skips simulation)"),
    location: Optional[float] = typer.Option(None, help="True location used for simulation"),
    scale: Optional[float] = typer.Option(None, help="True scale used for simulation"),
    n: Optional[int] = typer.Option(None, help="Sample size"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    location_test: Optional[float] = typer.Option(None, "--mu0", help="Hypothesised location under H0"),
    scale_test: Optional[float] = typer.Option(None, "--s0", help="Hypothesised scale under H0"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
) -> None:
    """Run two-sided Wald tests of H0: mu = mu0 and H0: s = s0 at the 5% level."""
    cfg = resolve_lab_config(
        config,
        {
            "location": location,
            "scale": scale,
            "n": n,
            "seed": seed,
            "location_test": location_test,
            "scale_test": scale_test,
        },
    )
    sample = load_or_simulate(cfg, data)
    analysis = analyze_sample(sample, cfg.location_test, cfg.scale_test, init_with_mom=cfg.init_with_mom)
    tests = {"mu": analysis.wald_location, "s": analysis.wald_scale}

    if as_json:
        typer.echo(json.dumps({name: result.to_dict() for name, result in tests.items()}, indent=2))
        return

    table = Table(title=f"Wald tests (n={analysis.stats.n}, alpha=0.05)")
    for column in ("H0", "Estimate", "SE", "z", "p-value", "Decision"):
        table.add_column(column, justify="left" if column in {"H0", "Decision"} else "right")
    for name, result in tests.items():
        style = "red" if result.rejected else "green"
        table.add_row(
            f"{name} = {result.null_value:g}",
            f"{result.estimate:.4f}",
            f"{result.standard_error:.4f}",
            f"{result.z_score:.4f}",
            f"{result.p_value:.4f}",
            f"[{style}]{result.decision}[/{style}]",
        )
    console.print(table)
    log.info("wald command completed", extra={"n": analysis.stats.n})
