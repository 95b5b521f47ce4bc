"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from logistic_lab.cli.commands.estimate import estimate
from logistic_lab.cli.commands.montecarlo import montecarlo
from logistic_lab.cli.commands.simulate import simulate
from logistic_lab.cli.commands.wald import wald
from logistic_lab.exceptions import (
    ConfigError,
    DataSourceError,
    EstimationError,
    RunCancelledError,
)
from logistic_lab.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Logistic distribution estimation lab")


app.command()(simulate)
app.command()(estimate)
app.command()(wald)
app.command()(montecarlo)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigError as exc:
        log.error(str(exc))
        sys.exit(1)
    except DataSourceError as exc:
        log.error(f"Data validation failed: {exc}")
        sys.exit(2)
    except EstimationError as exc:
        log.error(f"Estimation failed: {exc}")
        sys.exit(3)
    except (RunCancelledError, KeyboardInterrupt):
        log.info("Run cancelled")
        sys.exit(130)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)


if __name__ == "__main__":
    main()
