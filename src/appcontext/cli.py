"""Command-line interface for appcontext."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml

from . import context
from .config import DEFAULT_CONFIG_FILE, HolderConfig, load_holder_config
from .logger import get_logger, setup_logger

app = typer.Typer(
    name="appcontext",
    help="Inspect the policy of the process-wide application context holder",
    add_completion=False,
)

logger = get_logger()


def _resolve_config(config_path: Path | None) -> HolderConfig:
    """Load config with priority: --config > ./appcontext.yaml > defaults."""
    if config_path is not None:
        return load_holder_config(config_path)
    default_path = Path(DEFAULT_CONFIG_FILE)
    if default_path.exists():
        return load_holder_config(default_path)
    logger.debug("No %s found, using default policy", DEFAULT_CONFIG_FILE)
    return HolderConfig()


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show changes, 2=show reads, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help=f"Path to holder config file (default: {DEFAULT_CONFIG_FILE})",
        ),
    ] = None,
) -> None:
    """Global options for appcontext commands."""
    setup_logger(verbose)
    ctx.obj = config


@app.command("show-config")
def show_config(ctx: typer.Context) -> None:
    """Load the holder config and print the effective policy as YAML."""
    config_path: Path | None = ctx.obj
    try:
        config = _resolve_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    context.configure(config)
    effective = {"context": context.get_config().model_dump(mode="json")}
    typer.echo(yaml.safe_dump(effective, sort_keys=False), nl=False)


def main() -> None:
    """Entry point for the appcontext command."""
    app()


if __name__ == "__main__":
    main()
