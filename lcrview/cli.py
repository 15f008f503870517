"""Command line entry point: `lcrview [run|check|init-config|version]`."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from lcrview import __version__
from lcrview.bootstrap import Services, check_connections, load_initial_state
from lcrview.models.state.app_settings import AppSettings, ConfigError
from lcrview.models.state.config_manager import CONFIG_PATH, ConfigManager
from lcrview.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="lcrview",
    help="Terminal dashboard for a local container registry, its commits and its cluster.",
    add_completion=False,
)
console = Console()


def _load_settings(
    config: Path | None,
    namespace: str | None,
    registry_host: str | None,
    log_file: str | None,
) -> AppSettings:
    try:
        settings = ConfigManager.load(config)
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    overrides = {
        "namespace": namespace,
        "registry_host": registry_host,
        "log_file": log_file,
    }
    updates = {key: value for key, value in overrides.items() if value}
    return settings.model_copy(update=updates) if updates else settings


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Launch the dashboard when no command is given."""
    if ctx.invoked_subcommand is None:
        _run_dashboard(None, None, None, None)


@app.command()
def run(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to settings JSON"),
    namespace: str | None = typer.Option(None, "--namespace", "-n", help="Deployment namespace"),
    registry_host: str | None = typer.Option(None, "--registry", help="Registry host:port"),
    log_file: str | None = typer.Option(None, "--log-file", help="Log file path"),
) -> None:
    """Load the initial snapshot and run the dashboard."""
    _run_dashboard(config, namespace, registry_host, log_file)


def _run_dashboard(
    config: Path | None,
    namespace: str | None,
    registry_host: str | None,
    log_file: str | None,
) -> None:
    from lcrview.app import LcrviewApp

    settings = _load_settings(config, namespace, registry_host, log_file)
    configure_logging(settings.log_file, settings.log_level)
    logger.info("Starting lcrview %s (registry %s)", __version__, settings.registry_host)

    services = Services.from_settings(settings)
    with console.status("Loading commits, images and pods..."):
        state = asyncio.run(load_initial_state(services, settings.namespace))

    LcrviewApp(services.dispatcher(), state=state, settings=settings).run()
    logger.info("lcrview exited")


@app.command()
def check(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to settings JSON"),
) -> None:
    """Check that the commit source, image catalog and cluster answer."""
    settings = _load_settings(config, None, None, None)
    configure_logging(settings.log_file, settings.log_level)
    results = asyncio.run(check_connections(Services.from_settings(settings)))

    table = Table(title="Connection checks")
    table.add_column("Source")
    table.add_column("Status")
    table.add_column("Time", justify="right")
    failures = 0
    for name, result in results.items():
        ok = result.success and bool(result.data)
        failures += not ok
        status = "[green]OK[/green]" if ok else f"[red]FAILED[/red] {result.error or ''}".rstrip()
        table.add_row(name, status, f"{result.duration_ms:.0f}ms")
    console.print(table)
    if failures:
        raise typer.Exit(code=1)


@app.command("init-config")
def init_config(
    config: Path | None = typer.Option(None, "--config", "-c", help="Path to settings JSON"),
) -> None:
    """Write default settings to the settings file."""
    path = config or CONFIG_PATH
    try:
        ConfigManager.reset(path)
    except ConfigError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
    console.print(f"Wrote default settings to {path}")


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"lcrview version {__version__}")
