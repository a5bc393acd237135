"""benchsys CLI - Main entry point."""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from benchsys import __version__
from benchsys.config.loader import ConfigError, load_snapshot_config
from benchsys.config.models import SnapshotConfig
from benchsys.system.collector import SystemInfoCollector
from benchsys.system.runner import NOT_AVAILABLE

console = Console()


def _setup_logging(level: str) -> None:
    """Send benchsys log records to stderr, replacing any earlier handler."""
    log_format = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
    package_logger = logging.getLogger("benchsys")
    package_logger.setLevel(level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(log_format))
    package_logger.addHandler(handler)


def _value(text: str) -> str:
    if text == NOT_AVAILABLE:
        return "[yellow]N/A[/yellow]"
    return escape(text)


@click.group()
@click.version_option(version=__version__, prog_name="benchsys")
def cli():
    """benchsys - host environment snapshots for benchmark reports."""


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML configuration file",
)
@click.option("--json", "as_json", is_flag=True, help="Print the snapshot as JSON")
@click.option("--verbose", is_flag=True, help="Log command diagnostics")
def snapshot(config_path, as_json, verbose):
    """Collect and display a system snapshot for this machine."""
    try:
        config = load_snapshot_config(config_path) if config_path else SnapshotConfig()
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    _setup_logging("DEBUG" if verbose else config.log_level)

    info = SystemInfoCollector(config=config).collect()

    if as_json:
        click.echo(json.dumps(info.to_dict(), indent=2))
        return

    table = Table(title="System Information")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Python", info.runtime_version)
    table.add_row("Python version", info.platform_version)
    table.add_row("Operating system", info.os_family.value)
    table.add_row("CPU", _value(info.cpu_model))
    table.add_row("Cores", str(info.core_count))
    table.add_row("Memory", _value(info.available_memory))
    console.print(table)


if __name__ == "__main__":
    cli()
