"""CLI entry point for the results dashboard."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from cts_dashboard.core.pagination import layout
from cts_dashboard.duration_utils import display_duration
from cts_dashboard.models.config import DashboardConfig
from cts_dashboard.models.dashboard import DashboardSnapshot
from cts_dashboard.models.status import UNRECOGNIZED_LABEL, TestStatus
from cts_dashboard.orchestrator import Orchestrator

console = Console()

STATUS_CHOICES = [s.value for s in TestStatus]


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load_config(config: str, source: Optional[str]) -> DashboardConfig:
    try:
        cfg = DashboardConfig.load(config)
    except FileNotFoundError:
        if not source:
            console.print(f"[red]Config file not found: {config}[/red]")
            console.print("Run 'cts-dashboard init' or pass --source.")
            sys.exit(1)
        cfg = DashboardConfig()
    except ValidationError as e:
        console.print(f"[red]Invalid config {config}:[/red] {e}")
        sys.exit(1)
    if source:
        try:
            cfg = DashboardConfig(**{**cfg.model_dump(), "results_source": source})
        except ValidationError as e:
            console.print(f"[red]Invalid --source {source}:[/red] {e}")
            sys.exit(1)
    return cfg


def _prepare(
    config: str, source: Optional[str], status: Optional[str],
    search: Optional[str], page: int,
) -> tuple[Orchestrator, DashboardSnapshot]:
    cfg = _load_config(config, source)
    orchestrator = Orchestrator(cfg)
    if not orchestrator.run_load():
        console.print("[red]Failed to load CTS results[/red]")
        sys.exit(1)
    snapshot = orchestrator.apply(
        status=TestStatus(status) if status else None,
        search=search,
        page=max(page - 1, 0),
    )
    return orchestrator, snapshot


def _print_stats(snapshot: DashboardSnapshot) -> None:
    console.print(
        f"[blue]Total: {snapshot.total} tests[/blue]  "
        f"[green]Filtered: {snapshot.view.filtered_count} tests[/green]"
    )
    table = Table(title="Status Summary")
    table.add_column("Status", style="bold")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")
    for status in TestStatus:
        color = status.color
        table.add_row(
            f"{status.glyph} {status.value}",
            f"[{color}]{snapshot.histogram.counts[status]}[/]",
            f"{snapshot.histogram.percentage(status):.1f}%",
        )
    console.print(table)


def _print_page(snapshot: DashboardSnapshot, radius: int) -> None:
    view = snapshot.view
    table = Table(title=f"Page {view.current_page + 1} of {view.page_count + 1}")
    table.add_column("Test name")
    table.add_column("Duration (H:M:S.MS)", justify="center")
    table.add_column("Status", justify="center")
    for record in view.page_records:
        status = record.status
        label = (
            f"[{status.color}]{status.value}[/]"
            if status else UNRECOGNIZED_LABEL
        )
        table.add_row(escape(record.name), display_duration(record.duration_seconds), label)
    console.print(table)

    pages = layout(view.current_page, view.page_count, radius)
    parts = []
    if pages.show_left_ellipsis:
        parts.append("...")
    for i in pages.page_buttons:
        parts.append(f"[bold][{i + 1}][/bold]" if i == view.current_page else str(i + 1))
    if pages.show_right_ellipsis:
        parts.append("...")
    console.print("Pages: " + " ".join(parts))


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """CTS test results dashboard"""
    setup_logging(verbose)


def _view_options(f):
    f = click.option("--page", "-p", default=1, type=click.IntRange(min=1),
                     help="Page number (1-based)")(f)
    f = click.option("--search", "-s", default=None, help="Test name substring")(f)
    f = click.option("--status", default=None, type=click.Choice(STATUS_CHOICES),
                     help="Only show tests with this status")(f)
    f = click.option("--source", default=None, help="Results file or URL (overrides config)")(f)
    f = click.option("--config", "-c", default="dashboard-config.json", help="Config file path")(f)
    return f


@cli.command()
@_view_options
@click.option("--narrow", is_flag=True, help="Use the narrow pagination layout")
def show(config: str, source: Optional[str], status: Optional[str],
         search: Optional[str], page: int, narrow: bool) -> None:
    """Load results and print statistics and one page of the table."""
    orchestrator, snapshot = _prepare(config, source, status, search, page)
    cfg = orchestrator.config
    _print_stats(snapshot)
    radius = cfg.narrow_pagination_radius if narrow else cfg.wide_pagination_radius
    _print_page(snapshot, radius)


@cli.command()
@_view_options
@click.option("--output-dir", "-o", default=None, help="Report output directory")
def report(config: str, source: Optional[str], status: Optional[str],
           search: Optional[str], page: int, output_dir: Optional[str]) -> None:
    """Write HTML/JSON dashboards for the selected view."""
    orchestrator, _ = _prepare(config, source, status, search, page)
    reports = orchestrator.generate_reports(Path(output_dir) if output_dir else None)
    for fmt, path in reports.items():
        console.print(f"  {fmt.upper()} report: [blue]{path}[/blue]")


@cli.command()
@click.option("--source", "-s", prompt="Results file or URL", help="Results file or URL")
@click.option("--config", "-c", default="dashboard-config.json", help="Config file path")
def init(source: str, config: str) -> None:
    """Create a default configuration file."""
    config_path = Path(config)
    if config_path.exists():
        if not click.confirm(f"{config} already exists. Overwrite?"):
            return

    cfg = DashboardConfig(results_source=source)
    cfg.save(config_path)
    console.print(f"[green]Created {config_path}[/green]")
    console.print("\nYou can now run:")
    console.print("  [blue]cts-dashboard show --status Fail[/blue]")


if __name__ == "__main__":
    cli()
