"""
Main CLI application using Typer.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from ..adapters.config_store import ConfigRestaurantStore
from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import OpenHoursError
from ..domain.models import WEEKDAYS
from ..domain.time_converter import format_time_12_hour
from ..services.restaurant_status import RestaurantStatusService, StatusReport

app = typer.Typer(
    name="openhours",
    help="Check restaurant opening hours and upcoming status changes",
    add_completion=False
)

console = Console()

STATE_STYLES = {
    "open": "green",
    "warning": "yellow",
    "critical": "bold red",
}


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Business-hours scheduling for restaurants.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    config_path = config_file or get_default_config_path()
    return AppConfig.load_from_yaml(config_path)


def _parse_instant(value: Optional[str]) -> Optional[datetime]:
    """Parse the --at option; naive values are read in each restaurant's timezone."""
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid --at value '{value}', expected an ISO date-time") from e


def _format_instant(value: datetime) -> str:
    return value.strftime("%a %Y-%m-%d %H:%M %Z")


def _describe_next_change(report: StatusReport) -> str:
    if report.next_change is None:
        return "[dim]closed for the week[/dim]"
    label = "Opens" if report.next_change.type == "opening" else "Closes"
    return f"{label} {_format_instant(report.next_change.time)}"


def _describe_countdown(report: StatusReport) -> str:
    countdown = report.countdown
    if countdown is None:
        return "-"
    style = STATE_STYLES[countdown.state]
    return f"[{style}]{countdown.hours}h {countdown.minutes:02d}m ({countdown.state})[/{style}]"


@app.command()
def status(
    names: Annotated[Optional[List[str]], typer.Argument(help="Restaurant names. Defaults to all configured restaurants.")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    at: Annotated[Optional[str], typer.Option("--at", help="Evaluate at this ISO date-time instead of now.")] = None,
):
    """
    Show whether restaurants should be open and when that changes.

    Examples:

        openhours status
        openhours status mama-put --at 2026-02-03T20:45
        openhours status --at 2026-02-03T19:45+00:00
    """
    try:
        config = _load_config(config_file)
        instant = _parse_instant(at)

        service = RestaurantStatusService(store=ConfigRestaurantStore(config))
        reports = service.report_many(names or [], at=instant)

        if not reports:
            console.print("[yellow]No restaurants configured.[/yellow]")
            return

        table = Table(
            title="Restaurant status",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Restaurant", style="bold yellow")
        table.add_column("Timezone", style="dim")
        table.add_column("Status")
        table.add_column("Next change")
        table.add_column("Until closing")
        table.add_column("Auto", justify="center")

        for report in reports:
            table.add_row(
                report.name,
                report.timezone,
                "[green]OPEN[/green]" if report.should_be_open else "[red]CLOSED[/red]",
                _describe_next_change(report),
                _describe_countdown(report),
                "✓" if report.auto_schedule_enabled else "-",
            )

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ValueError, KeyError, OpenHoursError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def hours(
    name: Annotated[str, typer.Argument(help="Restaurant name.")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
):
    """
    Show the weekly opening hours of a restaurant.
    """
    try:
        config = _load_config(config_file)
        restaurant = config.find_restaurant(name)
        if restaurant is None:
            console.print(f"[bold red]Error:[/bold red] Unknown restaurant: '{name}'")
            raise typer.Exit(1)

        schedule = restaurant.schedule()

        table = Table(
            title=f"{restaurant.name} ({restaurant.timezone})",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Day", style="bold")
        table.add_column("Hours")

        for day in WEEKDAYS:
            day_spec = schedule.for_day(day)
            if day_spec.is_closed_all_day:
                hours_text = "[dim]Closed[/dim]"
            else:
                hours_text = f"{format_time_12_hour(day_spec.open)} – {format_time_12_hour(day_spec.close)}"
                if day_spec.is_overnight:
                    hours_text += " [dim](next day)[/dim]"
            table.add_row(day.capitalize(), hours_text)

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ValueError, OpenHoursError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def list_restaurants(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    List all configured restaurants.
    """
    try:
        config = _load_config(config_file)

        if not config.restaurants:
            console.print("[yellow]No restaurants defined in the config file.[/yellow]")
            return

        table = Table(
            title="Configured restaurants",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Name", style="bold yellow")
        table.add_column("Timezone", style="dim")
        table.add_column("Auto schedule", justify="center")

        for restaurant in config.restaurants:
            table.add_row(
                restaurant.name,
                restaurant.timezone,
                "✓" if restaurant.auto_schedule_enabled else "-"
            )

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(Panel.fit(f"[bold cyan]openhours[/bold cyan] version [bold]{__version__}[/bold]"))


if __name__ == "__main__":
    app()
