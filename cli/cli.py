"""CLI for planrisk.

Runs the estimators locally, exactly as the API does, and serves the API.
"""

import json
from datetime import date, datetime
from typing import NoReturn

import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from planrisk.config.settings import settings
from planrisk.core.logger import setup_logger
from planrisk.estimation.errors import EstimationInputError
from planrisk.estimation.risk import estimate_project_risk
from planrisk.estimation.schedule import estimate_schedule
from planrisk.estimation.types import RiskAssessment, Schedule
from planrisk.estimation.validators import validate_project_parameters, validate_total_duration

console = Console()

app = typer.Typer(
    name="planrisk",
    help="Project risk and schedule estimation",
    add_completion=False,
)

LEVEL_STYLES = {"High": "bold red", "Medium": "bold yellow", "Low": "bold green"}


def _setup_logging(debug: bool = False) -> None:
    """Console-only logging; quiet unless --debug is given."""
    setup_logger(level="DEBUG" if debug else "WARNING")


def _fail(error: EstimationInputError) -> NoReturn:
    console.print(f"[bold red]Invalid input:[/bold red] {error}")
    raise typer.Exit(code=1)


def _risk_payload(assessment: RiskAssessment) -> dict:
    return {
        "probability": assessment.probability,
        "suggestion": assessment.recommendation,
        "level": assessment.level,
    }


def _schedule_payload(schedule: Schedule) -> dict:
    return {
        "phases": [
            {
                "name": phase.name.value,
                "allocationPercent": phase.allocation_percent,
                "dayCount": phase.day_count,
                "startDate": phase.start_date.isoformat(),
                "endDate": phase.end_date.isoformat(),
            }
            for phase in schedule.phases
        ],
        "overallEndDate": schedule.overall_end_date.isoformat(),
        "totalScheduledDays": schedule.total_scheduled_days,
    }


@app.command()
def risk(
    duration: int = typer.Option(..., "--duration", "-d", help="Estimated duration in days"),
    requirements: int = typer.Option(..., "--requirements", "-r", help="Number of initial requirements"),
    developers: int = typer.Option(..., "--developers", "-n", help="Number of developers assigned"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Estimate the risk of a project."""
    _setup_logging(debug)
    try:
        parameters = validate_project_parameters(duration, requirements, developers)
    except EstimationInputError as e:
        _fail(e)

    assessment = estimate_project_risk(parameters, settings.risk_model())

    if as_json:
        typer.echo(json.dumps(_risk_payload(assessment), ensure_ascii=False))
        return

    style = LEVEL_STYLES[assessment.level]
    body = Text.assemble(
        ("Probability: ", "bold"),
        (f"{assessment.probability * 100:.0f}%\n", style),
        ("Level: ", "bold"),
        (f"{assessment.level}\n\n", style),
        assessment.recommendation,
    )
    console.print(Panel(body, title="Risk estimation", border_style=style.split()[-1]))


@app.command()
def schedule(
    duration: int = typer.Option(..., "--duration", "-d", help="Total duration in days"),
    start: datetime | None = typer.Option(
        None,
        "--start",
        "-s",
        formats=["%Y-%m-%d"],
        help="Start date (YYYY-MM-DD), defaults to today",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON result"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Split a project duration into dated phases."""
    _setup_logging(debug)
    start_date = start.date() if start else date.today()
    try:
        total_duration = validate_total_duration(duration, start_date)
    except EstimationInputError as e:
        _fail(e)

    result = estimate_schedule(total_duration, start_date)

    if as_json:
        typer.echo(json.dumps(_schedule_payload(result)))
        return

    table = Table(title="Schedule estimation")
    table.add_column("Phase", style="cyan")
    table.add_column("Days", justify="center")
    table.add_column("%", justify="center")
    table.add_column("Start")
    table.add_column("End")
    for phase in result.phases:
        table.add_row(
            phase.name.value,
            str(phase.day_count),
            f"{phase.allocation_percent}%",
            phase.start_date.isoformat(),
            phase.end_date.isoformat(),
        )
    console.print(table)
    console.print(
        f"{result.start_date.isoformat()} - {result.overall_end_date.isoformat()} "
        f"([bold]{result.total_scheduled_days}[/bold] total days)"
    )
    if result.total_scheduled_days != total_duration:
        console.print(f"[yellow]Requested {total_duration} days; rounding per phase gives {result.total_scheduled_days}.[/yellow]")


@app.command()
def serve(
    host: str = typer.Option(settings.server_host, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(settings.server_port, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the FastAPI server."""
    logger.info(f"Starting FastAPI server on {host}:{port} (reload={reload})")
    uvicorn.run("planrisk.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
