from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from modechoice._logging import log_to_file
from modechoice.cli._app import app
from modechoice.config import Config, Plan
from modechoice.driver import ModeChoiceModel

console = Console()

ConfigOption = typer.Option(  # noqa: B008
    ...,
    "-c",
    "--config",
    help="Configuration file(s) defining the modes, constraints and selector.",
)


def _load_config(config_files: list[Path]) -> Config:
    try:
        return Config.from_yaml(config_files)
    except ValidationError as err:
        console.print(f"[red]invalid configuration[/red]\n{err}")
        raise typer.Exit(code=1) from err


@app.command()
def check(config_files: list[Path] = ConfigOption):
    """Load and validate configuration files, and show the result."""
    cfg = _load_config(config_files)
    console.print(repr(cfg), highlight=False, markup=False)


@app.command()
def feasibility(
    config_files: list[Path] = ConfigOption,
    plan_file: Path = typer.Option(  # noqa: B008
        ...,
        "-p",
        "--plan",
        help="Plan file with a person's activities and modes.",
    ),
    log_file: Path = typer.Option(  # noqa: B008
        None,
        "--log",
        help="Write detailed log messages to this file.",
    ),
):
    """Show which modes the trip constraints allow for each trip of a plan.

    The modes of the plan itself are taken as the choices made for the
    earlier trips.
    """
    if log_file is not None:
        log_to_file(log_file, "DEBUG")
    model = ModeChoiceModel(_load_config(config_files))
    try:
        plan = Plan.from_yaml(plan_file)
    except ValidationError as err:
        console.print(f"[red]invalid plan[/red]\n{err}")
        raise typer.Exit(code=1) from err

    trips = plan.to_trips()
    constraint = model.trip_constraint(trips)

    table = Table(title=f"Feasible modes for {plan.person or 'unnamed person'}")
    table.add_column("trip", justify="right")
    table.add_column("origin")
    table.add_column("destination")
    table.add_column("plan mode")
    table.add_column("feasible modes")
    for trip in trips:
        feasible = model.feasible_modes(constraint, trip, plan.modes[: trip.index])
        plan_mode = trip.initial_mode
        if plan_mode not in feasible:
            plan_mode = f"[red]{plan_mode}[/red]"
        table.add_row(
            str(trip.index),
            f"{trip.origin_activity.type}@{trip.origin_location}",
            f"{trip.destination_activity.type}@{trip.destination_location}",
            plan_mode,
            ", ".join(feasible),
        )
    console.print(table)
