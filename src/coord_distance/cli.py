"""CLI entrypoint for coord-distance."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from coord_distance.config import load_settings
from coord_distance.geo import Coordinate

console = Console()
logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"ignore_unknown_options": True}


def _fmt_coord(c: Coordinate) -> str:
    return f"{c.latitude:.4f}, {c.longitude:.4f}"


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (env: COORD_DISTANCE_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Coord Distance: great-circle distances between coordinates."""
    settings = load_settings()
    if log_level:
        settings.log_level = log_level.upper()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.obj = settings


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
@click.pass_obj
def distance(settings, lat1: float, lon1: float, lat2: float, lon2: float):
    """Distance in km between (LAT1, LON1) and (LAT2, LON2)."""
    a = Coordinate(lat1, lon1)
    b = Coordinate(lat2, lon2)
    km = a.distance_in_km(b)
    logger.info("distance %s -> %s = %.3f km", a, b, km)

    table = Table(title="Great-circle distance")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Distance (km)", justify="right", style="bold")
    table.add_row(_fmt_coord(a), _fmt_coord(b), f"{km:.{settings.precision}f}")

    console.print(table)


@cli.command()
@click.option(
    "--point", "points", multiple=True, type=(float, float),
    metavar="LAT LON", help="A coordinate; repeat for each point.",
)
@click.pass_obj
def matrix(settings, points: tuple[tuple[float, float], ...]):
    """Pairwise distance matrix (km) for two or more points."""
    if len(points) < 2:
        raise click.UsageError("matrix needs at least two --point options.")

    coords = [Coordinate(lat, lon) for lat, lon in points]

    table = Table(title=f"Distance matrix ({len(coords)} points, km)")
    table.add_column("#", style="bold", justify="right")
    table.add_column("Coords")
    for i in range(len(coords)):
        table.add_column(str(i + 1), justify="right")

    for i, a in enumerate(coords):
        row = [str(i + 1), _fmt_coord(a)]
        for j, b in enumerate(coords):
            row.append("-" if i == j else f"{a.distance_in_km(b):.{settings.precision}f}")
        table.add_row(*row)

    console.print(table)
