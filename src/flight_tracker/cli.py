"""CLI for the flight path tracker.

Usage:
    # Start the HTTP API on the configured address
    flight-tracker serve

    # Override the bind address
    flight-tracker serve --host 0.0.0.0 --port 9000

    # Compute a path from a file of segments
    flight-tracker compute flights.csv --mode chain
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from pandera.errors import SchemaError

from flight_graph import FlightGraphError
from flight_tracker.adapters.providers.file_provider import FileSegmentProvider
from flight_tracker.application import CalculateFlightPath
from flight_tracker.config import Settings
from flight_tracker.logging_setup import setup_logging
from flight_tracker.schemas.path import PathMode

app = typer.Typer(
    name="flight-tracker",
    help="Derive travel paths from batches of flight segments.",
    no_args_is_help=True,
)


@app.command()
def serve(
    host: Annotated[
        Optional[str],
        typer.Option("--host", "-h", help="Bind address (default: FLIGHT_TRACKER_HOST)."),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Bind port (default: FLIGHT_TRACKER_PORT).", min=0, max=65535),
    ] = None,
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = Settings.from_env()
    setup_logging(settings.log_level)

    bind_host = host or settings.host
    bind_port = port if port is not None else settings.port

    typer.secho(f"Starting flight path tracker on {bind_host}:{bind_port}", fg=typer.colors.GREEN)

    uvicorn.run(
        "flight_tracker.api.flights_api:app",
        host=bind_host,
        port=bind_port,
        log_level=settings.log_level.lower(),
    )


@app.command()
def compute(
    file: Annotated[
        Path,
        typer.Argument(help="CSV or JSON file of source/destination segments.", exists=True, dir_okay=False),
    ],
    mode: Annotated[
        PathMode,
        typer.Option("--mode", "-m", help="Path derivation mode."),
    ] = PathMode.TRAVERSAL,
) -> None:
    """Compute a path from a file and print it as JSON."""
    settings = Settings.from_env()
    # Logs go to stderr so stdout carries only the JSON result
    setup_logging(settings.log_level, stream=sys.stderr)

    try:
        segments = FileSegmentProvider(file).get_segments()
        result = CalculateFlightPath(settings=settings).calculate(segments, mode)
    except (FlightGraphError, SchemaError, ValueError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e

    typer.echo(json.dumps(result.to_dict()))


def main() -> None:
    """Entry point for the flight-tracker command."""
    app()


if __name__ == "__main__":
    main()
