"""CLI application entry point for cubicmvc.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer

from cubicmvc import __version__
from cubicmvc.cli.output import (
    SYM_OK,
    console,
    create_progress,
    print_boundary_info,
    print_cancellation_summary,
    print_coordinates,
    print_error,
    print_header,
    print_processing_info,
    print_step,
    print_success,
)
from cubicmvc.config import (
    CubicMVCSettings,
    GeometryConfig,
    LoggingConfig,
    ProcessingConfig,
)
from cubicmvc.core import BatchEvaluator, CubicMVCEvaluator
from cubicmvc.domain import Point
from cubicmvc.exceptions import BoundaryLoadError, CubicMVCError, ResultSaveError
from cubicmvc.io import BoundaryReader, CoordinatesWriter
from cubicmvc.utils import configure_logging

app = typer.Typer(
    name="cubicmvc",
    help="Evaluate cubic mean value coordinates of points inside planar polygons.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]cubicmvc[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Evaluate cubic mean value coordinates of points inside planar polygons."""


def parse_query(value: str) -> Point:
    """Parse an "x,y" query string.

    Raises:
        typer.BadParameter: If the value is not two comma-separated numbers
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise typer.BadParameter(f"expected X,Y but got {value!r}")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise typer.BadParameter(f"expected X,Y but got {value!r}") from e


@app.command()
def info(
    boundary_file: Annotated[
        Path,
        typer.Argument(help="Path to boundary JSON file", show_default=False),
    ],
) -> None:
    """Load and validate a boundary, then print a summary."""
    try:
        boundary = BoundaryReader(boundary_file).load()
        CubicMVCEvaluator(boundary)
        print_boundary_info(str(boundary_file), boundary)
    except CubicMVCError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    console.print(f"\n[bold green]{SYM_OK} Boundary is valid[/bold green]")


@app.command()
def evaluate(
    boundary_file: Annotated[
        Path,
        typer.Argument(help="Path to boundary JSON file", show_default=False),
    ],
    query: Annotated[
        str | None,
        typer.Option("--query", help="Single query point as X,Y"),
    ] = None,
    queries_file: Annotated[
        Path | None,
        typer.Option("--queries", help="JSON file with a 'queries' list"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for batch results (default: {name}-coords.json)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            help="Relative tolerance for detecting queries on an edge",
            min=1e-15,
            max=1e-3,
        ),
    ] = 1e-10,
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Evaluate coordinates for one query point or a file of query points.

    Example:
        cubicmvc evaluate square.json --query 1,3
        cubicmvc evaluate domain.json --queries points.json -o coords.json
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if (query is None) == (queries_file is None):
        print_error("Provide exactly one of --query or --queries")
        raise typer.Exit(code=1)

    settings = CubicMVCSettings(
        geometry=GeometryConfig(collinear_tolerance=tolerance),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else (log_level if not quiet else "ERROR"),
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        if not quiet:
            print_step("Loading boundary")
        boundary = BoundaryReader(boundary_file).load()
        # summary helpers index vertices through the edge list
        evaluator = CubicMVCEvaluator(boundary, settings)
        if not quiet:
            print_boundary_info(str(boundary_file), boundary)

        if query is not None:
            point = parse_query(query)
            coords = evaluator.evaluate(point)
            if not quiet:
                print_step(f"Coordinates at ({point.x:g}, {point.y:g})")
                print_coordinates(boundary, coords)
            else:
                console.print(" ".join(f"{w:.12g}" for w in coords.value_coords))
            return

        points = BoundaryReader(queries_file).load_queries()
        output_path = output or CoordinatesWriter.get_default_path(boundary_file)

        if not quiet:
            actual_workers = workers if workers else os.cpu_count() or 1
            print_step(f"Evaluating {len(points)} queries")
            print_processing_info(actual_workers, is_auto=(workers is None))

        batch = BatchEvaluator(settings, logger=logger)
        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task("Evaluating", total=len(points))

                    def update_progress(completed: int, _total: int) -> None:
                        progress.update(task_id, completed=completed)

                    results, stats = batch.evaluate(
                        boundary, points, max_workers=workers, progress_callback=update_progress
                    )
            else:
                results, stats = batch.evaluate(boundary, points, max_workers=workers)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_summary()
            raise typer.Exit(code=130) from None

        CoordinatesWriter(output_path).save(points, results, dict(stats.errors))

        if not quiet:
            print_success(
                output_path=str(output_path),
                total_time_s=stats.duration_seconds,
                evaluated=stats.evaluated_count,
                on_boundary=stats.boundary_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_query_time_ms,
                min_time_ms=stats.min_query_time_ms,
                max_time_ms=stats.max_query_time_ms,
            )

    except BoundaryLoadError as e:
        print_error(f"Could not load boundary: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except ResultSaveError as e:
        print_error(f"Could not save results: {e.reason}")
        raise typer.Exit(code=1)
    except CubicMVCError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
