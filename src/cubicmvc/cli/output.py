"""Rich console output helpers for the CLI."""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from cubicmvc.domain import Boundary, CubicMVCCoordinates

console = Console()

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Create a rich progress bar for batch evaluation.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header."""
    console.print(f"\n[bold]cubicmvc[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_boundary_info(path: str, boundary: Boundary) -> None:
    """Print boundary summary.

    Args:
        path: Path of the boundary file
        boundary: Loaded boundary
    """
    line = Text("  ")
    line.append(path)
    line.append(" (simple polygon)" if boundary.is_simple else " (edge list)")
    console.print(line)
    console.print(
        f"  {boundary.vertex_count:,} vertices {SYM_DOT} {boundary.edge_count:,} edges "
        f"{SYM_DOT} {boundary.loop_count()} loops {SYM_DOT} area {boundary.signed_area():g}"
    )


def print_coordinates(boundary: Boundary, coords: CubicMVCCoordinates) -> None:
    """Print coordinates of a single query as tables.

    Args:
        boundary: Boundary the coordinates belong to
        coords: Evaluated coordinates
    """
    if coords.on_boundary:
        console.print(f"  query lies on edge {coords.boundary_edge}")

    values = Table(title="Value coordinates", title_justify="left")
    values.add_column("vertex", justify="right")
    values.add_column("x", justify="right")
    values.add_column("y", justify="right")
    values.add_column("weight", justify="right")
    for k, (p, w) in enumerate(zip(boundary.vertices, coords.value_coords)):
        values.add_row(str(k), f"{p.x:g}", f"{p.y:g}", f"{w:.10f}")
    console.print(values)

    gradients = Table(title="Gradient coordinates", title_justify="left")
    gradients.add_column("edge", justify="right")
    gradients.add_column("vertices", justify="center")
    gradients.add_column("normal (start, end)", justify="right")
    gradients.add_column("tangent (start, end)", justify="right")
    for k, (i, j) in enumerate(boundary.edges):
        gn = coords.normal_grad_coords
        gt = coords.tangent_grad_coords
        gradients.add_row(
            str(k),
            f"{i} → {j}",
            f"{gn[2 * k]:.8f}, {gn[2 * k + 1]:.8f}",
            f"{gt[2 * k]:.8f}, {gt[2 * k + 1]:.8f}",
        )
    console.print(gradients)
    console.print(f"  sum of value coordinates {coords.value_sum:.12f}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    """Print processing configuration."""
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_success(
    output_path: str | None,
    total_time_s: float,
    evaluated: int,
    on_boundary: int,
    errors: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file, if one was written
        total_time_s: Total processing time in seconds
        evaluated: Number of queries evaluated
        on_boundary: Number of queries found on a boundary edge
        errors: Number of failed queries
        avg_time_ms: Average evaluation time per query in milliseconds
        min_time_ms: Fastest query evaluation in milliseconds
        max_time_ms: Slowest query evaluation in milliseconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {evaluated} queries {SYM_DOT} {on_boundary} on boundary {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )
    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.3f}ms avg"
        if min_time_ms is not None and max_time_ms is not None:
            timing_str += f" ({min_time_ms:.3f}-{max_time_ms:.3f}ms range)"
        console.print(f"  {timing_str}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message."""
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_summary() -> None:
    """Print cancellation summary."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output file created")
