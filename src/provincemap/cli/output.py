"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from provincemap.core.geometry import bounding_box
from provincemap.domain import Point, Province
from provincemap.utils import BuildStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Provincemap[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


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


def print_build_summary(stats: BuildStats, verbose: bool = False) -> None:
    """Print the outcome of a province build.

    Args:
        stats: Statistics of the build
        verbose: Whether to list dropped colors and truncated provinces
    """
    console.print(
        f"\n[bold green]{SYM_OK} Built[/bold green] in {_format_time(stats.duration_seconds)}"
    )
    console.print(
        f"  {stats.pixel_count:,} pixels {SYM_DOT} {stats.border_point_count:,} border points "
        f"{SYM_DOT} {stats.color_count} colors"
    )

    dropped_style = "yellow" if stats.dropped_colors else "green"
    truncated_style = "yellow" if stats.discarded_point_count else "green"
    console.print(
        f"  [green]{stats.province_count}[/green] provinces {SYM_DOT} "
        f"[{dropped_style}]{len(stats.dropped_colors)} unmapped colors[/{dropped_style}] {SYM_DOT} "
        f"[{truncated_style}]{stats.discarded_point_count:,} points discarded[/{truncated_style}]"
    )

    if verbose:
        if stats.dropped_colors:
            console.print(f"  Unmapped: {', '.join(stats.dropped_colors)}")
        if stats.truncated_provinces:
            console.print(f"  Truncated: {', '.join(stats.truncated_provinces)}")
        if stats.degenerate_provinces:
            console.print(f"  Degenerate: {', '.join(stats.degenerate_provinces)}")


def print_province_table(provinces: list[Province]) -> None:
    """Print one row per province with its path size and extent.

    Args:
        provinces: Built provinces
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Province")
    table.add_column("Color")
    table.add_column("Points", justify="right")
    table.add_column("Extent")

    for province in provinces:
        if province.points:
            min_x, min_y, max_x, max_y = bounding_box(province.points)
            extent = f"({min_x:g}, {min_y:g}) {SYM_DOT} ({max_x:g}, {max_y:g})"
        else:
            extent = "-"
        table.add_row(
            province.identifier,
            province.color.to_key(),
            str(len(province.points)),
            extent,
        )

    console.print(table)


def print_location(point: Point, provinces: list[Province]) -> None:
    """Print the provinces containing a query point.

    Args:
        point: World-space query point
        provinces: Provinces whose boundary contains the point
    """
    if not provinces:
        console.print(f"\n{SYM_DOT} No province at ({point.x:g}, {point.y:g})")
        return

    for province in provinces:
        line = Text(f"\n{SYM_OK} ")
        line.append(province.identifier, style="bold green")
        line.append(f" contains ({point.x:g}, {point.y:g})")
        console.print(line)


def print_success(output_path: str, province_count: int) -> None:
    """Print export confirmation.

    Args:
        output_path: Path to output file
        province_count: Number of provinces written
    """
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({province_count} provinces)")
    console.print(f"\n[bold green]{SYM_OK} Exported[/bold green]")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
