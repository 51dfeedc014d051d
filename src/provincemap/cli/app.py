"""CLI application entry point for provincemap.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from provincemap import __version__
from provincemap.cli.output import (
    console,
    print_build_summary,
    print_error,
    print_header,
    print_location,
    print_province_table,
    print_step,
    print_success,
)
from provincemap.config import (
    ExtractionConfig,
    LoggingConfig,
    ProvinceMapSettings,
    SequencingConfig,
)
from provincemap.core import BuildResult, ProvinceBuilder
from provincemap.domain import Point
from provincemap.exceptions import ConfigParseError, ImageLoadError, ProvinceMapError
from provincemap.io import write_provinces

# Create the Typer app
app = typer.Typer(
    name="provincemap",
    help="Extract province boundaries from a color-coded bitmap and query them.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Provincemap[/bold blue] v{__version__}")
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
    """Extract province boundaries from a color-coded bitmap and query them."""


def _run_build(
    settings: ProvinceMapSettings,
    image: Path | None,
    table: Path | None,
    quiet: bool,
) -> BuildResult:
    """Run a build, turning load failures into a CLI error exit.

    Args:
        settings: Provincemap settings
        image: Province bitmap (None = configured default)
        table: Identifier table (None = configured default)
        quiet: Suppress console log output
    """
    try:
        builder = ProvinceBuilder(settings, quiet=quiet)
        return builder.build(image_path=image, table_path=table)
    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except ConfigParseError as e:
        print_error(f"Could not parse configuration: {e.path}", details=e.details)
        raise typer.Exit(code=1)
    except ProvinceMapError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def build(
    image: Annotated[
        Path | None,
        typer.Argument(
            help="Path to the province bitmap (default: assets/provinces.bmp)",
            show_default=False,
        ),
    ] = None,
    table: Annotated[
        Path | None,
        typer.Option(
            "--table",
            "-t",
            help="TOML identifier table (default: assets/map.toml)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write provinces to this JSON file",
        ),
    ] = None,
    max_distance: Annotated[
        float,
        typer.Option(
            "--max-distance",
            "-d",
            help="Largest step between consecutive boundary points (exclusive)",
        ),
    ] = 10.0,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            help="Worker processes for border extraction",
            min=1,
        ),
    ] = 1,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Build province boundaries from a color-coded bitmap.

    Every non-gray color mapped in the identifier table becomes a province
    whose border pixels are ordered into a closed boundary path.

    Example:
        provincemap build assets/provinces.bmp --table assets/map.toml -o provinces.json
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if max_distance <= 0:
        print_error(f"Invalid --max-distance: {max_distance}", details="Must be greater than 0")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = ProvinceMapSettings(
        extraction=ExtractionConfig(max_workers=workers),
        sequencing=SequencingConfig(max_step_distance=max_distance),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    if not quiet:
        print_step("Building provinces")

    result = _run_build(settings, image, table, quiet)

    if not quiet:
        print_build_summary(result.stats, verbose=verbose)
        if verbose:
            console.print()
            print_province_table(result.provinces)

    if output is not None:
        try:
            write_provinces(result.provinces, output)
        except OSError as e:
            print_error(f"Could not write {output}", details=str(e))
            raise typer.Exit(code=1)
        if not quiet:
            print_success(str(output), len(result.provinces))


@app.command()
def locate(
    x: Annotated[float, typer.Argument(help="World-space X coordinate")],
    y: Annotated[float, typer.Argument(help="World-space Y coordinate")],
    image: Annotated[
        Path | None,
        typer.Argument(
            help="Path to the province bitmap (default: assets/provinces.bmp)",
            show_default=False,
        ),
    ] = None,
    table: Annotated[
        Path | None,
        typer.Option(
            "--table",
            "-t",
            help="TOML identifier table (default: assets/map.toml)",
        ),
    ] = None,
    max_distance: Annotated[
        float,
        typer.Option(
            "--max-distance",
            "-d",
            help="Largest step between consecutive boundary points (exclusive)",
        ),
    ] = 10.0,
) -> None:
    """Report which province contains a world-space point.

    World space has its origin at the bitmap center and Y pointing up.
    Use "--" before negative coordinates. Exits with code 1 when no
    province contains the point.
    """
    if max_distance <= 0:
        print_error(f"Invalid --max-distance: {max_distance}", details="Must be greater than 0")
        raise typer.Exit(code=1)

    settings = ProvinceMapSettings(
        sequencing=SequencingConfig(max_step_distance=max_distance),
    )
    result = _run_build(settings, image, table, quiet=True)

    point = Point(x, y)
    found = result.locator().find_all(point)
    print_location(point, found)

    if not found:
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
