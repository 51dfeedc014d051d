"""Province build orchestration.

This module runs the full load-time pipeline once:

1. Load the identifier table and decode the province bitmap
2. Extract border points per color (optionally in worker processes)
3. Resolve colors to province identifiers, dropping unmapped colors
4. Sequence each province's points into a boundary path

The build is all-or-nothing: any load failure propagates and no partial
result is returned.
"""

import time
from dataclasses import dataclass
from pathlib import Path

from provincemap.config import ProvinceMapSettings
from provincemap.core.extractor import extract_borders_parallel
from provincemap.core.locator import ProvinceLocator
from provincemap.core.resolver import resolve, unmapped_colors
from provincemap.core.sequencer import sequence
from provincemap.domain import Province
from provincemap.io import (
    IdentifierTable,
    RasterImage,
    load_identifier_table,
    load_image,
)
from provincemap.utils import BuildLogger, BuildStats, configure_logging


@dataclass
class BuildResult:
    """Provinces produced by one build and the statistics of that build."""

    provinces: list[Province]
    stats: BuildStats

    def identifiers(self) -> list[str]:
        return [province.identifier for province in self.provinces]

    def locator(self) -> ProvinceLocator:
        """Create a locator for point queries against the built provinces."""
        return ProvinceLocator(self.provinces)


class ProvinceBuilder:
    """Builds provinces from a province bitmap and an identifier table.

    Example:
        settings = ProvinceMapSettings()
        builder = ProvinceBuilder(settings)
        result = builder.build(
            image_path=Path("assets/provinces.bmp"),
            table_path=Path("assets/map.toml"),
        )
        province = result.locator().find(Point(12.0, -40.0))
    """

    def __init__(self, config: ProvinceMapSettings, quiet: bool = False) -> None:
        """Initialize the builder with configuration.

        Args:
            config: Provincemap settings
            quiet: Suppress console log output except errors
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )

    def build(
        self,
        image_path: Path | None = None,
        table_path: Path | None = None,
    ) -> BuildResult:
        """Load the input files and build provinces.

        Args:
            image_path: Province bitmap (defaults to the configured asset)
            table_path: Identifier table TOML (defaults to the configured asset)

        Returns:
            BuildResult with provinces and statistics

        Raises:
            ConfigParseError: If the identifier table cannot be parsed
            ImageLoadError: If the bitmap cannot be decoded
        """
        if image_path is None:
            image_path = self.config.assets.image_file
        if table_path is None:
            table_path = self.config.assets.table_file

        self.logger.info(
            "Starting province build",
            image=str(image_path),
            table=str(table_path),
        )

        table = load_identifier_table(table_path)
        image = load_image(image_path)

        return self.build_from(
            image,
            table,
            image_source=str(image_path),
            table_source=str(table_path),
        )

    def build_from(
        self,
        image: RasterImage,
        table: IdentifierTable,
        image_source: str = "<memory>",
        table_source: str = "<memory>",
    ) -> BuildResult:
        """Build provinces from an already decoded image and table.

        Args:
            image: Decoded province bitmap
            table: Color to identifier table
            image_source: Name of the image used in log events
            table_source: Name of the table used in log events

        Returns:
            BuildResult with provinces and statistics
        """
        build_logger = BuildLogger(self.logger)
        stats = build_logger.stats
        stats.start_time = time.time()

        build_logger.log_table_loaded(table_source, len(table))
        build_logger.log_image_loaded(image_source, image.width, image.height)

        # Extract
        max_workers = self.config.extraction.max_workers
        extract_start = time.time()
        border_points = extract_borders_parallel(image, max_workers)
        build_logger.log_borders_extracted(
            color_count=len(border_points),
            point_count=sum(len(points) for points in border_points.values()),
            workers=max_workers,
            duration_ms=(time.time() - extract_start) * 1000,
        )

        # Resolve
        for color in unmapped_colors(border_points, table):
            build_logger.log_color_dropped(color.to_key(), len(border_points[color]))
        provinces = resolve(border_points, table)

        # Sequence
        max_distance = self.config.sequencing.max_step_distance
        for province in provinces:
            input_points = len(province.points)
            province.points = sequence(province.points, max_distance)
            build_logger.log_province_sequenced(
                province.identifier,
                input_points=input_points,
                path_points=len(province.points),
            )

        stats.end_time = time.time()

        self.logger.info(
            "Build complete",
            provinces=stats.province_count,
            dropped_colors=len(stats.dropped_colors),
            discarded_points=stats.discarded_point_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return BuildResult(provinces=provinces, stats=stats)
