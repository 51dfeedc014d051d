"""Logging utilities for Provincemap."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class BuildStats:
    """Statistics from one province build."""

    pixel_count: int = 0
    border_point_count: int = 0
    color_count: int = 0
    province_count: int = 0
    dropped_colors: list[str] = field(default_factory=list)
    discarded_point_count: int = 0
    truncated_provinces: list[str] = field(default_factory=list)
    degenerate_provinces: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate build duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and optionally a file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _installed_handlers.append(console_handler)

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("provincemap")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class BuildLogger:
    """Logger for tracking build stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = BuildStats()

    def log_image_loaded(self, source: str, width: int, height: int) -> None:
        """Log a decoded bitmap."""
        self._logger.info("Image loaded", source=source, width=width, height=height)
        self._stats.pixel_count = width * height

    def log_table_loaded(self, source: str, entries: int) -> None:
        self._logger.info("Identifier table loaded", source=source, entries=entries)

    def log_borders_extracted(
        self,
        color_count: int,
        point_count: int,
        workers: int | None,
        duration_ms: float,
    ) -> None:
        """Log border extraction results."""
        self._logger.info(
            "Borders extracted",
            colors=color_count,
            points=point_count,
            workers=workers,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.color_count = color_count
        self._stats.border_point_count = point_count

    def log_color_dropped(self, color: str, point_count: int) -> None:
        """Log a border color with no identifier."""
        self._logger.debug("Color dropped", color=color, points=point_count)
        self._stats.dropped_colors.append(color)

    def log_province_sequenced(
        self,
        identifier: str,
        input_points: int,
        path_points: int,
    ) -> None:
        """Log a sequenced province and record truncated or degenerate paths."""
        self._logger.debug(
            "Province sequenced",
            province=identifier,
            points=input_points,
            path=path_points,
        )
        self._stats.province_count += 1

        discarded = input_points - path_points
        if discarded > 0:
            self._logger.warning(
                "Path truncated",
                province=identifier,
                kept=path_points,
                discarded=discarded,
            )
            self._stats.discarded_point_count += discarded
            self._stats.truncated_provinces.append(identifier)

        if path_points < 3:
            self._logger.warning(
                "Degenerate province path",
                province=identifier,
                points=path_points,
            )
            self._stats.degenerate_provinces.append(identifier)

    @property
    def stats(self) -> BuildStats:
        """Get current build statistics."""
        return self._stats
