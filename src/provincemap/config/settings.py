"""Configuration settings for Provincemap."""

from pathlib import Path

from pydantic import BaseModel, Field


class AssetsConfig(BaseModel):
    """Locations of the input files."""

    image_file: Path = Field(
        default=Path("assets/provinces.bmp"),
        description="Color-coded province bitmap",
    )
    table_file: Path = Field(
        default=Path("assets/map.toml"),
        description="TOML file with the [provinces.colors_to_tags] table",
    )


class ExtractionConfig(BaseModel):
    """Configuration for border extraction."""

    max_workers: int | None = Field(
        default=1,
        ge=1,
        description="Worker processes scanning row bands (None = auto, 1 = in-process)",
    )


class SequencingConfig(BaseModel):
    """Configuration for boundary path sequencing."""

    max_step_distance: float = Field(
        default=10.0,
        gt=0.0,
        description="Walk stops when no remaining point is strictly closer than this",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ProvinceMapSettings(BaseModel):
    """Main application settings."""

    assets: AssetsConfig = Field(default_factory=AssetsConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    sequencing: SequencingConfig = Field(default_factory=SequencingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ProvinceMapSettings:
    """Get default application settings."""
    return ProvinceMapSettings()
