"""Configuration management for provincemap.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- AssetsConfig: Input file locations
- ExtractionConfig: Border extraction settings
- SequencingConfig: Boundary path settings
- LoggingConfig: Logging settings
- ProvinceMapSettings: Main application settings
"""

from provincemap.config.settings import (
    AssetsConfig,
    ExtractionConfig,
    LoggingConfig,
    ProvinceMapSettings,
    SequencingConfig,
    get_default_settings,
)

__all__ = [
    "AssetsConfig",
    "ExtractionConfig",
    "LoggingConfig",
    "ProvinceMapSettings",
    "SequencingConfig",
    "get_default_settings",
]
