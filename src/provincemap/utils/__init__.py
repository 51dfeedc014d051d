"""Utility functions for provincemap.

This module provides utility functions including:

- Logging setup and configuration
- Build statistics collection
"""

from provincemap.utils.logging import (
    BuildLogger,
    BuildStats,
    configure_logging,
)

__all__ = [
    "BuildLogger",
    "BuildStats",
    "configure_logging",
]
