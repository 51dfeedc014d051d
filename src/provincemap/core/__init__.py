"""Core processing algorithms for provincemap.

This module contains the core algorithms for:

- Border classification (4-neighbor comparison, sea detection)
- Border extraction (full raster scan, world-space mapping)
- Identity resolution (color to identifier lookup)
- Path sequencing (greedy nearest-neighbor walk)
- Containment testing (crossing-number ray casting)

The algorithm functions are pure; only ProvinceBuilder touches files.

Key functions:
- is_border: Classify a single pixel
- extract_borders: Collect border points per color
- resolve: Pair color buckets with province identifiers
- sequence: Order a bucket into a boundary path
- contains: Point-in-polygon test

Key classes:
- ProvinceBuilder: Runs the load-time pipeline
- ProvinceLocator: Answers point queries against built provinces
"""

from provincemap.core.builder import BuildResult, ProvinceBuilder
from provincemap.core.classifier import is_border, is_sea, neighbors
from provincemap.core.extractor import (
    extract_borders,
    extract_borders_parallel,
    merge_border_points,
    world_position,
)
from provincemap.core.geometry import bounding_box, contains, distance
from provincemap.core.locator import ProvinceLocator
from provincemap.core.resolver import resolve, unmapped_colors
from provincemap.core.sequencer import DEFAULT_MAX_STEP_DISTANCE, sequence, sequence_all

__all__ = [
    "DEFAULT_MAX_STEP_DISTANCE",
    # Builder classes
    "BuildResult",
    "ProvinceBuilder",
    # Query classes
    "ProvinceLocator",
    # Geometry functions
    "bounding_box",
    "contains",
    "distance",
    # Extraction functions
    "extract_borders",
    "extract_borders_parallel",
    "is_border",
    "is_sea",
    "merge_border_points",
    "neighbors",
    # Resolution and sequencing
    "resolve",
    "sequence",
    "sequence_all",
    "unmapped_colors",
    "world_position",
]
