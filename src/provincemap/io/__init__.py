"""I/O layer for provincemap.

This module handles everything that touches files: decoding the province
bitmap with Pillow, parsing the color to identifier table from TOML and
exporting built provinces.

Key classes:
- RasterImage: Decoded RGB pixel grid
- IdentifierTable: Validated color to identifier mapping

Key functions:
- load_image: Decode a bitmap into a RasterImage
- load_identifier_table: Parse the TOML identifier table
- parse_color_key: Parse a single "r,g,b" key
- write_provinces / read_provinces: JSON export
"""

from provincemap.io.raster import RasterImage, load_image
from provincemap.io.table import (
    IdentifierTable,
    identifier_table_from_mapping,
    load_identifier_table,
    parse_color_key,
)
from provincemap.io.writer import read_provinces, write_provinces

__all__ = [
    "IdentifierTable",
    "RasterImage",
    "identifier_table_from_mapping",
    "load_identifier_table",
    "load_image",
    "parse_color_key",
    "read_provinces",
    "write_provinces",
]
