"""Domain models for provincemap.

This module contains the value types that flow through the extraction
pipeline. All of them are plain dataclasses with no dependency on Pillow,
so they can be pickled to worker processes and serialized for export.

Key classes:
- Color: RGB byte triple keying a province in the bitmap
- Point: World-space 2D point
- Province: Identifier plus ordered boundary path
"""

from provincemap.domain.color import Color
from provincemap.domain.point import Point
from provincemap.domain.province import BorderPoints, Province

__all__: list[str] = [
    "BorderPoints",
    "Color",
    "Point",
    "Province",
]
