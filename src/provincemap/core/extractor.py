"""Border extraction over the whole province bitmap.

Scans the image row by row, keeps the border pixels of every non-sea
color and converts them to world space. The result groups points by
source color; order inside a bucket follows the scan and must not be
relied upon.

Extraction can be split into row bands and run in worker processes. Band
results are merged in band order, so a parallel run yields the same
buckets as a serial one.
"""

import os
from collections.abc import Iterable
from concurrent.futures import ProcessPoolExecutor

from provincemap.core.classifier import is_border, is_sea
from provincemap.domain import BorderPoints, Color, Point
from provincemap.io.raster import Pixel, RasterImage


def world_position(x: int, y: int, width: int, height: int) -> Point:
    """Map pixel coordinates to world space.

    The origin moves to the image center and the Y axis is flipped so it
    points up (row 0 is the top of the image). Halving uses integer
    division.

    Args:
        x: Pixel column
        y: Pixel row
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        World-space point

    Examples:
        >>> world_position(0, 0, 4, 4)
        Point(x=-2.0, y=2.0)
    """
    return Point(float(x - width // 2), float((height - y) - height // 2))


def extract_borders(
    image: RasterImage,
    row_start: int = 0,
    row_end: int | None = None,
) -> BorderPoints:
    """Collect border points of every province color.

    Args:
        image: Decoded province bitmap
        row_start: First row to scan
        row_end: Row after the last one to scan (defaults to image height)

    Returns:
        Mapping from color to world-space border points in scan order
    """
    if row_end is None:
        row_end = image.height

    border_points: BorderPoints = {}
    colors: dict[Pixel, Color] = {}

    for y in range(row_start, row_end):
        for x in range(image.width):
            pixel = image.get_pixel(x, y)

            if is_sea(pixel):
                continue

            if not is_border(image, x, y):
                continue

            color = colors.get(pixel)
            if color is None:
                color = colors[pixel] = Color.from_pixel(pixel)

            border_points.setdefault(color, []).append(
                world_position(x, y, image.width, image.height)
            )

    return border_points


def merge_border_points(parts: Iterable[BorderPoints]) -> BorderPoints:
    """Merge per-band extraction results.

    Buckets of the same color are concatenated in the order the parts are
    given.

    Args:
        parts: Band results, top band first

    Returns:
        Combined mapping from color to border points
    """
    merged: BorderPoints = {}
    for part in parts:
        for color, points in part.items():
            merged.setdefault(color, []).extend(points)
    return merged


def row_bands(height: int, band_count: int) -> list[tuple[int, int]]:
    """Split rows 0..height into at most band_count contiguous bands."""
    if height <= 0:
        return []
    band_count = max(1, min(band_count, height))
    size, extra = divmod(height, band_count)
    bands = []
    start = 0
    for index in range(band_count):
        end = start + size + (1 if index < extra else 0)
        bands.append((start, end))
        start = end
    return bands


def _extract_band(image: RasterImage, row_start: int, row_end: int) -> BorderPoints:
    """Top-level band worker, picklable for ProcessPoolExecutor."""
    return extract_borders(image, row_start, row_end)


def extract_borders_parallel(
    image: RasterImage,
    max_workers: int | None = None,
) -> BorderPoints:
    """Extract borders with row bands processed in worker processes.

    Args:
        image: Decoded province bitmap
        max_workers: Maximum worker processes (None = one per CPU). A value
            of 1 scans in-process.

    Returns:
        Same mapping as extract_borders(image)
    """
    workers = max_workers if max_workers is not None else os.cpu_count() or 1
    if workers <= 1 or image.height <= 1:
        return extract_borders(image)

    bands = row_bands(image.height, workers)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        parts = executor.map(
            _extract_band,
            [image] * len(bands),
            [start for start, _ in bands],
            [end for _, end in bands],
        )
        return merge_border_points(parts)
