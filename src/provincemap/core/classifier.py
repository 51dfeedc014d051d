"""Border pixel classification.

A pixel is on a province border when at least one of its in-bounds
4-neighbors has a different color. Sea (gray) neighbors always differ
from a province pixel, so coasts are borders too. Neighbors outside the
image are skipped: a pixel on the image edge whose existing neighbors all
match is not a border.
"""

from provincemap.io.raster import Pixel, RasterImage

# Up, right, down, left
_NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def is_sea(pixel: tuple[int, ...]) -> bool:
    """Check whether a pixel is sea, i.e. gray (r == g == b).

    Sea pixels are never the source of a province.
    """
    return pixel[0] == pixel[1] == pixel[2]


def neighbors(image: RasterImage, x: int, y: int) -> list[tuple[int, int]]:
    """Return the in-bounds 4-neighbors of (x, y).

    Args:
        image: Image providing the bounds
        x: Pixel column
        y: Pixel row

    Returns:
        Neighbor coordinates in up, right, down, left order, skipping those
        outside the image (no wraparound)
    """
    return [
        (x + dx, y + dy)
        for dx, dy in _NEIGHBOR_OFFSETS
        if image.in_bounds(x + dx, y + dy)
    ]


def is_border(image: RasterImage, x: int, y: int) -> bool:
    """Decide whether the pixel at (x, y) lies on a province border.

    Args:
        image: Decoded province bitmap
        x: Pixel column, in bounds
        y: Pixel row, in bounds

    Returns:
        True if any in-bounds neighbor differs in color or is sea
    """
    color: Pixel = image.get_pixel(x, y)
    for nx, ny in neighbors(image, x, y):
        neighbor = image.get_pixel(nx, ny)
        if neighbor != color or is_sea(neighbor):
            return True
    return False
