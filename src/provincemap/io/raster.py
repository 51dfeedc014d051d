"""Decoded province bitmap.

This module provides RasterImage, an in-memory RGB pixel grid with O(1)
pixel lookup, and load_image for decoding bitmaps with Pillow.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from provincemap.domain import Color
from provincemap.exceptions import ImageLoadError

Pixel = tuple[int, int, int]


@dataclass(frozen=True)
class RasterImage:
    """A decoded bitmap stored as row-major RGB tuples.

    Row 0 is the top of the image. Alpha is dropped at construction, so
    every pixel is an (r, g, b) tuple.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        pixels: width * height pixel tuples in row-major order
    """

    width: int
    height: int
    pixels: Sequence[Pixel]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("Image dimensions must be non-negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the (r, g, b) tuple at pixel coordinates (x, y).

        Raises:
            IndexError: If (x, y) lies outside the image
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def color_at(self, x: int, y: int) -> Color:
        """Return the pixel at (x, y) as a Color."""
        return Color.from_pixel(self.get_pixel(x, y))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[tuple[int, ...]]]) -> "RasterImage":
        """Build an image from a list of pixel rows (top row first).

        Args:
            rows: Rows of (r, g, b) or (r, g, b, a) tuples, all the same length

        Returns:
            RasterImage instance

        Raises:
            ValueError: If rows have different lengths
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        pixels: list[Pixel] = []
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {index} has {len(row)} pixels, expected {width}"
                )
            pixels.extend((p[0], p[1], p[2]) for p in row)
        return cls(width=width, height=height, pixels=pixels)

    @classmethod
    def from_pil(cls, image: Image.Image) -> "RasterImage":
        """Build an image from a Pillow image of any mode.

        Args:
            image: Pillow image (palette, RGBA, etc. are converted to RGB)

        Returns:
            RasterImage instance
        """
        rgb = image.convert("RGB")
        data = rgb.tobytes()
        pixels = list(zip(data[0::3], data[1::3], data[2::3]))
        return cls(width=rgb.width, height=rgb.height, pixels=pixels)


def load_image(path: Path) -> RasterImage:
    """Load and decode a province bitmap.

    Args:
        path: Path to a BMP/PNG/... file readable by Pillow

    Returns:
        Decoded RasterImage

    Raises:
        ImageLoadError: If the file is missing, corrupt or unsupported
    """
    if not path.exists():
        raise ImageLoadError(str(path), "file not found")
    if not path.is_file():
        raise ImageLoadError(str(path), "not a file")

    try:
        with Image.open(path) as image:
            return RasterImage.from_pil(image)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageLoadError(str(path), str(e)) from e
