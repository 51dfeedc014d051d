"""Shared fixtures: a small two-province map.

Layout (10x8 pixels, gray sea everywhere else):
- red "FRA" block at pixels x 1..4, y 1..6
- blue "ENG" block at pixels x 5..8, y 1..6, touching the red block
- one green pixel at (0, 0) that the table does not map

In world space (origin at the image center, Y up) the red block spans
x -4..-1 and the blue block x 0..3, both over y -2..3.
"""

from pathlib import Path

import pytest
from PIL import Image

from provincemap.io import IdentifierTable, RasterImage, identifier_table_from_mapping

RED = (255, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
SEA = (128, 128, 128)

WIDTH = 10
HEIGHT = 8

TABLE_TOML = """\
[provinces.colors_to_tags]
"255,0,0" = "FRA"
"0, 0, 255" = "ENG"
"10,20,30" = "XXX"
"""


def map_rows() -> list[list[tuple[int, int, int]]]:
    rows = []
    for y in range(HEIGHT):
        row = []
        for x in range(WIDTH):
            if (x, y) == (0, 0):
                row.append(GREEN)
            elif 1 <= y <= 6 and 1 <= x <= 4:
                row.append(RED)
            elif 1 <= y <= 6 and 5 <= x <= 8:
                row.append(BLUE)
            else:
                row.append(SEA)
        rows.append(row)
    return rows


@pytest.fixture
def map_image() -> RasterImage:
    return RasterImage.from_rows(map_rows())


@pytest.fixture
def map_table() -> IdentifierTable:
    return identifier_table_from_mapping(
        {"255,0,0": "FRA", "0,0,255": "ENG", "10,20,30": "XXX"}
    )


@pytest.fixture
def map_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write the map as PNG plus its TOML table and return both paths."""
    image_path = tmp_path / "provinces.png"
    pil = Image.new("RGB", (WIDTH, HEIGHT))
    pil.putdata([pixel for row in map_rows() for pixel in row])
    pil.save(image_path)

    table_path = tmp_path / "map.toml"
    table_path.write_text(TABLE_TOML, encoding="utf-8")

    return image_path, table_path
