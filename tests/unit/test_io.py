"""Unit tests for the I/O layer.

Tests for RasterImage, load_image, the identifier table and JSON export.
"""

from pathlib import Path

import pytest
from PIL import Image

from provincemap.domain import Color, Point, Province
from provincemap.exceptions import ColorKeyError, ConfigParseError, ImageLoadError
from provincemap.io import (
    IdentifierTable,
    RasterImage,
    identifier_table_from_mapping,
    load_identifier_table,
    load_image,
    parse_color_key,
    read_provinces,
    write_provinces,
)


class TestRasterImage:
    """Tests for RasterImage."""

    def test_from_rows(self):
        image = RasterImage.from_rows([
            [(1, 2, 3), (4, 5, 6)],
            [(7, 8, 9), (10, 11, 12, 255)],
        ])
        assert (image.width, image.height) == (2, 2)
        assert image.get_pixel(1, 0) == (4, 5, 6)
        assert image.get_pixel(1, 1) == (10, 11, 12)
        assert image.color_at(0, 1) == Color(7, 8, 9)

    def test_from_rows_ragged(self):
        """Test that rows of different lengths are rejected."""
        with pytest.raises(ValueError, match="Row 1"):
            RasterImage.from_rows([[(0, 0, 1)] * 2, [(0, 0, 1)]])

    def test_pixel_count_mismatch(self):
        with pytest.raises(ValueError, match="Expected 4 pixels"):
            RasterImage(width=2, height=2, pixels=[(0, 0, 1)])

    def test_get_pixel_out_of_bounds(self):
        image = RasterImage.from_rows([[(0, 0, 1)]])
        assert image.in_bounds(0, 0)
        assert not image.in_bounds(1, 0)
        with pytest.raises(IndexError):
            image.get_pixel(0, -1)

    def test_from_pil_rgba(self):
        """Test that Pillow RGBA images are converted and alpha dropped."""
        pil = Image.new("RGBA", (3, 2), (255, 0, 0, 0))
        pil.putpixel((2, 1), (0, 0, 255, 255))

        image = RasterImage.from_pil(pil)

        assert (image.width, image.height) == (3, 2)
        assert image.get_pixel(0, 0) == (255, 0, 0)
        assert image.get_pixel(2, 1) == (0, 0, 255)

    def test_from_pil_palette(self):
        pil = Image.new("RGB", (2, 1), (0, 204, 0)).convert("P")
        image = RasterImage.from_pil(pil)
        assert image.get_pixel(1, 0) == (0, 204, 0)


class TestLoadImage:
    """Tests for load_image."""

    def test_load_png(self, tmp_path: Path):
        path = tmp_path / "provinces.png"
        pil = Image.new("RGB", (4, 3), (128, 128, 128))
        pil.putpixel((1, 2), (255, 0, 0))
        pil.save(path)

        image = load_image(path)

        assert (image.width, image.height) == (4, 3)
        assert image.get_pixel(1, 2) == (255, 0, 0)

    def test_load_bmp(self, tmp_path: Path):
        path = tmp_path / "provinces.bmp"
        Image.new("RGB", (2, 2), (0, 0, 255)).save(path)
        assert load_image(path).get_pixel(1, 1) == (0, 0, 255)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ImageLoadError, match="file not found"):
            load_image(tmp_path / "missing.bmp")

    def test_directory(self, tmp_path: Path):
        with pytest.raises(ImageLoadError, match="not a file"):
            load_image(tmp_path)

    def test_corrupt_file(self, tmp_path: Path):
        """Test that undecodable data is a load failure."""
        path = tmp_path / "broken.bmp"
        path.write_bytes(b"definitely not an image")

        with pytest.raises(ImageLoadError) as exc_info:
            load_image(path)

        assert exc_info.value.path == str(path)


class TestParseColorKey:
    """Tests for parse_color_key."""

    def test_valid_key(self):
        assert parse_color_key("255,0,0") == Color(255, 0, 0)

    def test_whitespace_trimmed(self):
        assert parse_color_key(" 12 , 34 ,56 ") == Color(12, 34, 56)

    @pytest.mark.parametrize(
        "key",
        ["255,0", "255,0,0,0", "a,b,c", "256,0,0", "-1,0,0", "1.5,0,0", "", "1,,2"],
    )
    def test_invalid_key_names_offender(self, key):
        """Test that the error identifies the offending key string."""
        with pytest.raises(ColorKeyError) as exc_info:
            parse_color_key(key)

        assert exc_info.value.key == key
        assert f"'{key}'" in str(exc_info.value)

    def test_color_key_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_color_key("nope")


class TestIdentifierTable:
    """Tests for IdentifierTable construction and lookup."""

    def test_lookup(self):
        table = identifier_table_from_mapping({"255,0,0": "FRA", "0,0,255": "ENG"})

        assert table.lookup(Color(255, 0, 0)) == "FRA"
        assert table.lookup(Color(0, 255, 0)) is None
        assert Color(0, 0, 255) in table
        assert Color(0, 255, 0) not in table
        assert len(table) == 2
        assert set(table.colors()) == {Color(255, 0, 0), Color(0, 0, 255)}

    def test_color_instances_as_keys(self):
        table = IdentifierTable(colors_to_tags={Color(1, 2, 3): "ABC"})
        assert table.lookup(Color(1, 2, 3)) == "ABC"

    def test_malformed_key(self):
        with pytest.raises(ConfigParseError, match="255,0"):
            identifier_table_from_mapping({"255,0": "FRA"})

    def test_duplicate_colors_rejected(self):
        """Test that keys must resolve to distinct colors."""
        with pytest.raises(ConfigParseError, match="duplicates"):
            identifier_table_from_mapping({"1,2,3": "A", "1, 2, 3": "B"})

    def test_non_string_identifier(self):
        with pytest.raises(ConfigParseError):
            identifier_table_from_mapping({"1,2,3": 5})


class TestLoadIdentifierTable:
    """Tests for load_identifier_table."""

    def write(self, tmp_path: Path, content: str) -> Path:
        path = tmp_path / "map.toml"
        path.write_text(content, encoding="utf-8")
        return path

    def test_load(self, tmp_path: Path):
        path = self.write(
            tmp_path,
            '[provinces.colors_to_tags]\n"255,0,0" = "FRA"\n"0,0,255" = "ENG"\n',
        )
        table = load_identifier_table(path)
        assert table.lookup(Color(255, 0, 0)) == "FRA"
        assert table.lookup(Color(0, 0, 255)) == "ENG"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigParseError, match="file not found"):
            load_identifier_table(tmp_path / "missing.toml")

    def test_syntax_error(self, tmp_path: Path):
        """Test that TOML syntax errors report their location."""
        path = self.write(tmp_path, '[provinces.colors_to_tags\n"255,0,0" = "FRA"\n')

        with pytest.raises(ConfigParseError) as exc_info:
            load_identifier_table(path)

        assert "TOML syntax error" in exc_info.value.details
        assert "line 1" in exc_info.value.details

    def test_missing_table(self, tmp_path: Path):
        path = self.write(tmp_path, '[other]\nkey = "value"\n')
        with pytest.raises(ConfigParseError, match="colors_to_tags"):
            load_identifier_table(path)

    def test_bad_key_in_file(self, tmp_path: Path):
        """Test that a malformed key is reported with the file path."""
        path = self.write(tmp_path, '[provinces.colors_to_tags]\n"255,x,0" = "FRA"\n')

        with pytest.raises(ConfigParseError) as exc_info:
            load_identifier_table(path)

        assert exc_info.value.path == str(path)
        assert "255,x,0" in exc_info.value.details

    def test_table_must_be_a_table(self, tmp_path: Path):
        path = self.write(tmp_path, '[provinces]\ncolors_to_tags = "FRA"\n')
        with pytest.raises(ConfigParseError):
            load_identifier_table(path)


class TestProvinceExport:
    """Tests for write_provinces and read_provinces."""

    def test_write_and_read(self, tmp_path: Path):
        provinces = [
            Province("FRA", Color(255, 0, 0), [Point(-1.0, 2.0), Point(0.0, 2.0)]),
            Province("ENG", Color(0, 0, 255), []),
        ]
        path = tmp_path / "out" / "provinces.json"

        write_provinces(provinces, path)
        restored = read_provinces(path)

        assert [p.identifier for p in restored] == ["FRA", "ENG"]
        assert restored[0].points == provinces[0].points
        assert restored[1].color == Color(0, 0, 255)
