"""Color to province identifier table.

The table is read from a TOML document of the form::

    [provinces.colors_to_tags]
    "255,0,0" = "FRA"
    "0,0,255" = "ENG"

Each key is a comma-separated "r,g,b" byte triple. Colors that appear in
the bitmap but not in the table are not modeled and produce no province.
"""

import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from provincemap.domain import Color
from provincemap.exceptions import ColorKeyError, ConfigParseError

_BYTE_PATTERN = re.compile(r"\+?[0-9]+")

# Location reported for tables built from in-memory mappings
IN_MEMORY_SOURCE = "<mapping>"


def parse_color_key(key: str) -> Color:
    """Parse an "r,g,b" configuration key into a Color.

    Whitespace around each component is ignored.

    Args:
        key: Key string, e.g. "255,0,0"

    Returns:
        Parsed Color

    Raises:
        ColorKeyError: If the key does not have exactly three decimal
            components in the range 0-255

    Examples:
        >>> parse_color_key("255, 0, 0")
        Color(r=255, g=0, b=0)
    """
    parts = key.split(",")
    if len(parts) != 3:
        raise ColorKeyError(key, f"expected 3 comma-separated components, got {len(parts)}")

    components: list[int] = []
    for part in parts:
        text = part.strip()
        if not _BYTE_PATTERN.fullmatch(text):
            raise ColorKeyError(key, f"component '{text}' is not a decimal number")
        value = int(text)
        if value > 255:
            raise ColorKeyError(key, f"component {value} is outside 0-255")
        components.append(value)

    return Color(*components)


class IdentifierTable(BaseModel):
    """Mapping from exact pixel color to province identifier.

    Validated from "r,g,b" string keys. Keys must be disjoint: two keys
    that parse to the same color are rejected.
    """

    model_config = ConfigDict(frozen=True)

    colors_to_tags: dict[tuple[int, int, int], str] = Field(
        default_factory=dict,
        description="Province identifier per (r, g, b) color",
    )

    @field_validator("colors_to_tags", mode="before")
    @classmethod
    def _parse_color_keys(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            raise ValueError('expected a table of "r,g,b" = "TAG" entries')

        parsed: dict[tuple[int, int, int], Any] = {}
        for key, tag in value.items():
            if isinstance(key, Color):
                color = key
            elif isinstance(key, str):
                color = parse_color_key(key)
            else:
                raise ValueError(f"color key {key!r} must be a string")

            if color.to_tuple() in parsed:
                raise ValueError(f"color key '{key}' duplicates color {color.to_key()}")
            parsed[color.to_tuple()] = tag
        return parsed

    def lookup(self, color: Color) -> str | None:
        """Return the identifier for a color, or None if unmapped."""
        return self.colors_to_tags.get(color.to_tuple())

    def colors(self) -> list[Color]:
        return [Color(*key) for key in self.colors_to_tags]

    def __contains__(self, color: object) -> bool:
        return isinstance(color, Color) and color.to_tuple() in self.colors_to_tags

    def __len__(self) -> int:
        return len(self.colors_to_tags)


def _describe_validation_error(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{location}: {detail['msg']}")
    return "; ".join(messages)


def identifier_table_from_mapping(
    mapping: Mapping[Any, Any], source: str = IN_MEMORY_SOURCE
) -> IdentifierTable:
    """Build an identifier table from an in-memory mapping.

    Args:
        mapping: "r,g,b" keys (or Color instances) to identifier strings
        source: Name reported in error messages

    Returns:
        Validated IdentifierTable

    Raises:
        ConfigParseError: If a key is malformed or an identifier is not a string
    """
    try:
        return IdentifierTable(colors_to_tags=mapping)
    except ValidationError as e:
        raise ConfigParseError(source, _describe_validation_error(e)) from e


def load_identifier_table(path: Path) -> IdentifierTable:
    """Load the identifier table from a TOML configuration file.

    Args:
        path: Path to the TOML file holding [provinces.colors_to_tags]

    Returns:
        Validated IdentifierTable

    Raises:
        ConfigParseError: If the file is missing, is not valid TOML, lacks
            the table, or contains a malformed key
    """
    if not path.exists():
        raise ConfigParseError(str(path), "file not found")

    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(str(path), f"TOML syntax error: {e}") from e
    except OSError as e:
        raise ConfigParseError(str(path), str(e)) from e

    provinces = document.get("provinces")
    if not isinstance(provinces, dict) or "colors_to_tags" not in provinces:
        raise ConfigParseError(str(path), "missing [provinces.colors_to_tags] table")

    return identifier_table_from_mapping(provinces["colors_to_tags"], source=str(path))
