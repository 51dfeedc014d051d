"""Color to province resolution.

Pairs each border point bucket with its province identifier. Buckets
whose color is missing from the identifier table are dropped: they are
provinces that are not modeled yet, not errors.
"""

from provincemap.domain import BorderPoints, Color, Province
from provincemap.io.table import IdentifierTable


def resolve(border_points: BorderPoints, table: IdentifierTable) -> list[Province]:
    """Build one Province per mapped color.

    The provinces share the bucket lists; points are not yet sequenced.

    Args:
        border_points: Output of the border extractor
        table: Color to identifier table

    Returns:
        Provinces in bucket order
    """
    provinces: list[Province] = []
    for color, points in border_points.items():
        identifier = table.lookup(color)
        if identifier is None:
            continue
        provinces.append(Province(identifier=identifier, color=color, points=points))
    return provinces


def unmapped_colors(border_points: BorderPoints, table: IdentifierTable) -> list[Color]:
    """List bucket colors that have no identifier in the table."""
    return [color for color in border_points if table.lookup(color) is None]
