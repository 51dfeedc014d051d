"""Province export to JSON.

The document has the form::

    {"provinces": [{"identifier": "FRA", "color": "255,0,0",
                    "points": [[x, y], ...]}, ...]}

Points are world-space coordinates in boundary path order.
"""

import json
from collections.abc import Iterable
from pathlib import Path

from provincemap.domain import Province


def write_provinces(provinces: Iterable[Province], path: Path) -> None:
    """Write provinces to a JSON file.

    Args:
        provinces: Built provinces
        path: Output file path (parent directories are created)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    document = {"provinces": [province.to_dict() for province in provinces]}
    with path.open("w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)


def read_provinces(path: Path) -> list[Province]:
    """Read provinces written by write_provinces."""
    with path.open(encoding="utf-8") as f:
        document = json.load(f)
    return [Province.from_dict(item) for item in document["provinces"]]
