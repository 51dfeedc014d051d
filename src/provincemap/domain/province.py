"""Province model: an identifier plus its ordered boundary path."""

from dataclasses import dataclass, field
from typing import Any

from provincemap.domain.color import Color
from provincemap.domain.point import Point

# Border points grouped by the color of the pixel they came from.
BorderPoints = dict[Color, list[Point]]


@dataclass
class Province:
    """A named region bounded by a closed path of world-space points.

    The path is implicitly closed: the last point connects back to the
    first. It is built once at load time and treated as read-only after.

    Attributes:
        identifier: Province tag resolved from the identifier table
        color: Source color in the province bitmap
        points: Ordered boundary path
    """

    identifier: str
    color: Color
    points: list[Point] = field(default_factory=list)

    def contains(self, point: Point) -> bool:
        """Check whether a world-space point lies inside this province.

        Args:
            point: Point to test

        Returns:
            True if inside the boundary path, False otherwise (always False
            for paths with fewer than three points)
        """
        from provincemap.core.geometry import contains

        return contains(point, self.points)

    def is_degenerate(self) -> bool:
        """Check if the path has too few points to enclose an area."""
        return len(self.points) < 3

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary.

        Returns:
            Dictionary with identifier, color key and [x, y] point pairs
        """
        return {
            "identifier": self.identifier,
            "color": self.color.to_key(),
            "points": [[p.x, p.y] for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Province":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by to_dict()

        Returns:
            Province instance
        """
        r, g, b = (int(part) for part in data["color"].split(","))
        return cls(
            identifier=data["identifier"],
            color=Color(r, g, b),
            points=[Point(float(x), float(y)) for x, y in data["points"]],
        )
