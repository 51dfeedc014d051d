"""Geometric predicates on boundary paths.

All functions are pure and only read their arguments, so they are safe to
call from any number of threads against the same built provinces.
"""

from collections.abc import Sequence

from provincemap.domain import Point
from provincemap.exceptions import GeometryError


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return a.distance_to(b)


def contains(point: Point, polygon: Sequence[Point]) -> bool:
    """Determine if a point is inside a polygon using ray casting.

    Casts a horizontal ray from the point toward +X and counts the edges it
    crosses. The polygon is implicitly closed. Odd count means inside.

    Boundary convention: an edge counts when exactly one endpoint is
    strictly above the point and the crossing lies strictly right of it.
    Points on bottom or left edges are therefore inside and points on top
    or right edges are outside.

    Args:
        point: The point to test
        polygon: Ordered boundary path

    Returns:
        True if point is inside polygon, False otherwise (always False for
        fewer than three vertices)

    Examples:
        >>> square = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]
        >>> contains(Point(0.5, 0.5), square)
        True
        >>> contains(Point(2, 2), square)
        False
    """
    n = len(polygon)
    if n < 3:
        return False

    crossings = 0
    j = n - 1

    for i in range(n):
        v1 = polygon[i]
        v2 = polygon[j]

        # Straddle check guarantees v2.y != v1.y for the division
        if (v1.y > point.y) != (v2.y > point.y) and (
            point.x < (v2.x - v1.x) * (point.y - v1.y) / (v2.y - v1.y) + v1.x
        ):
            crossings += 1

        j = i

    return crossings % 2 == 1


def bounding_box(polygon: Sequence[Point]) -> tuple[float, float, float, float]:
    """Calculate the bounding box of a path.

    Returns:
        Tuple of (min_x, min_y, max_x, max_y)

    Raises:
        GeometryError: If the path is empty
    """
    if not polygon:
        raise GeometryError("Cannot compute bounding box of an empty path")

    xs = [p.x for p in polygon]
    ys = [p.y for p in polygon]
    return (min(xs), min(ys), max(xs), max(ys))
