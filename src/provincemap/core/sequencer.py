"""Boundary path sequencing.

Border pixels come out of the extractor in scan order, which is not a
drawable path. This module reorders them with a greedy nearest-neighbor
walk:

1. Sort points by Y, then X, and start from the first one.
2. Repeatedly append the closest remaining point strictly closer than
   max_distance to the last placed point. Ties go to the earliest point
   in sorted order.
3. Stop as soon as no remaining point is close enough. Points left over
   (other fragments of the same color) are discarded.

The walk is O(n^2) in the number of border points of one province.
"""

from provincemap.domain import BorderPoints, Point

DEFAULT_MAX_STEP_DISTANCE = 10.0


def sequence(
    points: list[Point],
    max_distance: float = DEFAULT_MAX_STEP_DISTANCE,
) -> list[Point]:
    """Order border points into a single path.

    Args:
        points: Border points of one color, in any order
        max_distance: Steps must be strictly shorter than this

    Returns:
        Ordered path starting at the lowest (Y, X) point. Lists of zero or
        one point are returned unchanged.

    Examples:
        >>> sequence([Point(1, 0), Point(0, 0), Point(0, 1)])
        [Point(x=0, y=0), Point(x=1, y=0), Point(x=0, y=1)]
    """
    if len(points) <= 1:
        return list(points)

    remaining = sorted(points, key=lambda p: (p.y, p.x))
    path = [remaining.pop(0)]

    while remaining:
        last = path[-1]
        best_index: int | None = None
        best_distance = max_distance

        for index, candidate in enumerate(remaining):
            distance = last.distance_to(candidate)
            if distance < best_distance:
                best_index = index
                best_distance = distance

        if best_index is None:
            break

        path.append(remaining.pop(best_index))

    return path


def sequence_all(
    border_points: BorderPoints,
    max_distance: float = DEFAULT_MAX_STEP_DISTANCE,
) -> None:
    """Sequence every bucket in place.

    Args:
        border_points: Mapping from color to border points; each list is
            replaced by its sequenced path
        max_distance: Steps must be strictly shorter than this
    """
    for color, points in border_points.items():
        border_points[color] = sequence(points, max_distance)
