"""Point queries against built provinces.

Every query is a linear pass over all provinces; each province costs one
crossing-number test over its boundary path. Provinces are never mutated
after the build, so a locator can be shared between readers.
"""

from collections.abc import Iterator, Sequence

from provincemap.core.geometry import contains
from provincemap.domain import Point, Province


class ProvinceLocator:
    """Answers "which province is under this point" queries.

    Example:
        locator = ProvinceLocator(result.provinces)
        for province, hovered in locator.hover_states(cursor):
            set_outline_visible(province.identifier, hovered)
    """

    def __init__(self, provinces: Sequence[Province]) -> None:
        self._provinces = tuple(provinces)

    @property
    def provinces(self) -> tuple[Province, ...]:
        return self._provinces

    def __len__(self) -> int:
        return len(self._provinces)

    def __iter__(self) -> Iterator[Province]:
        return iter(self._provinces)

    def hover_states(self, point: Point) -> list[tuple[Province, bool]]:
        """Test the point against every province.

        Args:
            point: World-space query point

        Returns:
            One (province, inside) pair per province, in build order
        """
        return [(province, contains(point, province.points)) for province in self._provinces]

    def find_all(self, point: Point) -> list[Province]:
        """Return every province whose boundary path contains the point."""
        return [province for province, inside in self.hover_states(point) if inside]

    def find(self, point: Point) -> Province | None:
        """Return the first province containing the point, or None."""
        for province in self._provinces:
            if contains(point, province.points):
                return province
        return None
