"""Pixel color type used to key provinces.

Two pixels belong to the same province if and only if their colors are
byte-equal. Colors whose three components are equal are sea.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB byte triple.

    Immutable and hashable so it can key the per-province point buckets.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color component {name}={value} is outside 0-255")

    @classmethod
    def from_pixel(cls, pixel: tuple[int, ...]) -> "Color":
        """Build a color from an (r, g, b) or (r, g, b, a) pixel tuple.

        Alpha is ignored.
        """
        return cls(pixel[0], pixel[1], pixel[2])

    def is_sea(self) -> bool:
        """Check whether this color is gray (r == g == b), i.e. sea."""
        return self.r == self.g == self.b

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_key(self) -> str:
        """Render the "r,g,b" form used as a configuration key."""
        return f"{self.r},{self.g},{self.b}"
