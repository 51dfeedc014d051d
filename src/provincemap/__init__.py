"""Provincemap - Extract province boundaries from color-coded maps.

Provincemap reads a bitmap where every province is painted in its own flat
color, finds the border pixels of each province, orders them into closed
boundary paths and answers point-in-province queries against those paths.

Example:
    $ provincemap build assets/provinces.bmp --table assets/map.toml

Gray pixels (equal red, green and blue) are treated as sea and never
produce a province.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
