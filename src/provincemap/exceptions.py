"""Exception hierarchy for Provincemap."""


class ProvinceMapError(Exception):
    """Base exception for all Provincemap errors."""

    pass


class ImageError(ProvinceMapError):
    """Errors related to the province bitmap."""

    pass


class ImageLoadError(ImageError):
    """Error loading or decoding the province bitmap."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class ConfigError(ProvinceMapError):
    """Errors related to the color to identifier configuration."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file is missing, malformed or invalid."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid configuration '{path}': {details}")


class ColorKeyError(ConfigError, ValueError):
    """A color key is not of the form "r,g,b" with byte components."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid color key '{key}': {reason}")


class GeometryError(ProvinceMapError):
    """Errors in geometric calculations."""

    pass
