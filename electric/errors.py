"""
Custom exceptions for electric.
"""


class ElectricError(Exception):
    """Base exception for electric errors."""

    pass


class UnsupportedPlatformError(ElectricError, ValueError):
    """Platform name is not one of windows, linux or darwin."""

    pass


class EnvironmentLookupError(ElectricError, OSError):
    """Home or temp directory could not be determined."""

    pass


class CacheError(ElectricError):
    """Error managing the artifact cache."""

    pass


class FetchError(ElectricError):
    """Error downloading a release asset."""

    pass


class ArtifactError(ElectricError):
    """Error decompressing or unarchiving a downloaded artifact."""

    pass


class PackagingError(ElectricError):
    """Error packaging a project."""

    pass
