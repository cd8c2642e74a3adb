"""
Exception classes for the version catalog.
"""


class VersionCatalogError(Exception):
    """Base exception for all version catalog errors."""

    pass


class CorruptedVersionDataError(VersionCatalogError):
    """Raised when no version at all can be resolved as the default."""

    def __init__(self, message: str = "Corrupted version data"):
        super().__init__(message)


class VersionFetchError(VersionCatalogError):
    """Raised when the remote registry could not be read."""

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        if reason:
            super().__init__(f"Failed to fetch versions from {url}: {reason}")
        else:
            super().__init__(f"Failed to fetch versions from {url}")
