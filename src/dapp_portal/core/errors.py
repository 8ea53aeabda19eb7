"""Errors raised while resolving the latest Portal release."""


class LatestVersionError(Exception):
    """Base class for failures resolving the latest release version."""


class ReleaseNetworkError(LatestVersionError):
    """Raised when the release API cannot be reached or returns a non-success status."""


class ReleaseParseError(LatestVersionError):
    """Raised when the release API payload has no usable tag name."""
