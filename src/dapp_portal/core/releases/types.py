"""Type definitions for GitHub release lookups."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReleaseInfo:
    """A published GitHub release.

    Attributes:
        tag_name: Git tag the release was cut from (e.g., "v1.4.0")
    """

    tag_name: str
