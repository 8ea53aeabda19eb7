"""GitHub release lookups for the Portal distribution."""

from dapp_portal.core.releases.abc import GitHubReleases
from dapp_portal.core.releases.types import ReleaseInfo

__all__ = ["GitHubReleases", "ReleaseInfo"]
