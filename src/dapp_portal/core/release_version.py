"""Latest Portal release resolution with a per-process cache.

One VersionResolver is created per process (see create_context) and shared by
every caller, so the release API is asked at most once after a successful
lookup.
"""

import logging

from dapp_portal.core.errors import LatestVersionError
from dapp_portal.core.releases.abc import GitHubReleases

logger = logging.getLogger(__name__)

PORTAL_REPO = "matter-labs/dapp-portal"


class VersionResolver:
    """Resolves and memoizes the latest release tag of the Portal repository.

    The cached value never expires and is never invalidated. Failed lookups
    are not cached and not retried; the next call asks the API again.
    Concurrent first calls may each issue a request; they all store the same
    tag.
    """

    def __init__(self, releases: GitHubReleases, repo: str = PORTAL_REPO) -> None:
        self._releases = releases
        self._repo = repo
        self._latest_version: str | None = None

    @property
    def cached_version(self) -> str | None:
        """The resolved version, or None if nothing has been resolved yet."""
        return self._latest_version

    async def get_latest_version(self) -> str:
        """Get the latest release tag, asking the release API on first use.

        Returns:
            Release tag name (e.g., "v1.4.0")

        Raises:
            ReleaseNetworkError: If the release API is unreachable or fails
            ReleaseParseError: If the release payload has no string tag name
        """
        if self._latest_version is not None:
            return self._latest_version

        try:
            release = await self._releases.fetch_latest_release(self._repo)
        except LatestVersionError as e:
            raise type(e)(f"Failed to fetch the latest release version: {e}") from e

        logger.debug("Resolved latest %s release: %s", self._repo, release.tag_name)
        self._latest_version = release.tag_name
        return release.tag_name
