"""Abstract interface for GitHub release lookups."""

from abc import ABC, abstractmethod

from dapp_portal.core.releases.types import ReleaseInfo


class GitHubReleases(ABC):
    """Abstract interface for reading published releases of a repository.

    Implementations include:
    - RealGitHubReleases: GitHub REST API over httpx
    - FakeGitHubReleases: in-memory, for tests
    """

    @abstractmethod
    async def fetch_latest_release(self, repo: str) -> ReleaseInfo:
        """Fetch the latest published release of a repository.

        Args:
            repo: Repository in "owner/name" form

        Returns:
            ReleaseInfo of the latest release

        Raises:
            ReleaseNetworkError: If the API is unreachable or answers with a
                non-success status
            ReleaseParseError: If the payload carries no string tag_name
        """
        ...
