"""Production GitHub release lookups using the REST API."""

import logging

import httpx

from dapp_portal.core.errors import ReleaseNetworkError, ReleaseParseError
from dapp_portal.core.releases.abc import GitHubReleases
from dapp_portal.core.releases.parsing import parse_release_info
from dapp_portal.core.releases.types import ReleaseInfo

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


class RealGitHubReleases(GitHubReleases):
    """Reads releases from api.github.com with an httpx.AsyncClient.

    The client is injected so tests can pass one built on httpx.MockTransport.
    When no client is given, a short-lived one is created per request.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._client = client

    async def fetch_latest_release(self, repo: str) -> ReleaseInfo:
        url = f"{GITHUB_API_URL}/repos/{repo}/releases/latest"
        logger.debug("Fetching latest release from %s", url)

        if self._client is not None:
            response = await self._get(self._client, url)
        else:
            async with httpx.AsyncClient() as client:
                response = await self._get(client, url)

        if not response.is_success:
            raise ReleaseNetworkError(
                f"GitHub API request failed with status: {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ReleaseParseError(
                f"Failed to parse the latest release version: {response.text!r}"
            ) from e

        return parse_release_info(payload)

    async def _get(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        try:
            return await client.get(
                url,
                headers={"Accept": "application/vnd.github+json"},
                follow_redirects=True,
            )
        except httpx.HTTPError as e:
            raise ReleaseNetworkError(f"GitHub API request failed: {e}") from e
