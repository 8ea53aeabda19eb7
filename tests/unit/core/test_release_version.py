"""Tests for latest release resolution and its per-process cache."""

import pytest

from dapp_portal.core.errors import ReleaseNetworkError, ReleaseParseError
from dapp_portal.core.release_version import PORTAL_REPO, VersionResolver
from tests.fakes.releases_fake import FakeGitHubReleases


async def test_first_call_fetches_latest_release() -> None:
    releases = FakeGitHubReleases(tag_name="v2.3.0")
    resolver = VersionResolver(releases)

    assert await resolver.get_latest_version() == "v2.3.0"
    assert releases.requested_repos == [PORTAL_REPO]


async def test_repeated_calls_reuse_cached_version() -> None:
    releases = FakeGitHubReleases(tag_name="v2.3.0")
    resolver = VersionResolver(releases)

    first = await resolver.get_latest_version()
    second = await resolver.get_latest_version()
    third = await resolver.get_latest_version()

    assert first == second == third == "v2.3.0"
    assert len(releases.requested_repos) == 1


async def test_cached_version_is_none_until_resolved() -> None:
    resolver = VersionResolver(FakeGitHubReleases(tag_name="v1.1.0"))

    assert resolver.cached_version is None
    await resolver.get_latest_version()
    assert resolver.cached_version == "v1.1.0"


async def test_network_error_is_wrapped_with_context() -> None:
    original = ReleaseNetworkError("GitHub API request failed with status: 503")
    resolver = VersionResolver(FakeGitHubReleases(error=original))

    with pytest.raises(ReleaseNetworkError, match="Failed to fetch the latest release version") as exc:
        await resolver.get_latest_version()

    assert "503" in str(exc.value)
    assert exc.value.__cause__ is original


async def test_parse_error_is_wrapped_with_context() -> None:
    original = ReleaseParseError("Failed to parse the latest release version: {}")
    resolver = VersionResolver(FakeGitHubReleases(error=original))

    with pytest.raises(ReleaseParseError, match="Failed to fetch the latest release version"):
        await resolver.get_latest_version()


async def test_failures_are_not_cached() -> None:
    releases = FakeGitHubReleases(error=ReleaseNetworkError("offline"))
    resolver = VersionResolver(releases)

    for _ in range(2):
        with pytest.raises(ReleaseNetworkError):
            await resolver.get_latest_version()

    assert resolver.cached_version is None
    assert len(releases.requested_repos) == 2


async def test_custom_repository() -> None:
    releases = FakeGitHubReleases()
    resolver = VersionResolver(releases, repo="example/portal-fork")

    await resolver.get_latest_version()

    assert releases.requested_repos == ["example/portal-fork"]
