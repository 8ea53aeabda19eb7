"""Application context with dependency injection."""

from dataclasses import dataclass

from dapp_portal.core.config_store import ConfigHandler, FilesystemConfigHandler
from dapp_portal.core.lifecycle import PortalModule
from dapp_portal.core.release_version import VersionResolver
from dapp_portal.core.releases.real import RealGitHubReleases
from dapp_portal.ops.compose import DockerCompose
from dapp_portal.ops.compose_real import RealDockerCompose


@dataclass(frozen=True)
class PortalContext:
    """Immutable context holding all dependencies for Portal operations.

    Created once at CLI entry point and threaded through commands.
    Tests build one directly from fakes.

    Attributes:
        config_handler: Persisted node and module configuration
        compose: Docker Compose operations
        version_resolver: The process-wide latest release resolver
    """

    config_handler: ConfigHandler
    compose: DockerCompose
    version_resolver: VersionResolver

    @property
    def portal(self) -> PortalModule:
        return PortalModule(
            config_handler=self.config_handler,
            compose=self.compose,
            version_resolver=self.version_resolver,
        )


def create_context() -> PortalContext:
    """Create production context with real implementations.

    This is the only place the VersionResolver is instantiated, so the latest
    release is looked up at most once per process.
    """
    return PortalContext(
        config_handler=FilesystemConfigHandler(),
        compose=RealDockerCompose(),
        version_resolver=VersionResolver(RealGitHubReleases()),
    )
