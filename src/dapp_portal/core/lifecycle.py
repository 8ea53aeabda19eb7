"""Install/start/stop/update lifecycle of the Portal module.

The module is a compose deployment of the Portal dapp built for the node type
the user is currently running. Installed state is derived, never stored: the
persisted ModuleConfig says which version and node type were last built, and
the compose status says whether containers exist.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dapp_portal.core.config_store import ConfigHandler, ModuleConfig
from dapp_portal.core.node_types import NodeInfo, NodeType, NodeTypeResolver
from dapp_portal.core.release_version import VersionResolver
from dapp_portal.ops.compose import DockerCompose

logger = logging.getLogger(__name__)

DEFAULT_COMPOSE_FILE = Path(__file__).parent.parent / "data" / "docker-compose.yml"

PORTAL_URL = "http://localhost:3000"

STARTUP_INFO: dict[NodeType, tuple[str, ...]] = {
    NodeType.DOCKER: (f"Wallet: {PORTAL_URL}", f"Bridge: {PORTAL_URL}/bridge"),
    NodeType.MEMORY: (f"Wallet: {PORTAL_URL}",),
    NodeType.UNKNOWN: (),
}


class ModuleCategory(str, Enum):
    """Category tags the host tool groups modules by."""

    NODE = "Node"
    DAPP = "Dapp"


@dataclass(frozen=True)
class ModuleMetadata:
    name: str
    description: str
    category: ModuleCategory


class InstallState(str, Enum):
    """Why the module is, or is not, considered installed."""

    CONFIG_INCOMPLETE = "config_incomplete"
    NODE_TYPE_MISMATCH = "node_type_mismatch"
    NO_CONTAINERS = "no_containers"
    INSTALLED = "installed"


def startup_info_for(node_type: NodeType) -> list[str]:
    """Get the URLs to show the user once the Portal runs against a node type."""
    return list(STARTUP_INFO[node_type])


class PortalModule:
    """Lifecycle of the Portal dapp (wallet and bridge) deployment.

    State machine, conceptually:
        not installed -> installed (stopped) -> running

    An install made for the other node type (the user switched nodes) reports
    as not installed until `update` rebuilds it. Nothing is rolled back when
    a step fails midway; `update` or `clean` recovers.

    Example:
        module = PortalModule(
            config_handler=ctx.config_handler,
            compose=ctx.compose,
            version_resolver=ctx.version_resolver,
        )
        if not await module.is_installed():
            await module.install()
        await module.start()
    """

    metadata = ModuleMetadata(
        name="Portal",
        description="DApp with Wallet and Bridge functionality",
        category=ModuleCategory.DAPP,
    )

    def __init__(
        self,
        *,
        config_handler: ConfigHandler,
        compose: DockerCompose,
        version_resolver: VersionResolver,
        compose_file: Path = DEFAULT_COMPOSE_FILE,
    ) -> None:
        self._config_handler = config_handler
        self._compose = compose
        self._version_resolver = version_resolver
        self._node_type_resolver = NodeTypeResolver(config_handler)
        self.compose_file = compose_file

    @property
    def module_config(self) -> ModuleConfig:
        return self._config_handler.get_module_config()

    @property
    def version(self) -> str | None:
        """Version recorded by the last install, if any."""
        return self.module_config.version

    def is_node_supported(self, node_info: NodeInfo) -> bool:
        return self._node_type_resolver.is_node_supported(node_info)

    def get_node_type(self) -> NodeType:
        return self._node_type_resolver.get_node_type()

    async def get_latest_version(self) -> str:
        return await self._version_resolver.get_latest_version()

    async def installation_state(self) -> InstallState:
        """Work out whether the module is installed for the current node.

        The persisted config is checked before any container is inspected, so
        a stale config for the other node type never counts as installed.
        """
        config = self.module_config
        if config.version is None or config.node_type is None:
            logger.debug("Portal not installed: module config is incomplete (%s)", config)
            return InstallState.CONFIG_INCOMPLETE

        node_type = self.get_node_type()
        if node_type != config.node_type:
            logger.debug(
                "Portal not installed: built for %s node, current node is %s",
                config.node_type.value,
                node_type.value,
            )
            return InstallState.NODE_TYPE_MISMATCH

        if not await self._compose.status(self.compose_file):
            return InstallState.NO_CONTAINERS

        return InstallState.INSTALLED

    async def is_installed(self) -> bool:
        return await self.installation_state() == InstallState.INSTALLED

    async def install(self) -> None:
        """Build the Portal for the latest release and current node, then create containers.

        Raises:
            LatestVersionError: If the latest release cannot be resolved
            RuntimeError: If a compose command fails
        """
        latest_version = await self.get_latest_version()
        node_type = self.get_node_type()
        logger.debug("Installing Portal %s for %s node", latest_version, node_type.value)

        await self._compose.build(
            self.compose_file,
            None,
            [
                "--build-arg",
                f"VERSION={latest_version}",
                "--build-arg",
                f"NODE_TYPE={node_type.value}",
            ],
        )
        self._config_handler.set_module_config(
            ModuleConfig(version=latest_version, node_type=node_type)
        )
        await self._compose.create(self.compose_file)

    async def is_running(self) -> bool:
        statuses = await self._compose.status(self.compose_file)
        return any(status.is_running for status in statuses)

    async def start(self) -> None:
        await self._compose.up(self.compose_file)

    async def stop(self) -> None:
        """Stop the containers, keeping them for the next start."""
        await self._compose.stop(self.compose_file)

    async def update(self) -> None:
        """Tear the deployment down and reinstall it from the latest release."""
        await self.clean()
        await self.install()

    async def clean(self) -> None:
        """Remove the containers.

        The persisted module config is left as it is.
        """
        await self._compose.down(self.compose_file)

    def get_startup_info(self) -> list[str]:
        return startup_info_for(self.get_node_type())

    async def get_logs(self) -> str:
        return await self._compose.logs(self.compose_file)
