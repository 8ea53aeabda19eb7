"""Docker Compose operations interface for the Portal deployment.

This module defines the abstract interface for compose operations, following
the ops pattern with ABC-based dependency injection for testability. Every
operation takes the compose file describing the deployment.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ComposeServiceStatus:
    """Status of one container managed by a compose file.

    Attributes:
        name: Container or service name
        state: Raw compose state (e.g., "running", "exited", "created")
        is_running: Whether the container is currently running
    """

    name: str
    state: str
    is_running: bool


class DockerCompose(ABC):
    """Abstract interface for Docker Compose operations.

    Real implementations run `docker compose` in a subprocess. Fake
    implementations are pure in-memory for unit tests without a Docker daemon.
    """

    @abstractmethod
    async def status(self, compose_file: Path) -> list[ComposeServiceStatus]:
        """List the containers of the deployment, running or not.

        Returns:
            One entry per container; empty when nothing has been created
        """
        ...

    @abstractmethod
    async def build(
        self,
        compose_file: Path,
        context_args: list[str] | None = None,
        build_args: list[str] | None = None,
    ) -> None:
        """Build the deployment's images.

        Args:
            compose_file: Compose file describing the deployment
            context_args: Global compose arguments placed before the subcommand
            build_args: Arguments for the build subcommand
                (e.g., ["--build-arg", "VERSION=v1.0.0"])

        Raises:
            RuntimeError: If the build fails
        """
        ...

    @abstractmethod
    async def create(self, compose_file: Path) -> None:
        """Create the deployment's containers without starting them."""
        ...

    @abstractmethod
    async def up(self, compose_file: Path) -> None:
        """Create (if needed) and start the containers in the background."""
        ...

    @abstractmethod
    async def stop(self, compose_file: Path) -> None:
        """Stop running containers, keeping them for a later start."""
        ...

    @abstractmethod
    async def down(self, compose_file: Path) -> None:
        """Stop and remove the containers."""
        ...

    @abstractmethod
    async def logs(self, compose_file: Path) -> str:
        """Get the combined logs of the deployment's containers."""
        ...
