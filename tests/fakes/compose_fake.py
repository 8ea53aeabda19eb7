"""Fake Docker Compose operations for testing without a Docker daemon.

All calls are recorded in order for verification in tests, and container
state is simulated so status reflects build/create/up/stop/down.
"""

from pathlib import Path

from dapp_portal.ops.compose import ComposeServiceStatus, DockerCompose


class FakeDockerCompose(DockerCompose):
    """In-memory fake compose operations for unit testing.

    All state is provided via constructor using keyword arguments.

    Attributes:
        calls: (operation, compose_file) tuples in call order
        build_calls: (compose_file, context_args, build_args) tuples
    """

    def __init__(
        self,
        *,
        services: list[ComposeServiceStatus] | None = None,
        service_names: tuple[str, ...] = ("dapp-portal",),
        logs: str = "",
        fail_on: frozenset[str] = frozenset(),
    ) -> None:
        """Create FakeDockerCompose.

        Args:
            services: Containers that already exist
            service_names: Containers that create/up bring into existence
            logs: Text returned by logs()
            fail_on: Operation names that raise RuntimeError
        """
        self._services = list(services or [])
        self._service_names = service_names
        self._logs = logs
        self._fail_on = fail_on
        self.calls: list[tuple[str, Path]] = []
        self.build_calls: list[tuple[Path, list[str] | None, list[str] | None]] = []

    @property
    def operations(self) -> list[str]:
        """Operation names in call order."""
        return [operation for operation, _ in self.calls]

    @property
    def services(self) -> list[ComposeServiceStatus]:
        return self._services.copy()

    def _record(self, operation: str, compose_file: Path) -> None:
        self.calls.append((operation, compose_file))
        if operation in self._fail_on:
            raise RuntimeError(f"Failed to {operation} containers")

    def _set_all(self, state: str) -> None:
        if not self._services:
            self._services = [
                ComposeServiceStatus(name=name, state=state, is_running=state == "running")
                for name in self._service_names
            ]
            return
        self._services = [
            ComposeServiceStatus(name=service.name, state=state, is_running=state == "running")
            for service in self._services
        ]

    async def status(self, compose_file: Path) -> list[ComposeServiceStatus]:
        self._record("status", compose_file)
        return self._services.copy()

    async def build(
        self,
        compose_file: Path,
        context_args: list[str] | None = None,
        build_args: list[str] | None = None,
    ) -> None:
        self._record("build", compose_file)
        self.build_calls.append((compose_file, context_args, build_args))

    async def create(self, compose_file: Path) -> None:
        self._record("create", compose_file)
        if not self._services:
            self._set_all("created")

    async def up(self, compose_file: Path) -> None:
        self._record("up", compose_file)
        self._set_all("running")

    async def stop(self, compose_file: Path) -> None:
        self._record("stop", compose_file)
        if self._services:
            self._set_all("exited")

    async def down(self, compose_file: Path) -> None:
        self._record("down", compose_file)
        self._services = []

    async def logs(self, compose_file: Path) -> str:
        self._record("logs", compose_file)
        return self._logs
