"""Real Docker Compose operations using subprocess to call the Docker CLI.

All operations let failures bubble as CommandError with the command, exit
code and captured output attached.
"""

import json
from pathlib import Path

from dapp_portal.core.subprocess import run_command_with_context
from dapp_portal.ops.compose import ComposeServiceStatus, DockerCompose


def parse_compose_ps_output(output: str) -> list[ComposeServiceStatus]:
    """Parse `docker compose ps --format json` output.

    Compose releases before 2.21 print one JSON array; later releases print
    one JSON object per line. Both are accepted.

    Raises:
        ValueError: If the output is not JSON in either shape
    """
    stripped = output.strip()
    if not stripped:
        return []

    if stripped.startswith("["):
        entries = json.loads(stripped)
    else:
        entries = [json.loads(line) for line in stripped.splitlines() if line.strip()]

    statuses: list[ComposeServiceStatus] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Unexpected compose status entry: {entry!r}")
        state = str(entry.get("State", "")).lower()
        name = str(entry.get("Name") or entry.get("Service") or "")
        statuses.append(ComposeServiceStatus(name=name, state=state, is_running=state == "running"))
    return statuses


class RealDockerCompose(DockerCompose):
    """Docker Compose operations via `docker compose -f <file> ...`.

    Example:
        compose = RealDockerCompose()
        await compose.build(compose_file, build_args=["--build-arg", "VERSION=v1"])
        await compose.up(compose_file)
    """

    def _base_cmd(self, compose_file: Path, context_args: list[str] | None = None) -> list[str]:
        return ["docker", "compose", "-f", str(compose_file), *(context_args or [])]

    async def status(self, compose_file: Path) -> list[ComposeServiceStatus]:
        result = await run_command_with_context(
            [*self._base_cmd(compose_file), "ps", "--all", "--format", "json"],
            "get container status",
        )
        return parse_compose_ps_output(result.stdout)

    async def build(
        self,
        compose_file: Path,
        context_args: list[str] | None = None,
        build_args: list[str] | None = None,
    ) -> None:
        await run_command_with_context(
            [*self._base_cmd(compose_file, context_args), "build", *(build_args or [])],
            "build containers",
        )

    async def create(self, compose_file: Path) -> None:
        await run_command_with_context(
            [*self._base_cmd(compose_file), "create"],
            "create containers",
        )

    async def up(self, compose_file: Path) -> None:
        await run_command_with_context(
            [*self._base_cmd(compose_file), "up", "-d"],
            "start containers",
        )

    async def stop(self, compose_file: Path) -> None:
        await run_command_with_context(
            [*self._base_cmd(compose_file), "stop"],
            "stop containers",
        )

    async def down(self, compose_file: Path) -> None:
        await run_command_with_context(
            [*self._base_cmd(compose_file), "down"],
            "remove containers",
        )

    async def logs(self, compose_file: Path) -> str:
        result = await run_command_with_context(
            [*self._base_cmd(compose_file), "logs", "--no-color"],
            "get container logs",
        )
        return result.stdout
