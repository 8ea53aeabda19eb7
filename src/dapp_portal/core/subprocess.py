"""Async subprocess execution with rich error context."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status.

    The message carries the operation, the command line, the exit code and
    any captured output, so callers can surface it as-is.
    """

    def __init__(self, message: str, cmd: Sequence[str], returncode: int | None) -> None:
        super().__init__(message)
        self.cmd = list(cmd)
        self.returncode = returncode


@dataclass(frozen=True)
class CommandOutput:
    returncode: int
    stdout: str
    stderr: str


async def run_command_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
) -> CommandOutput:
    """Run a command, capturing output, and fail with enriched context.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of the operation
            (e.g., "build Portal images")
        cwd: Working directory for the command

    Returns:
        CommandOutput with decoded stdout and stderr

    Raises:
        CommandError: If the command is missing or exits with a non-zero status
    """
    cmd_str = " ".join(str(arg) for arg in cmd)
    logger.debug("Running: %s", cmd_str)

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=cwd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise CommandError(error_msg, cmd, None) from e

    stdout_bytes, stderr_bytes = await process.communicate()
    stdout = stdout_bytes.decode("utf-8", errors="replace")
    stderr = stderr_bytes.decode("utf-8", errors="replace")
    returncode = process.returncode if process.returncode is not None else -1

    if returncode != 0:
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {returncode}"
        if stdout.strip():
            error_msg += f"\nstdout: {stdout.strip()}"
        if stderr.strip():
            error_msg += f"\nstderr: {stderr.strip()}"
        raise CommandError(error_msg, cmd, returncode)

    return CommandOutput(returncode=returncode, stdout=stdout, stderr=stderr)
