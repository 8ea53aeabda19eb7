"""Shared helpers for running Portal operations from click commands."""

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, TypeVar

import click

from dapp_portal.cli.output import user_output
from dapp_portal.core.errors import LatestVersionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_operation(operation: Coroutine[Any, Any, T]) -> T:
    """Run a lifecycle coroutine to completion at the CLI error boundary.

    Release lookup failures and failed subprocess or config operations are
    printed with a red "Error:" prefix and turned into exit code 1.

    Raises:
        SystemExit: If the operation fails
    """
    try:
        return asyncio.run(operation)
    except (LatestVersionError, RuntimeError, ValueError, OSError) as e:
        logger.debug("Operation failed", exc_info=True)
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
