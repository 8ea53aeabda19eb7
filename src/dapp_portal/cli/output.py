"""Output helpers for CLI commands with clear intent.

user_output is for humans and goes to stderr. machine_output is for tools
and scripts and goes to stdout.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a message meant for the user to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write machine-readable output to stdout."""
    click.echo(message, nl=nl)
