import logging

import click

from dapp_portal.cli.commands.lifecycle import (
    clean_cmd,
    install_cmd,
    latest_version_cmd,
    logs_cmd,
    start_cmd,
    stop_cmd,
    update_cmd,
)
from dapp_portal.cli.commands.node import node_group
from dapp_portal.cli.commands.status import info_cmd, status_cmd
from dapp_portal.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="dapp-portal")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Manage the Portal dapp (wallet and bridge) next to a local node."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(clean_cmd)
cli.add_command(info_cmd)
cli.add_command(install_cmd)
cli.add_command(latest_version_cmd)
cli.add_command(logs_cmd)
cli.add_command(node_group)
cli.add_command(start_cmd)
cli.add_command(status_cmd)
cli.add_command(stop_cmd)
cli.add_command(update_cmd)


def main() -> None:
    """CLI entry point used by the `dapp-portal` console script."""
    cli()
