"""Commands reporting the state of the Portal module."""

import click
from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.table import Table

from dapp_portal.cli.core import run_operation
from dapp_portal.cli.output import machine_output
from dapp_portal.core.context import PortalContext
from dapp_portal.core.lifecycle import InstallState
from dapp_portal.core.node_types import NodeType


class StatusResponse(BaseModel):
    """JSON shape of `dapp-portal status --json`."""

    model_config = ConfigDict(strict=True)

    name: str
    version: str | None
    node_type: NodeType
    node_supported: bool
    install_state: InstallState
    installed: bool
    running: bool
    startup_info: list[str]


async def _collect_status(ctx: PortalContext) -> StatusResponse:
    portal = ctx.portal
    node_supported = portal.is_node_supported(ctx.config_handler.get_node_info())
    install_state = await portal.installation_state()
    running = await portal.is_running()
    return StatusResponse(
        name=portal.metadata.name,
        version=portal.version,
        node_type=portal.get_node_type(),
        node_supported=node_supported,
        install_state=install_state,
        installed=install_state == InstallState.INSTALLED,
        running=running,
        startup_info=portal.get_startup_info() if running else [],
    )


@click.command("status")
@click.option("--json", "as_json", is_flag=True, help="Print status as JSON.")
@click.pass_obj
def status_cmd(ctx: PortalContext, as_json: bool) -> None:
    """Show whether the Portal is installed and running."""
    status = run_operation(_collect_status(ctx))

    if as_json:
        machine_output(status.model_dump_json(indent=2))
        return

    table = Table(show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Module", status.name)
    table.add_row("Version", status.version or "-")
    table.add_row("Node type", status.node_type.value)
    table.add_row("Node supported", "yes" if status.node_supported else "no")
    table.add_row("Installed", "yes" if status.installed else f"no ({status.install_state.value})")
    table.add_row("Running", "yes" if status.running else "no")
    for line in status.startup_info:
        table.add_row("", line)

    Console(stderr=True).print(table)


@click.command("info")
@click.pass_obj
def info_cmd(ctx: PortalContext) -> None:
    """Show module metadata."""
    metadata = ctx.portal.metadata
    machine_output(f"{metadata.name} [{metadata.category.value}]")
    machine_output(metadata.description)
