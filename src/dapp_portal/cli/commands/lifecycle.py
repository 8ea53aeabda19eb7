"""Commands driving the Portal deployment through its lifecycle."""

import click

from dapp_portal.cli.core import run_operation
from dapp_portal.cli.output import machine_output, user_output
from dapp_portal.core.context import PortalContext
from dapp_portal.core.lifecycle import PortalModule


async def _install(portal: PortalModule) -> str | None:
    await portal.install()
    return portal.version


async def _start(portal: PortalModule) -> list[str]:
    if not await portal.is_installed():
        user_output("Portal is not installed for the current node, installing...")
        await portal.install()
    await portal.start()
    return portal.get_startup_info()


async def _update(portal: PortalModule) -> tuple[str | None, str]:
    previous = portal.version
    latest = await portal.get_latest_version()
    await portal.update()
    return previous, latest


@click.command("install")
@click.pass_obj
def install_cmd(ctx: PortalContext) -> None:
    """Build the latest Portal release for the current node."""
    portal = ctx.portal
    version = run_operation(_install(portal))
    user_output(click.style("✓", fg="green") + f" Installed Portal {version}")


@click.command("start")
@click.pass_obj
def start_cmd(ctx: PortalContext) -> None:
    """Start the Portal, installing it first if needed."""
    portal = ctx.portal
    startup_info = run_operation(_start(portal))
    user_output(click.style("✓", fg="green") + " Portal started")
    for line in startup_info:
        machine_output(line)


@click.command("stop")
@click.pass_obj
def stop_cmd(ctx: PortalContext) -> None:
    """Stop the Portal containers without removing them."""
    run_operation(ctx.portal.stop())
    user_output(click.style("✓", fg="green") + " Portal stopped")


@click.command("update")
@click.pass_obj
def update_cmd(ctx: PortalContext) -> None:
    """Remove the deployment and reinstall the latest release."""
    previous, latest = run_operation(_update(ctx.portal))
    if previous is None:
        user_output(click.style("✓", fg="green") + f" Installed Portal {latest}")
    else:
        user_output(click.style("✓", fg="green") + f" Updated Portal {previous} -> {latest}")


@click.command("clean")
@click.pass_obj
def clean_cmd(ctx: PortalContext) -> None:
    """Remove the Portal containers."""
    run_operation(ctx.portal.clean())
    user_output(click.style("✓", fg="green") + " Portal containers removed")


@click.command("logs")
@click.pass_obj
def logs_cmd(ctx: PortalContext) -> None:
    """Print the Portal container logs."""
    machine_output(run_operation(ctx.portal.get_logs()), nl=False)


@click.command("latest-version")
@click.pass_obj
def latest_version_cmd(ctx: PortalContext) -> None:
    """Print the latest published Portal release."""
    machine_output(run_operation(ctx.portal.get_latest_version()))
