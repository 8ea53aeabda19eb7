"""Commands selecting the node the Portal is built for."""

import click

from dapp_portal.cli.output import machine_output, user_output
from dapp_portal.core.context import PortalContext
from dapp_portal.core.node_types import DOCKERIZED_NODE, IN_MEMORY_NODE, classify_node

NODE_CHOICES = {
    "in-memory": IN_MEMORY_NODE,
    "dockerized": DOCKERIZED_NODE,
}


@click.group("node")
def node_group() -> None:
    """Inspect or select the targeted node."""


@node_group.command("show")
@click.pass_obj
def show_cmd(ctx: PortalContext) -> None:
    """Print the targeted node and how it is classified."""
    node_info = ctx.config_handler.get_node_info()
    machine_output(f"id: {node_info.id}")
    machine_output(f"rpc_url: {node_info.rpc_url}")
    if node_info.l1_chain is not None:
        machine_output(f"l1_chain.id: {node_info.l1_chain.id}")
        machine_output(f"l1_chain.rpc_url: {node_info.l1_chain.rpc_url}")
    machine_output(f"node_type: {classify_node(node_info).value}")
    if not ctx.portal.is_node_supported(node_info):
        user_output(click.style("Warning: ", fg="yellow") + "node is not a known default node")


@node_group.command("use")
@click.argument("name", type=click.Choice(sorted(NODE_CHOICES)))
@click.pass_obj
def use_cmd(ctx: PortalContext, name: str) -> None:
    """Target one of the default local nodes."""
    ctx.config_handler.set_node_info(NODE_CHOICES[name])
    user_output(click.style("✓", fg="green") + f" Now targeting the {name} node")
