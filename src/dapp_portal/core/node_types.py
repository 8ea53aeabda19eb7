"""Node descriptions and node-type classification.

The Portal ships prebuilt distributions per node type, so the module needs to
know which kind of local node the user is running before it builds anything.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dapp_portal.core.config_store import ConfigHandler


class NodeType(str, Enum):
    """Kind of local node a Portal distribution is built for."""

    DOCKER = "docker"
    MEMORY = "memory"
    UNKNOWN = "unknown"


def parse_node_type(value: object) -> NodeType:
    """Parse a persisted node type, mapping anything unrecognised to UNKNOWN."""
    for node_type in (NodeType.DOCKER, NodeType.MEMORY):
        if value == node_type.value:
            return node_type
    return NodeType.UNKNOWN


@dataclass(frozen=True)
class L1Chain:
    """Settlement layer endpoint attached to a node."""

    id: int
    rpc_url: str


@dataclass(frozen=True)
class NodeInfo:
    """Node currently targeted by the host tool."""

    id: int
    rpc_url: str
    l1_chain: L1Chain | None = None


IN_MEMORY_NODE = NodeInfo(id=260, rpc_url="http://127.0.0.1:8011")

DOCKERIZED_L1_CHAIN = L1Chain(id=9, rpc_url="http://127.0.0.1:8545")

DOCKERIZED_NODE = NodeInfo(
    id=270,
    rpc_url="http://127.0.0.1:3050",
    l1_chain=DOCKERIZED_L1_CHAIN,
)


def is_node_supported(node_info: NodeInfo) -> bool:
    """Check whether a node matches one of the known node fingerprints.

    The in-memory node is matched on id and RPC URL only. The dockerized node
    must also carry the expected L1 chain.
    """
    if node_info.id == IN_MEMORY_NODE.id and node_info.rpc_url == IN_MEMORY_NODE.rpc_url:
        return True

    return (
        node_info.id == DOCKERIZED_NODE.id
        and node_info.rpc_url == DOCKERIZED_NODE.rpc_url
        and node_info.l1_chain is not None
        and node_info.l1_chain.id == DOCKERIZED_L1_CHAIN.id
        and node_info.l1_chain.rpc_url == DOCKERIZED_L1_CHAIN.rpc_url
    )


def classify_node(node_info: NodeInfo) -> NodeType:
    """Classify a node by the presence of an L1 chain.

    Assumptions:
    - A node with an L1 chain is the default dockerized testing node.
    - A node without one is the default in-memory node.

    Limitation: custom RPC endpoints are not recognised. Any node with an L1
    chain is treated as dockerized, even when its ids and URLs differ from
    DOCKERIZED_NODE.
    """
    if node_info.l1_chain is not None:
        return NodeType.DOCKER
    return NodeType.MEMORY


class NodeTypeResolver:
    """Resolves the node type of the node configured in the host tool."""

    def __init__(self, config_handler: "ConfigHandler") -> None:
        self._config_handler = config_handler

    def is_node_supported(self, node_info: NodeInfo) -> bool:
        return is_node_supported(node_info)

    def get_node_type(self) -> NodeType:
        """Return the node type of the currently configured node.

        Returns:
            NodeType.DOCKER or NodeType.MEMORY
        """
        return classify_node(self._config_handler.get_node_info())
