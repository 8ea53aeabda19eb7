"""Persisted configuration: the targeted node and the Portal module record.

Provides the ConfigHandler interface consumed by the module lifecycle, a
filesystem implementation backed by a TOML file, and an in-memory
implementation for tests.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit

from dapp_portal.core.node_types import IN_MEMORY_NODE, L1Chain, NodeInfo, NodeType, parse_node_type

CONFIG_PATH_ENV_VAR = "DAPP_PORTAL_CONFIG"
MODULE_KEY = "portal"


@dataclass(frozen=True)
class ModuleConfig:
    """Persisted state of the Portal module.

    Both fields are None until the first successful install.
    """

    version: str | None = None
    node_type: NodeType | None = None


class ConfigHandler(ABC):
    """Abstract interface for the host tool's configuration store."""

    @abstractmethod
    def get_node_info(self) -> NodeInfo:
        """Get the node currently targeted by the host tool."""
        ...

    @abstractmethod
    def set_node_info(self, node_info: NodeInfo) -> None:
        """Persist the node targeted by the host tool."""
        ...

    @abstractmethod
    def get_module_config(self) -> ModuleConfig:
        """Get the persisted module config (empty config if none was saved)."""
        ...

    @abstractmethod
    def set_module_config(self, config: ModuleConfig) -> None:
        """Replace the persisted module config."""
        ...


def default_config_path() -> Path:
    """Get the config file path, honouring the DAPP_PORTAL_CONFIG override."""
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".dapp-portal" / "config.toml"


def _parse_node_table(table: Any, config_path: Path) -> NodeInfo:
    if not isinstance(table, dict):
        raise ValueError(f"Expected [node] to be a table in {config_path}")

    node_id = table.get("id")
    rpc_url = table.get("rpc_url")
    if not isinstance(node_id, int) or not isinstance(rpc_url, str):
        raise ValueError(f"[node] requires integer 'id' and string 'rpc_url' in {config_path}")

    l1_table = table.get("l1_chain")
    if l1_table is None:
        return NodeInfo(id=node_id, rpc_url=rpc_url)

    if not isinstance(l1_table, dict):
        raise ValueError(f"Expected [node.l1_chain] to be a table in {config_path}")
    l1_id = l1_table.get("id")
    l1_rpc_url = l1_table.get("rpc_url")
    if not isinstance(l1_id, int) or not isinstance(l1_rpc_url, str):
        raise ValueError(
            f"[node.l1_chain] requires integer 'id' and string 'rpc_url' in {config_path}"
        )
    return NodeInfo(id=node_id, rpc_url=rpc_url, l1_chain=L1Chain(id=l1_id, rpc_url=l1_rpc_url))


class FilesystemConfigHandler(ConfigHandler):
    """Production implementation storing configuration in a TOML file.

    Layout:
        [node]
        id = 270
        rpc_url = "http://127.0.0.1:3050"

        [node.l1_chain]
        id = 9
        rpc_url = "http://127.0.0.1:8545"

        [modules.portal]
        version = "v1.2.3"
        node_type = "docker"

    Writes go through tomlkit so comments and unrelated tables survive.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path if config_path is not None else default_config_path()

    def path(self) -> Path:
        """Get the path to the config file (for error messages and debugging)."""
        return self._config_path

    def _read(self) -> dict[str, Any]:
        if not self._config_path.exists():
            return {}
        try:
            return tomllib.loads(self._config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {self._config_path}: {e}") from e

    def _load_document(self) -> tomlkit.TOMLDocument:
        if not self._config_path.exists():
            return tomlkit.document()
        with self._config_path.open("r", encoding="utf-8") as f:
            return tomlkit.load(f)

    def _write_document(self, doc: tomlkit.TOMLDocument) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        with self._config_path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)

    def get_node_info(self) -> NodeInfo:
        """Load the targeted node, defaulting to the in-memory node.

        Raises:
            ValueError: If the file is not valid TOML or the [node] table is malformed
        """
        data = self._read()
        if "node" not in data:
            return IN_MEMORY_NODE
        return _parse_node_table(data["node"], self._config_path)

    def set_node_info(self, node_info: NodeInfo) -> None:
        doc = self._load_document()

        node = tomlkit.table()
        node["id"] = node_info.id
        node["rpc_url"] = node_info.rpc_url
        if node_info.l1_chain is not None:
            l1_chain = tomlkit.table()
            l1_chain["id"] = node_info.l1_chain.id
            l1_chain["rpc_url"] = node_info.l1_chain.rpc_url
            node["l1_chain"] = l1_chain

        doc["node"] = node
        self._write_document(doc)

    def get_module_config(self) -> ModuleConfig:
        data = self._read()
        modules = data.get("modules", {})
        section = modules.get(MODULE_KEY, {}) if isinstance(modules, dict) else {}
        if not isinstance(section, dict):
            return ModuleConfig()

        version = section.get("version")
        raw_node_type = section.get("node_type")
        return ModuleConfig(
            version=str(version) if version is not None else None,
            node_type=parse_node_type(raw_node_type) if raw_node_type is not None else None,
        )

    def set_module_config(self, config: ModuleConfig) -> None:
        doc = self._load_document()

        if "modules" not in doc:
            doc["modules"] = tomlkit.table()  # type: ignore[index]

        section = tomlkit.table()
        if config.version is not None:
            section["version"] = config.version
        if config.node_type is not None:
            section["node_type"] = config.node_type.value

        doc["modules"][MODULE_KEY] = section  # type: ignore[index]
        self._write_document(doc)


class InMemoryConfigHandler(ConfigHandler):
    """Test implementation that keeps configuration in memory."""

    def __init__(
        self,
        *,
        node_info: NodeInfo = IN_MEMORY_NODE,
        module_config: ModuleConfig | None = None,
    ) -> None:
        self._node_info = node_info
        self._module_config = module_config if module_config is not None else ModuleConfig()
        self._saved_configs: list[ModuleConfig] = []

    @property
    def saved_configs(self) -> list[ModuleConfig]:
        """Module configs passed to set_module_config, oldest first."""
        return self._saved_configs.copy()

    def get_node_info(self) -> NodeInfo:
        return self._node_info

    def set_node_info(self, node_info: NodeInfo) -> None:
        self._node_info = node_info

    def get_module_config(self) -> ModuleConfig:
        return self._module_config

    def set_module_config(self, config: ModuleConfig) -> None:
        self._module_config = config
        self._saved_configs.append(config)
