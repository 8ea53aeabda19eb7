"""Pytest configuration shared by all tests."""

import pytest

from dapp_portal.core.config_store import CONFIG_PATH_ENV_VAR


@pytest.fixture(autouse=True)
def isolated_config_path(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests from reading or writing the user's real config file."""
    config_dir = tmp_path_factory.mktemp("dapp-portal-config")
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(config_dir / "config.toml"))
