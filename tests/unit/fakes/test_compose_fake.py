"""Tests for FakeDockerCompose (fake infrastructure tests).

These tests verify the fake itself, so higher-layer tests can rely on it.
"""

from pathlib import Path

import pytest

from dapp_portal.ops.compose import ComposeServiceStatus
from tests.fakes.compose_fake import FakeDockerCompose

COMPOSE_FILE = Path("docker-compose.yml")


async def test_starts_with_no_containers() -> None:
    assert await FakeDockerCompose().status(COMPOSE_FILE) == []


async def test_create_then_up_then_stop_then_down() -> None:
    fake = FakeDockerCompose()

    await fake.create(COMPOSE_FILE)
    assert [s.state for s in fake.services] == ["created"]

    await fake.up(COMPOSE_FILE)
    assert all(s.is_running for s in fake.services)

    await fake.stop(COMPOSE_FILE)
    assert [s.state for s in fake.services] == ["exited"]

    await fake.down(COMPOSE_FILE)
    assert fake.services == []


async def test_records_calls_in_order() -> None:
    fake = FakeDockerCompose()

    await fake.build(COMPOSE_FILE, None, ["--build-arg", "VERSION=v1"])
    await fake.create(COMPOSE_FILE)
    await fake.logs(COMPOSE_FILE)

    assert fake.calls == [("build", COMPOSE_FILE), ("create", COMPOSE_FILE), ("logs", COMPOSE_FILE)]
    assert fake.build_calls == [(COMPOSE_FILE, None, ["--build-arg", "VERSION=v1"])]


async def test_configured_failure_is_raised_and_recorded() -> None:
    fake = FakeDockerCompose(fail_on=frozenset({"up"}))

    with pytest.raises(RuntimeError, match="Failed to up containers"):
        await fake.up(COMPOSE_FILE)

    assert fake.operations == ["up"]


async def test_preconfigured_services_are_reported() -> None:
    service = ComposeServiceStatus(name="dapp-portal", state="running", is_running=True)
    fake = FakeDockerCompose(services=[service])

    assert await fake.status(COMPOSE_FILE) == [service]
