"""Parsing of GitHub release API payloads."""

import json
from typing import Any

from dapp_portal.core.errors import ReleaseParseError
from dapp_portal.core.releases.types import ReleaseInfo


def parse_release_info(payload: Any) -> ReleaseInfo:
    """Build a ReleaseInfo from a decoded release payload.

    Raises:
        ReleaseParseError: If the payload is not an object with a string tag_name
    """
    tag_name = payload.get("tag_name") if isinstance(payload, dict) else None
    if not isinstance(tag_name, str):
        raise ReleaseParseError(
            f"Failed to parse the latest release version: {json.dumps(payload)}"
        )
    return ReleaseInfo(tag_name=tag_name)
