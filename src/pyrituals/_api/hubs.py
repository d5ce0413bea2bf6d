"""Hub list and hub state endpoints.

Endpoints:
  - GET /api/account/hubs/{account_hash} -> [{"hub": {...}}, ...]
  - GET /api/account/hub/{hub_hash}      -> {"hub": {...}}
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from pyrituals._constants import HUB_LIST_ENDPOINT, HUB_STATE_ENDPOINT
from pyrituals.exceptions import RitualsHubError, RitualsStateError
from pyrituals.models.hub import Hub, HubEnvelope, HubListEntry


def hub_list_endpoint(account_hash: str) -> str:
    return HUB_LIST_ENDPOINT.format(account_hash=quote(account_hash, safe=""))


def hub_state_endpoint(hub_hash: str) -> str:
    return HUB_STATE_ENDPOINT.format(hub_hash=quote(hub_hash, safe=""))


def parse_first_hub(body: Any, *, endpoint: str) -> HubListEntry:
    """Return the first entry of a hub list; there is no selection policy."""
    if not isinstance(body, list) or not body:
        raise RitualsHubError("No hubs found for account", status_code=200, endpoint=endpoint)
    try:
        return HubListEntry.model_validate(body[0])
    except ValidationError as exc:
        raise RitualsHubError(
            f"First hub entry is malformed: {exc.error_count()} invalid field(s)",
            status_code=200,
            endpoint=endpoint,
        ) from exc


def parse_hub_state(body: Any, *, endpoint: str) -> Hub:
    if not isinstance(body, dict) or body.get("hub") is None:
        raise RitualsStateError("Hub state response missing hub", status_code=200, endpoint=endpoint)
    try:
        return HubEnvelope.model_validate(body).hub
    except ValidationError as exc:
        raise RitualsStateError(
            f"Hub state is malformed: {exc.error_count()} invalid field(s)",
            status_code=200,
            endpoint=endpoint,
        ) from exc
