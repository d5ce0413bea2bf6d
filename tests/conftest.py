from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from pyrituals.config import RitualsConfig
from pyrituals.credentials import MemoryCredentialStore
from pyrituals.exceptions import RitualsTransportError


def hub_payload(hash_: str = "h1", *, fanc: str = "1", speedc: str = "2", **extra: Any) -> dict[str, Any]:
    hub: dict[str, Any] = {
        "hash": hash_,
        "hublot": "LOT-0001",
        "status": 1,
        "attributes": {"fanc": fanc, "speedc": speedc, "roomc": "2", "resetc": "0"},
        "sensors": {"versionc": "1.0.4", "rfidc": {"id": 7, "title": "Private Collection Sweet Jasmine"}},
    }
    hub.update(extra)
    return {"hub": hub}


@dataclass
class FakeRitualsBackend:
    """In-memory stand-in for the Rituals API, implementing the Transport protocol.

    ``*_status`` other than 200 raise ``RitualsTransportError`` the same way
    ``HttpTransport`` does.
    """

    account_hash: str | None = "ah1"
    login_status: int = 200
    hubs: list[dict[str, Any]] = field(default_factory=lambda: [{"hub": {"hash": "h1", "attributes": {"fanc": "0"}}}])
    hubs_status: int = 200
    state: Any = field(default_factory=hub_payload)
    state_status: int = 200
    update_status: int = 200
    apply_updates: bool = True
    network_down: bool = False
    calls: list[tuple[str, str, dict[str, str] | None]] = field(default_factory=list)

    def endpoints(self) -> list[str]:
        return [endpoint for _, endpoint, _ in self.calls]

    def count(self, prefix: str) -> int:
        return sum(1 for endpoint in self.endpoints() if endpoint.startswith(prefix))

    def _check(self, endpoint: str, status: int) -> None:
        if self.network_down:
            raise RitualsTransportError(f"Request to {endpoint} failed: connection refused", endpoint=endpoint)
        if status != 200:
            raise RitualsTransportError(f"HTTP {status} from {endpoint}", status_code=status, endpoint=endpoint)

    async def get_json(self, endpoint: str) -> Any:
        self.calls.append(("GET", endpoint, None))
        if endpoint.startswith("/api/account/hubs/"):
            self._check(endpoint, self.hubs_status)
            return self.hubs
        if endpoint.startswith("/api/account/hub/"):
            self._check(endpoint, self.state_status)
            return json.loads(json.dumps(self.state))
        raise AssertionError(f"Unexpected endpoint in fake backend: {endpoint}")

    async def post_form(self, endpoint: str, form: Mapping[str, str]) -> Any:
        self.calls.append(("POST", endpoint, dict(form)))
        if endpoint == "/ocapi/login":
            self._check(endpoint, self.login_status)
            return {"account_hash": self.account_hash}
        if endpoint == "/api/hub/update/attr":
            self._check(endpoint, self.update_status)
            if self.apply_updates and isinstance(self.state, dict) and "hub" in self.state:
                patch = json.loads(form["json"])["attr"]
                self.state["hub"]["attributes"].update(patch)
            return {}
        raise AssertionError(f"Unexpected endpoint in fake backend: {endpoint}")


@pytest.fixture
def config(tmp_path: Any) -> RitualsConfig:
    return RitualsConfig(email="user@example.com", password="secret", storage_dir=str(tmp_path / "storage"))


@pytest.fixture
def backend() -> FakeRitualsBackend:
    return FakeRitualsBackend()


@pytest.fixture
def store() -> MemoryCredentialStore:
    return MemoryCredentialStore()
