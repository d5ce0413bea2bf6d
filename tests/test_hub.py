from __future__ import annotations

import pytest

from conftest import FakeRitualsBackend
from pyrituals.credentials import MemoryCredentialStore
from pyrituals.exceptions import RitualsHubError
from pyrituals.hub import HubResolver
from pyrituals.models.account import Credentials

CREDENTIALS = Credentials(account_hash="ah1")


@pytest.mark.asyncio
async def test_restores_hub_hash_without_network(backend: FakeRitualsBackend) -> None:
    store = MemoryCredentialStore({"rituals_hub_hash": "stored-hub"})

    device = await HubResolver(store, backend).ensure_hub(CREDENTIALS)

    assert device.hub_hash == "stored-hub"
    assert backend.calls == []


@pytest.mark.asyncio
async def test_first_hub_is_taken_and_persisted(backend: FakeRitualsBackend, store: MemoryCredentialStore) -> None:
    backend.hubs = [
        {"hub": {"hash": "first", "hublot": "LOT-1", "attributes": {"fanc": "0", "speedc": "1"}}},
        {"hub": {"hash": "second", "hublot": "LOT-2", "attributes": {"fanc": "1", "speedc": "3"}}},
    ]

    device = await HubResolver(store, backend).ensure_hub(CREDENTIALS)

    assert device.hub_hash == "first"
    assert store.get("rituals_hub_hash") == "first"
    assert backend.endpoints() == ["/api/account/hubs/ah1"]


@pytest.mark.asyncio
async def test_empty_hub_list_is_a_hub_error(backend: FakeRitualsBackend, store: MemoryCredentialStore) -> None:
    backend.hubs = []
    resolver = HubResolver(store, backend)

    with pytest.raises(RitualsHubError, match="No hubs"):
        await resolver.ensure_hub(CREDENTIALS)

    assert resolver.device is None
    assert store.get("rituals_hub_hash") is None


@pytest.mark.asyncio
async def test_entry_without_hash_is_a_hub_error(backend: FakeRitualsBackend, store: MemoryCredentialStore) -> None:
    backend.hubs = [{"hub": {"hublot": "LOT-1"}}]

    with pytest.raises(RitualsHubError, match="malformed"):
        await HubResolver(store, backend).ensure_hub(CREDENTIALS)


@pytest.mark.asyncio
async def test_non_200_is_a_hub_error(backend: FakeRitualsBackend, store: MemoryCredentialStore) -> None:
    backend.hubs_status = 500

    with pytest.raises(RitualsHubError) as exc_info:
        await HubResolver(store, backend).ensure_hub(CREDENTIALS)

    assert exc_info.value.status_code == 500
