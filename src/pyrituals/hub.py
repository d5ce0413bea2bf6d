"""Hub identifier resolution."""

from __future__ import annotations

import logging

from pyrituals._api.hubs import hub_list_endpoint, parse_first_hub
from pyrituals._constants import HUB_HASH_KEY
from pyrituals._redact import mask_hash
from pyrituals._transport import Transport
from pyrituals.credentials import CredentialStore, load_key, save_key
from pyrituals.exceptions import RitualsHubError, RitualsTransportError
from pyrituals.models.account import Credentials, DeviceIdentifier

_logger = logging.getLogger(__name__)


class HubResolver:
    """Owns the hub hash.

    Once stored, the hash is assumed stable for the account and is never
    re-resolved. Resolution takes the first hub of the account list.
    """

    def __init__(self, store: CredentialStore, transport: Transport) -> None:
        self._store = store
        self._transport = transport
        self._device: DeviceIdentifier | None = None

    @property
    def device(self) -> DeviceIdentifier | None:
        return self._device

    async def ensure_hub(self, credentials: Credentials) -> DeviceIdentifier:
        if self._device is not None:
            return self._device

        stored = await load_key(self._store, HUB_HASH_KEY)
        if stored is not None:
            _logger.info("Hub hash restored from storage")
            self._device = DeviceIdentifier(hub_hash=stored)
            return self._device

        _logger.info("Getting hub hash")
        endpoint = hub_list_endpoint(credentials.account_hash)
        try:
            body = await self._transport.get_json(endpoint)
        except RitualsTransportError as exc:
            _logger.error("Get hub list failed: %s", exc)
            raise RitualsHubError.from_transport("Get hub list failed", exc) from exc

        try:
            entry = parse_first_hub(body, endpoint=endpoint)
        except RitualsHubError as exc:
            _logger.error("%s", exc)
            raise

        if isinstance(body, list) and len(body) > 1:
            _logger.info("Account has %d hubs, using the first one", len(body))

        hub_hash = entry.hub.hash
        await save_key(self._store, HUB_HASH_KEY, hub_hash)
        self._device = DeviceIdentifier(hub_hash=hub_hash)
        _logger.info("Hub found (%s)", mask_hash(hub_hash))
        return self._device

    def reset(self) -> None:
        self._device = None
