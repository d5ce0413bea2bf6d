"""Pull-based hub state synchronizer."""

from __future__ import annotations

import logging

from pyrituals._api.hubs import hub_state_endpoint, parse_hub_state
from pyrituals._transport import Transport
from pyrituals.exceptions import RitualsStateError, RitualsTransportError
from pyrituals.models.hub import Hub
from pyrituals.session import SessionContext

_logger = logging.getLogger(__name__)


class StateSynchronizer:
    """Owns the latest hub snapshot.

    Concurrent pulls are last-write-wins. A failed pull leaves the previous
    snapshot in place.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
        self._snapshot: Hub | None = None

    @property
    def snapshot(self) -> Hub | None:
        return self._snapshot

    async def pull(self, context: SessionContext) -> Hub:
        endpoint = hub_state_endpoint(context.hub_hash)
        try:
            body = await self._transport.get_json(endpoint)
        except RitualsTransportError as exc:
            _logger.error("Get state failed: %s", exc)
            raise RitualsStateError.from_transport("Get state failed", exc) from exc

        try:
            hub = parse_hub_state(body, endpoint=endpoint)
        except RitualsStateError as exc:
            _logger.error("Get state failed: %s", exc)
            raise

        self._snapshot = hub
        _logger.debug("Hub state pulled fanc=%s speedc=%s", hub.attributes.fanc, hub.attributes.speedc)
        return hub

    def clear(self) -> None:
        self._snapshot = None
