"""Attribute writes followed by a confirming pull."""

from __future__ import annotations

import logging

from pyrituals._api.update import build_update_form
from pyrituals._constants import HUB_UPDATE_ENDPOINT
from pyrituals._redact import redact_for_log
from pyrituals._transport import Transport
from pyrituals.exceptions import RitualsCommandError, RitualsStateError, RitualsTransportError
from pyrituals.models.hub import Hub
from pyrituals.session import SessionContext
from pyrituals.speed import SPEED_LEVELS
from pyrituals.state.synchronizer import StateSynchronizer

_logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Sends single-attribute patches.

    The snapshot is never edited optimistically: every accepted write is
    followed by exactly one pull, and the pulled hub is returned. A failed
    confirming pull does not fail the write; the previous snapshot (possibly
    ``None``) is returned instead. Writes are not serialized against each
    other.
    """

    def __init__(self, transport: Transport, synchronizer: StateSynchronizer) -> None:
        self._transport = transport
        self._synchronizer = synchronizer

    async def set_power(self, context: SessionContext, on: bool) -> Hub | None:
        return await self._update(context, "fanc", "1" if on else "0")

    async def set_speed_level(self, context: SessionContext, level: str) -> Hub | None:
        """Write a speed level.

        Callers must only do this while the hub is known to be on; the
        precondition is not checked here.
        """
        if level not in SPEED_LEVELS:
            raise ValueError(f"speed level must be one of {SPEED_LEVELS}, got {level!r}")
        return await self._update(context, "speedc", level)

    async def _update(self, context: SessionContext, key: str, value: str) -> Hub | None:
        form = build_update_form(context.hub_hash, key, value)
        _logger.debug("Updating hub form=%s", redact_for_log(form))
        try:
            await self._transport.post_form(HUB_UPDATE_ENDPOINT, form)
        except RitualsTransportError as exc:
            _logger.error("Update hub failed (%s=%s): %s", key, value, exc)
            raise RitualsCommandError.from_transport("Update hub failed", exc) from exc

        _logger.info("Updated hub successfully (%s=%s)", key, value)
        try:
            return await self._synchronizer.pull(context)
        except RitualsStateError as exc:
            _logger.warning("Refresh after update failed, keeping last known state: %s", exc)
            return self._synchronizer.snapshot
