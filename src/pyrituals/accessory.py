"""Fan accessory adapter.

Translates characteristic get/set calls into client calls. Getters never
raise: a failed refresh falls back to the last snapshot, or to an off fan
when nothing was ever pulled.
"""

from __future__ import annotations

import dataclasses
import logging

from pyrituals._constants import MANUFACTURER, MODEL
from pyrituals.client import RitualsClient
from pyrituals.exceptions import RitualsError
from pyrituals.models.fan import FanState
from pyrituals.speed import to_level

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class AccessoryInformation:
    """Static metadata, read once when the accessory is created."""

    name: str
    manufacturer: str = MANUFACTURER
    model: str = MODEL
    serial_number: str = ""
    firmware_revision: str = ""


class FanAccessory:
    """On/off and rotation speed (0-100) for one hub."""

    def __init__(self, client: RitualsClient) -> None:
        self._client = client
        hub = client.snapshot
        self.information = AccessoryInformation(
            name=client.config.name,
            serial_number=(hub.hublot or "") if hub is not None else "",
            firmware_revision=hub.firmware_version if hub is not None else "",
        )

    async def _read_state(self) -> FanState:
        try:
            hub = await self._client.refresh()
        except RitualsError as exc:
            hub = self._client.snapshot
            _logger.warning(
                "State refresh failed, reporting %s: %s",
                "last known state" if hub is not None else "defaults",
                exc,
            )
        return FanState.from_hub(hub)

    async def get_on(self) -> bool:
        state = await self._read_state()
        _logger.info("Get Characteristic On -> %s", state.on)
        return state.on

    async def set_on(self, value: bool) -> None:
        _logger.info("Set Characteristic On -> %s", value)
        await self._client.set_power(bool(value))

    async def get_speed(self) -> int:
        state = await self._read_state()
        _logger.info("Get FanSpeed -> %s", state.speed)
        return state.speed

    async def set_speed(self, value: int) -> None:
        """Write the level for *value*, only while the fan is known to be on."""
        hub = self._client.snapshot
        if hub is None or not hub.is_on:
            _logger.info("Fan is off, speed %s not sent", value)
            return
        level = to_level(int(value))
        _logger.info("Set FanSpeed %s -> level %s", value, level)
        await self._client.set_speed_level(level)
