"""Hub (diffuser) models.

Fields are mapped from the ``/api/account/hubs/{account_hash}`` and
``/api/account/hub/{hub_hash}`` responses. Only ``hash``,
``attributes.fanc`` and ``attributes.speedc`` drive client behaviour;
everything else is passthrough metadata.
"""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from pyrituals.models._base import RitualsBaseModel, coerce_str, safe_int


class HubAttributes(RitualsBaseModel):
    """Writable hub attributes."""

    fanc: str
    """Power state, ``"0"`` (off) or ``"1"`` (on)."""
    speedc: str
    """Speed level, ``"1"`` to ``"3"``."""
    roomc: str | None = None
    """Room size setting."""
    resetc: str | None = None
    """Reset flag."""

    @field_validator("fanc", "speedc", "roomc", "resetc", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        return coerce_str(value)


class HubSensor(RitualsBaseModel):
    """A catalogue-style sensor reading (cartridge, fill level, wifi, ...)."""

    id: int | None = None
    sensor_id: int | None = None
    title: str | None = None
    description: str | None = None
    icon: str | None = None
    image: str | None = None
    discover_image: str | None = None
    discover_url: str | None = None
    min_value: str | None = None
    max_value: str | None = None
    interval: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    default: int | None = None

    @field_validator("id", "sensor_id", "default", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator(
        "title",
        "description",
        "min_value",
        "max_value",
        "interval",
        "created_at",
        "updated_at",
        mode="before",
    )
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        return coerce_str(value)


class HubSensors(RitualsBaseModel):
    """Read-only sensor block."""

    versionc: str | None = None
    """Firmware version string."""
    wific: HubSensor | None = None
    fillc: HubSensor | None = None
    rfidc: HubSensor | None = None
    """Cartridge (fragrance) tag."""
    rpsc: HubSensor | None = None
    onlinec: HubSensor | None = None
    ipc: str | None = None
    resetc: str | None = None
    chipidc: str | None = None
    errorc: str | None = None

    @field_validator("wific", "fillc", "rfidc", "rpsc", "onlinec", mode="before")
    @classmethod
    def _drop_non_objects(cls, value: Any) -> Any:
        # Some firmware reports plain strings here instead of sensor objects.
        return value if isinstance(value, dict) else None

    @field_validator("versionc", "ipc", "resetc", "chipidc", "errorc", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        return coerce_str(value)


class Hub(RitualsBaseModel):
    """Complete hub state as returned by the API."""

    hash: str
    """Opaque hub identifier used in state and update requests."""
    hublot: str | None = None
    """Serial number."""
    status: int | None = None
    title: str | None = None
    current_time: str | None = None
    ping_update: str | None = None
    attributes: HubAttributes
    sensors: HubSensors | None = None

    @field_validator("hublot", "title", "current_time", "ping_update", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        return coerce_str(value)

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> int | None:
        return safe_int(value)

    @property
    def is_on(self) -> bool:
        return self.attributes.fanc == "1"

    @property
    def speed_level(self) -> str:
        return self.attributes.speedc

    @property
    def firmware_version(self) -> str:
        if self.sensors is None:
            return ""
        return self.sensors.versionc or ""

    @property
    def fragrance(self) -> str | None:
        if self.sensors is None or self.sensors.rfidc is None:
            return None
        return self.sensors.rfidc.title

    @property
    def fill_level(self) -> str | None:
        if self.sensors is None or self.sensors.fillc is None:
            return None
        return self.sensors.fillc.title


class HubEnvelope(RitualsBaseModel):
    """``{"hub": {...}}`` wrapper used by both hub endpoints."""

    hub: Hub


class HubSummary(RitualsBaseModel):
    """Entry of the account hub list.

    Listing entries may omit attributes, so only the hash is required.
    """

    hash: str
    hublot: str | None = None
    status: int | None = None
    title: str | None = None

    @field_validator("hublot", "title", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Any:
        return coerce_str(value)

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("hash")
    @classmethod
    def _require_hash(cls, value: str) -> str:
        if not value:
            raise ValueError("hub hash is empty")
        return value


class HubListEntry(RitualsBaseModel):
    hub: HubSummary
