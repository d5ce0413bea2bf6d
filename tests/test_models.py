"""Tests for hub payload parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pyrituals.models.fan import FanState
from pyrituals.models.hub import Hub, HubEnvelope

FULL_HUB = {
    "hublot": "LOT-0001",
    "hash": "h1",
    "status": 1,
    "title": "Living room",
    "current_time": "2024-01-01 10:00:00",
    "ping_update": 60,
    "attributes": {"fanc": 1, "speedc": "2", "roomc": 3},
    "sensors": {
        "versionc": "1.0.4",
        "wific": {"id": 1, "title": "Good", "min_value": -60, "max_value": "0"},
        "fillc": {"id": 2, "title": "50-60%"},
        "rfidc": {"id": 3, "title": "The Ritual of Sakura"},
        "ipc": "192.168.1.50",
        "onlinec": "1",
    },
    "unknown_field": {"kept": "in raw"},
}


class TestHub:
    def test_full_payload(self) -> None:
        hub = Hub.model_validate(FULL_HUB)

        assert hub.hash == "h1"
        assert hub.is_on
        assert hub.speed_level == "2"
        assert hub.attributes.roomc == "3"
        assert hub.ping_update == "60"
        assert hub.firmware_version == "1.0.4"
        assert hub.fragrance == "The Ritual of Sakura"
        assert hub.fill_level == "50-60%"
        assert hub.sensors is not None
        assert hub.sensors.wific is not None
        assert hub.sensors.wific.min_value == "-60"
        assert hub.sensors.onlinec is None

    def test_raw_is_kept(self) -> None:
        hub = Hub.model_validate(FULL_HUB)
        assert hub.raw["unknown_field"] == {"kept": "in raw"}

    def test_minimal_payload(self) -> None:
        hub = Hub.model_validate({"hash": "h1", "attributes": {"fanc": "0", "speedc": "1"}})

        assert not hub.is_on
        assert hub.hublot is None
        assert hub.firmware_version == ""
        assert hub.fragrance is None

    @pytest.mark.parametrize("missing", ["fanc", "speedc"])
    def test_required_attributes(self, missing: str) -> None:
        attributes = {"fanc": "1", "speedc": "1"}
        del attributes[missing]
        with pytest.raises(ValidationError):
            Hub.model_validate({"hash": "h1", "attributes": attributes})

    def test_snapshot_is_frozen(self) -> None:
        hub = Hub.model_validate(FULL_HUB)
        with pytest.raises(ValidationError):
            hub.hash = "other"  # type: ignore[misc]

    def test_envelope(self) -> None:
        envelope = HubEnvelope.model_validate({"hub": FULL_HUB})
        assert envelope.hub.hublot == "LOT-0001"


class TestFanState:
    def test_no_snapshot_reads_off(self) -> None:
        assert FanState.from_hub(None) == FanState(on=False, speed=0)

    def test_on(self) -> None:
        hub = Hub.model_validate({"hash": "h1", "attributes": {"fanc": "1", "speedc": "3"}})
        assert FanState.from_hub(hub) == FanState(on=True, speed=100)

    def test_off_hides_speed(self) -> None:
        hub = Hub.model_validate({"hash": "h1", "attributes": {"fanc": "0", "speedc": "2"}})
        assert FanState.from_hub(hub) == FanState(on=False, speed=0)
