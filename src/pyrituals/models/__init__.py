"""Data models for Rituals API payloads."""

from pyrituals.models._base import RitualsBaseModel
from pyrituals.models.account import Credentials, DeviceIdentifier, LoginResponse
from pyrituals.models.fan import FanState
from pyrituals.models.hub import (
    Hub,
    HubAttributes,
    HubEnvelope,
    HubListEntry,
    HubSensor,
    HubSensors,
    HubSummary,
)

__all__ = [
    "Credentials",
    "DeviceIdentifier",
    "FanState",
    "Hub",
    "HubAttributes",
    "HubEnvelope",
    "HubListEntry",
    "HubSensor",
    "HubSensors",
    "HubSummary",
    "LoginResponse",
    "RitualsBaseModel",
]
