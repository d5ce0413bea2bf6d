"""pyrituals - Async Python client for the Rituals Perfume Genie cloud API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyrituals")
except PackageNotFoundError:
    __version__ = "0+local"
from pyrituals.accessory import AccessoryInformation, FanAccessory
from pyrituals.client import RitualsClient
from pyrituals.commands import CommandDispatcher
from pyrituals.config import RitualsConfig
from pyrituals.credentials import CredentialStore, DirectoryCredentialStore, MemoryCredentialStore
from pyrituals.exceptions import (
    RitualsApiError,
    RitualsCommandError,
    RitualsConfigError,
    RitualsError,
    RitualsHubError,
    RitualsSessionError,
    RitualsStateError,
    RitualsTransportError,
)
from pyrituals.hub import HubResolver
from pyrituals.models import Credentials, DeviceIdentifier, FanState, Hub, HubAttributes, HubSensors
from pyrituals.session import SessionContext, SessionManager
from pyrituals.speed import to_level, to_percent
from pyrituals.state import StateSynchronizer

__all__ = [
    "__version__",
    "AccessoryInformation",
    "CommandDispatcher",
    "CredentialStore",
    "Credentials",
    "DeviceIdentifier",
    "DirectoryCredentialStore",
    "FanAccessory",
    "FanState",
    "Hub",
    "HubAttributes",
    "HubResolver",
    "HubSensors",
    "MemoryCredentialStore",
    "RitualsApiError",
    "RitualsClient",
    "RitualsCommandError",
    "RitualsConfig",
    "RitualsConfigError",
    "RitualsError",
    "RitualsHubError",
    "RitualsSessionError",
    "RitualsStateError",
    "RitualsTransportError",
    "SessionContext",
    "SessionManager",
    "StateSynchronizer",
    "to_level",
    "to_percent",
]
