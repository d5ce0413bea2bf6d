"""Client configuration for pyrituals."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyrituals._constants import BASE_URL, DEFAULT_STORAGE_DIR, USER_AGENT
from pyrituals.exceptions import RitualsConfigError


@dataclasses.dataclass(frozen=True)
class RitualsConfig:
    """Client configuration.

    Parameters
    ----------
    email : str
        Rituals account email.
    password : str
        Rituals account password.
    base_url : str
        API base URL.
    storage_dir : str
        Directory holding the persisted account and hub hashes. Scope it
        to a single plugin instance.
    name : str
        Display name given to the fan accessory.
    user_agent : str
        User-Agent sent with every request.
    request_timeout : float or None
        Total per-request timeout in seconds. ``None`` keeps the aiohttp
        default.
    """

    email: str
    password: str
    base_url: str = BASE_URL
    storage_dir: str = DEFAULT_STORAGE_DIR
    name: str = "Genie"
    user_agent: str = USER_AGENT
    request_timeout: float | None = None

    def __post_init__(self) -> None:
        if not self.email or not self.password:
            raise RitualsConfigError("Both email and password are required")

    @classmethod
    def from_env(cls, **overrides: Any) -> RitualsConfig:
        """Create configuration from ``RITUALS_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "RITUALS_EMAIL": "email",
            "RITUALS_PASSWORD": "password",
            "RITUALS_BASE_URL": "base_url",
            "RITUALS_STORAGE_DIR": "storage_dir",
            "RITUALS_NAME": "name",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # request_timeout is numeric, handle separately
        timeout_env = env.get("RITUALS_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise RitualsConfigError(f"RITUALS_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        config_kwargs.update(overrides)
        config_kwargs.setdefault("email", "")
        config_kwargs.setdefault("password", "")

        return cls(**config_kwargs)
