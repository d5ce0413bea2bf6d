"""Account models: login response and the two persisted identifiers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from pyrituals.models._base import RitualsBaseModel


class LoginResponse(RitualsBaseModel):
    """Body of a successful ``/ocapi/login`` exchange."""

    account_hash: str

    @field_validator("account_hash")
    @classmethod
    def _require_value(cls, value: str) -> str:
        if not value:
            raise ValueError("account_hash is empty")
        return value


class Credentials(BaseModel):
    """Session token. The account hash is sent in URL paths, never as a header."""

    model_config = ConfigDict(frozen=True)

    account_hash: str


class DeviceIdentifier(BaseModel):
    """Hub hash resolved from the first entry of the account's hub list."""

    model_config = ConfigDict(frozen=True)

    hub_hash: str
