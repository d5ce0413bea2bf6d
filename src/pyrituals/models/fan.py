"""Accessory-facing fan state, derived from a hub snapshot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pyrituals.models.hub import Hub
from pyrituals.speed import to_percent


class FanState(BaseModel):
    """``on`` and ``speed`` as shown by the accessory. Never stored."""

    model_config = ConfigDict(frozen=True)

    on: bool = False
    speed: int = Field(default=0, ge=0, le=100)

    @classmethod
    def from_hub(cls, hub: Hub | None) -> FanState:
        """Derive the state from *hub*; a missing snapshot reads as off."""
        if hub is None:
            return cls()
        return cls(
            on=hub.is_on,
            speed=to_percent(hub.attributes.speedc, hub.attributes.fanc),
        )
