"""Base model for Rituals API payloads.

Every response model inherits from :class:`RitualsBaseModel` which
provides:

* frozen instances, so a snapshot can never be half-updated in place
* ``extra="ignore"`` for the many fields the API sends that the client
  does not interpret
* a ``raw`` dict that captures the original payload
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def coerce_str(value: Any) -> Any:
    """Stringify numeric attribute values (``1`` -> ``"1"``)."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    return value


def safe_int(value: Any) -> int | None:
    """Parse a value to int, returning None for missing/invalid."""
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


class RitualsBaseModel(BaseModel):
    """Base for Rituals API response models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, repr=False)
    """Original API response dict."""

    @model_validator(mode="before")
    @classmethod
    def _stash_raw(cls, values: Any) -> Any:
        # Only auto-stash raw when not explicitly provided.
        if not isinstance(values, dict) or "raw" in values:
            return values
        merged = dict(values)
        merged["raw"] = values
        return merged
