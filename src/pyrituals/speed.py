"""Mapping between the 0-100 rotation speed and the hub's three speed levels.

The two directions are deliberately not inverses of each other:
``to_percent(to_level(50), "1") == 67``. Only the canonical outputs
33, 67 and 100 survive a round trip unchanged.
"""

from __future__ import annotations

from typing import Literal

SpeedLevel = Literal["1", "2", "3"]

SPEED_LEVELS: tuple[SpeedLevel, ...] = ("1", "2", "3")

_LOW_MAX = 33
_MEDIUM_MAX = 67


def to_level(percent: int) -> SpeedLevel:
    """Map a 0-100 rotation speed to a hub speed level."""
    if percent <= _LOW_MAX:
        return "1"
    if percent <= _MEDIUM_MAX:
        return "2"
    return "3"


def to_percent(level: str | None, power: str | None) -> int:
    """Map a hub speed level back to a 0-100 rotation speed.

    A hub that is powered off always reads as ``0``, whatever level it
    has stored. Unknown levels read as ``0`` as well.
    """
    if power == "0":
        return 0
    if level not in SPEED_LEVELS:
        return 0
    return round(100 * int(level) / len(SPEED_LEVELS))
