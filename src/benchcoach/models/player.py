"""Canonical player model consumed by the assignment engine."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Position(str, Enum):
    POINT_GUARD = "PG"
    SHOOTING_GUARD = "SG"
    SMALL_FORWARD = "SF"
    POWER_FORWARD = "PF"
    CENTER = "C"


class HealthStatus(str, Enum):
    HEALTHY = "HEALTHY"
    DAY_TO_DAY = "DTD"
    OUT = "O"
    SUSPENDED = "SSPD"


# Best to worst.
HEALTH_LEVELS: Tuple[HealthStatus, ...] = (
    HealthStatus.HEALTHY,
    HealthStatus.DAY_TO_DAY,
    HealthStatus.OUT,
    HealthStatus.SUSPENDED,
)


class Player(BaseModel):
    """A rostered player as reported by the league data layer.

    ``opponent`` is only set when the player has a game in the current
    scoring period.
    """

    player_id: str = Field(..., min_length=1)
    name: str
    positions: Tuple[Position, ...] = Field(..., min_length=1)
    health: HealthStatus = HealthStatus.HEALTHY
    opponent: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_playing(self) -> bool:
        return self.opponent is not None

    @property
    def health_rank(self) -> int:
        return HEALTH_LEVELS.index(self.health)

    def compare_health(self, other: "Player") -> bool:
        """Return True if this player is at least as healthy as ``other``."""

        return self.health_rank <= other.health_rank
