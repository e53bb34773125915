"""Lineup value types shared by the engine and boundary schemas."""

from .player import HEALTH_LEVELS, HealthStatus, Player, Position
from .roster import (
    GENERIC_SLOT_TYPES,
    SPECIFIC_SLOT_TYPES,
    RosterBuilder,
    RosterState,
    Slot,
    SlotType,
)

__all__ = [
    "GENERIC_SLOT_TYPES",
    "HEALTH_LEVELS",
    "HealthStatus",
    "Player",
    "Position",
    "RosterBuilder",
    "RosterState",
    "SPECIFIC_SLOT_TYPES",
    "Slot",
    "SlotType",
]
