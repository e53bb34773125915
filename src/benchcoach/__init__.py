"""Greedy lineup re-seating for fantasy basketball rosters."""

from benchcoach.eligibility import player_matches_slot, position_matches_slot
from benchcoach.engine import (
    Decision,
    DecisionEvent,
    LoggingObserver,
    RecordingObserver,
    calculate_new_roster,
    find_best_player_for_slot,
    get_healthiest_players,
    lineup_moves,
    roster_changes,
)
from benchcoach.errors import BenchcoachError, InvalidPosition, InvalidSlotType, RosterPayloadError
from benchcoach.models import (
    HealthStatus,
    Player,
    Position,
    RosterBuilder,
    RosterState,
    Slot,
    SlotType,
)

__all__ = [
    "BenchcoachError",
    "Decision",
    "DecisionEvent",
    "HealthStatus",
    "InvalidPosition",
    "InvalidSlotType",
    "LoggingObserver",
    "Player",
    "Position",
    "RecordingObserver",
    "RosterBuilder",
    "RosterPayloadError",
    "RosterState",
    "Slot",
    "SlotType",
    "calculate_new_roster",
    "find_best_player_for_slot",
    "get_healthiest_players",
    "lineup_moves",
    "player_matches_slot",
    "position_matches_slot",
    "roster_changes",
]
