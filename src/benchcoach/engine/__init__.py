"""Lineup assignment engine."""

from .changes import PlayerMove, SlotChange, lineup_moves, roster_changes
from .observer import (
    AssignmentObserver,
    Decision,
    DecisionEvent,
    LoggingObserver,
    RecordingObserver,
)
from .service import calculate_new_roster, find_best_player_for_slot, get_healthiest_players

__all__ = [
    "AssignmentObserver",
    "Decision",
    "DecisionEvent",
    "LoggingObserver",
    "PlayerMove",
    "RecordingObserver",
    "SlotChange",
    "calculate_new_roster",
    "find_best_player_for_slot",
    "get_healthiest_players",
    "lineup_moves",
    "roster_changes",
]
