"""Decision events emitted while a roster is being re-seated."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Protocol

from benchcoach.models import Player, Slot


logger = logging.getLogger(__name__)


class Decision(str, Enum):
    NO_CANDIDATES = "no_candidates"
    SINGLE_CANDIDATE = "single_candidate"
    INCUMBENT_RETAINED = "incumbent_retained"
    FIRST_AVAILABLE = "first_available"
    ALL_BLOCKED = "all_blocked"
    FALLBACK_KEPT = "fallback_kept"
    FALLBACK_CLEARED = "fallback_cleared"


@dataclass(frozen=True)
class DecisionEvent:
    decision: Decision
    slot: Slot
    player: Optional[Player] = None

    @property
    def player_id(self) -> Optional[str]:
        return self.player.player_id if self.player is not None else None


class AssignmentObserver(Protocol):
    def on_decision(self, event: DecisionEvent) -> None:
        ...


class LoggingObserver:
    """Default observer; writes every decision to the module logger at DEBUG."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def on_decision(self, event: DecisionEvent) -> None:
        self.log.debug(
            "%s: slot=%s type=%s player=%s",
            event.decision.value,
            event.slot.slot_id,
            event.slot.slot_type.value,
            event.player_id,
        )


class RecordingObserver:
    """Keeps events in memory, mostly for tests and dry-run reports."""

    def __init__(self) -> None:
        self.events: List[DecisionEvent] = []

    def on_decision(self, event: DecisionEvent) -> None:
        self.events.append(event)

    @property
    def decisions(self) -> List[Decision]:
        return [event.decision for event in self.events]

    def for_slot(self, slot_id: str) -> List[DecisionEvent]:
        return [event for event in self.events if event.slot.slot_id == slot_id]
