"""Greedy slot-by-slot lineup assignment."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from benchcoach.eligibility import player_matches_slot
from benchcoach.models import HEALTH_LEVELS, Player, RosterBuilder, RosterState, Slot

from .changes import roster_changes
from .observer import AssignmentObserver, Decision, DecisionEvent, LoggingObserver


logger = logging.getLogger(__name__)


def _notify(
    observer: AssignmentObserver,
    decision: Decision,
    slot: Slot,
    player: Optional[Player] = None,
) -> None:
    observer.on_decision(DecisionEvent(decision=decision, slot=slot, player=player))


def _find_by_id(players: Sequence[Player], player: Optional[Player]) -> Optional[Player]:
    if player is None:
        return None
    for candidate in players:
        if candidate.player_id == player.player_id:
            return candidate
    return None


def get_healthiest_players(players: Sequence[Player]) -> List[Player]:
    """Return the players sharing the best health level present, in input order."""

    for level in HEALTH_LEVELS:
        at_level = [player for player in players if player.health == level]
        if at_level:
            return at_level
    return []


def find_best_player_for_slot(
    roster_state: RosterState,
    slot: Slot,
    available_players: Sequence[Player],
    observer: Optional[AssignmentObserver] = None,
) -> Optional[Player]:
    """Pick the player to seat in ``slot`` from ``available_players``.

    ``roster_state`` is the roster as it was before the current pass and is
    only read for current assignments. Returns ``None`` when nobody can be
    seated; the caller decides what stays in the slot.
    """

    observer = observer or LoggingObserver()
    candidates = [player for player in available_players if player_matches_slot(player, slot)]
    if not candidates:
        _notify(observer, Decision.NO_CANDIDATES, slot)
        return None
    if len(candidates) == 1:
        _notify(observer, Decision.SINGLE_CANDIDATE, slot, candidates[0])
        return candidates[0]

    # An incumbent who is not the healthiest option may stay put only while
    # there is a slot for every playing player.
    healthiest = get_healthiest_players(candidates)
    incumbent = _find_by_id(candidates, roster_state.current_player(slot))
    if incumbent is not None and (
        roster_state.has_room_for_everyone or _find_by_id(healthiest, incumbent) is not None
    ):
        _notify(observer, Decision.INCUMBENT_RETAINED, slot, incumbent)
        return incumbent

    # The lineup page cannot move a player between two slots of the same type
    # in one step (UTIL to UTIL in practice), so such players are skipped.
    ranked = sorted(candidates, key=lambda player: player.health_rank)
    for player in ranked:
        current_slot = roster_state.current_slot(player)
        if current_slot is None or current_slot.slot_type != slot.slot_type:
            _notify(observer, Decision.FIRST_AVAILABLE, slot, player)
            return player

    _notify(observer, Decision.ALL_BLOCKED, slot)
    return None


def calculate_new_roster(
    roster_state: RosterState,
    observer: Optional[AssignmentObserver] = None,
) -> RosterState:
    """Return a new roster with every slot re-seated; ``roster_state`` is left as is."""

    observer = observer or LoggingObserver()
    builder = RosterBuilder.from_state(roster_state)
    available_players = list(roster_state.playing_players)

    for slot in roster_state.slots:
        chosen = find_best_player_for_slot(roster_state, slot, available_players, observer)
        if chosen is None:
            # Nobody playing can take the slot. Keep an eligible occupant when
            # that cannot seat them twice: they are idle or still unclaimed.
            current = roster_state.current_player(slot)
            if current is not None and player_matches_slot(current, slot):
                pooled = _find_by_id(available_players, current)
                if pooled is not None:
                    available_players.remove(pooled)
                    chosen = pooled
                elif not current.is_playing:
                    chosen = current
            _notify(
                observer,
                Decision.FALLBACK_KEPT if chosen is not None else Decision.FALLBACK_CLEARED,
                slot,
                chosen,
            )
        else:
            available_players.remove(chosen)
        builder.assign(chosen, slot)

    new_state = builder.build()
    logger.info(
        "Re-seated %d slots for %d playing players (%d changed)",
        len(roster_state.slots),
        len(roster_state.playing_players),
        len(roster_changes(roster_state, new_state)),
    )
    return new_state
