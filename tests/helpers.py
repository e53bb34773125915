from __future__ import annotations

from typing import Mapping, Optional, Sequence

from benchcoach.models import HealthStatus, Player, RosterState, Slot, SlotType


def make_player(
    player_id: str,
    positions: Sequence[str],
    *,
    health: str = "HEALTHY",
    playing: bool = True,
) -> Player:
    return Player(
        player_id=player_id,
        name=f"Player {player_id}",
        positions=tuple(positions),
        health=HealthStatus(health),
        opponent="BOS" if playing else None,
    )


def make_slot(slot_id: str, slot_type: str) -> Slot:
    return Slot(slot_id=slot_id, slot_type=SlotType(slot_type))


def make_state(
    slots: Sequence[Slot],
    players: Sequence[Player],
    assignments: Optional[Mapping[str, Optional[Player]]] = None,
) -> RosterState:
    return RosterState(slots=slots, players=players, mapping=dict(assignments or {}))


def occupant_ids(state: RosterState) -> dict[str, Optional[str]]:
    return {
        slot.slot_id: (state.mapping[slot.slot_id].player_id if state.mapping.get(slot.slot_id) else None)
        for slot in state.slots
    }
