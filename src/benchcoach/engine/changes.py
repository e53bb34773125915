"""Compare two roster snapshots slot by slot and player by player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from benchcoach.models import Player, RosterState, Slot


@dataclass(frozen=True)
class SlotChange:
    slot: Slot
    before: Optional[Player]
    after: Optional[Player]


@dataclass(frozen=True)
class PlayerMove:
    """A player changing slots; ``None`` on either side means the bench."""

    player: Player
    from_slot: Optional[Slot]
    to_slot: Optional[Slot]


def _player_id(player: Optional[Player]) -> Optional[str]:
    return player.player_id if player is not None else None


def roster_changes(before: RosterState, after: RosterState) -> List[SlotChange]:
    """Return the slots (in ``after`` order) whose occupant differs."""

    changes: List[SlotChange] = []
    for slot in after.slots:
        old = before.mapping.get(slot.slot_id)
        new = after.mapping.get(slot.slot_id)
        if _player_id(old) != _player_id(new):
            changes.append(SlotChange(slot=slot, before=old, after=new))
    return changes


def lineup_moves(before: RosterState, after: RosterState) -> List[PlayerMove]:
    """Return one move per player whose slot differs between the snapshots."""

    players: Dict[str, Player] = {}
    for state in (before, after):
        for player in state.players:
            players.setdefault(player.player_id, player)
        for occupant in state.mapping.values():
            if occupant is not None:
                players.setdefault(occupant.player_id, occupant)

    moves: List[PlayerMove] = []
    for player in players.values():
        from_slot = before.current_slot(player)
        to_slot = after.current_slot(player)
        from_id = from_slot.slot_id if from_slot is not None else None
        to_id = to_slot.slot_id if to_slot is not None else None
        if from_id != to_id:
            moves.append(PlayerMove(player=player, from_slot=from_slot, to_slot=to_slot))
    return moves
