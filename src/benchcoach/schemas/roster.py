from __future__ import annotations

from collections import Counter
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from benchcoach.eligibility import parse_position
from benchcoach.engine import lineup_moves, roster_changes
from benchcoach.errors import RosterPayloadError
from benchcoach.models import HealthStatus, Player, RosterState, Slot, SlotType


class SlotPayload(BaseModel):
    slot_id: str
    slot_type: SlotType

    def to_slot(self) -> Slot:
        return Slot(slot_id=self.slot_id, slot_type=self.slot_type)


class PlayerPayload(BaseModel):
    player_id: str
    name: str
    positions: List[str] = Field(..., min_length=1)
    health: HealthStatus = HealthStatus.HEALTHY
    opponent: str | None = None

    def to_player(self) -> Player:
        return Player(
            player_id=self.player_id,
            name=self.name,
            positions=tuple(parse_position(code) for code in self.positions),
            health=self.health,
            opponent=self.opponent,
        )

    @classmethod
    def from_player(cls, player: Player) -> "PlayerPayload":
        return cls(
            player_id=player.player_id,
            name=player.name,
            positions=[position.value for position in player.positions],
            health=player.health,
            opponent=player.opponent,
        )


class RosterPayload(BaseModel):
    slots: List[SlotPayload] = Field(default_factory=list)
    players: List[PlayerPayload] = Field(default_factory=list)
    assignments: Dict[str, Optional[str]] = Field(default_factory=dict)

    def to_state(self) -> RosterState:
        slots = [slot.to_slot() for slot in self.slots]
        slot_ids = {slot.slot_id for slot in slots}
        if len(slot_ids) != len(slots):
            duplicates = sorted(slot_id for slot_id, count in Counter(s.slot_id for s in slots).items() if count > 1)
            raise RosterPayloadError(f"Duplicate slot ids: {duplicates}")

        players: Dict[str, Player] = {}
        for payload in self.players:
            if payload.player_id in players:
                raise RosterPayloadError(f"Duplicate player id {payload.player_id!r}")
            players[payload.player_id] = payload.to_player()

        mapping: Dict[str, Optional[Player]] = {}
        for slot_id, player_id in self.assignments.items():
            if slot_id not in slot_ids:
                raise RosterPayloadError(f"Assignment references unknown slot {slot_id!r}")
            if player_id is None:
                mapping[slot_id] = None
                continue
            if player_id not in players:
                raise RosterPayloadError(
                    f"Assignment for slot {slot_id!r} references unknown player {player_id!r}"
                )
            mapping[slot_id] = players[player_id]
        return RosterState(slots=slots, players=list(players.values()), mapping=mapping)

    @classmethod
    def from_state(cls, state: RosterState) -> "RosterPayload":
        return cls(
            slots=[SlotPayload(slot_id=slot.slot_id, slot_type=slot.slot_type) for slot in state.slots],
            players=[PlayerPayload.from_player(player) for player in state.players],
            assignments={
                slot_id: player.player_id if player is not None else None
                for slot_id, player in state.mapping.items()
            },
        )


class SlotChangePayload(BaseModel):
    slot_id: str
    slot_type: SlotType
    before_player_id: str | None
    after_player_id: str | None


class PlayerMovePayload(BaseModel):
    player_id: str
    name: str
    from_slot_id: str | None
    to_slot_id: str | None


class RosterDiffResponse(BaseModel):
    unchanged: bool
    slot_changes: List[SlotChangePayload] = Field(default_factory=list)
    moves: List[PlayerMovePayload] = Field(default_factory=list)

    @classmethod
    def from_states(cls, before: RosterState, after: RosterState) -> "RosterDiffResponse":
        return cls(
            unchanged=before.is_equivalent_to(after),
            slot_changes=[
                SlotChangePayload(
                    slot_id=change.slot.slot_id,
                    slot_type=change.slot.slot_type,
                    before_player_id=change.before.player_id if change.before is not None else None,
                    after_player_id=change.after.player_id if change.after is not None else None,
                )
                for change in roster_changes(before, after)
            ],
            moves=[
                PlayerMovePayload(
                    player_id=move.player.player_id,
                    name=move.player.name,
                    from_slot_id=move.from_slot.slot_id if move.from_slot is not None else None,
                    to_slot_id=move.to_slot.slot_id if move.to_slot is not None else None,
                )
                for move in lineup_moves(before, after)
            ],
        )
