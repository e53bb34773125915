"""Roster slots and immutable roster snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import Player


class SlotType(str, Enum):
    POINT_GUARD = "PG"
    SHOOTING_GUARD = "SG"
    SMALL_FORWARD = "SF"
    POWER_FORWARD = "PF"
    CENTER = "C"
    GUARD = "G"
    FORWARD = "F"
    UTIL = "UTIL"


SPECIFIC_SLOT_TYPES: Tuple[SlotType, ...] = (
    SlotType.POINT_GUARD,
    SlotType.SHOOTING_GUARD,
    SlotType.SMALL_FORWARD,
    SlotType.POWER_FORWARD,
    SlotType.CENTER,
)
GENERIC_SLOT_TYPES: Tuple[SlotType, ...] = (SlotType.GUARD, SlotType.FORWARD, SlotType.UTIL)


class Slot(BaseModel):
    slot_id: str = Field(..., min_length=1)
    slot_type: SlotType

    model_config = ConfigDict(frozen=True)


def _occupant_id(player: Optional[Player]) -> Optional[str]:
    return player.player_id if player is not None else None


@dataclass(frozen=True)
class RosterState:
    """Snapshot of slots, managed players and the slot -> player mapping.

    The mapping is exposed read-only; use :meth:`assign_player` or a
    :class:`RosterBuilder` to derive a changed roster.
    """

    slots: Tuple[Slot, ...]
    players: Tuple[Player, ...]
    mapping: Mapping[str, Optional[Player]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "slots", tuple(self.slots))
        object.__setattr__(self, "players", tuple(self.players))
        object.__setattr__(self, "mapping", MappingProxyType(dict(self.mapping)))

    def __hash__(self) -> int:
        return hash(
            (
                tuple(slot.slot_id for slot in self.slots),
                tuple(player.player_id for player in self.players),
                tuple(sorted((slot_id, _occupant_id(player) or "") for slot_id, player in self.mapping.items())),
            )
        )

    @property
    def playing_players(self) -> Tuple[Player, ...]:
        return tuple(player for player in self.players if player.is_playing)

    @property
    def has_room_for_everyone(self) -> bool:
        return len(self.playing_players) <= len(self.slots)

    def get_slot_by_id(self, slot_id: Optional[str]) -> Optional[Slot]:
        for slot in self.slots:
            if slot.slot_id == slot_id:
                return slot
        return None

    def get_player_by_id(self, player_id: Optional[str]) -> Optional[Player]:
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def current_player(self, slot: Slot) -> Optional[Player]:
        return self.mapping.get(slot.slot_id)

    def current_slot(self, player: Player) -> Optional[Slot]:
        """Return the slot occupied by ``player``, matched by ``player_id``."""

        for slot_id, occupant in self.mapping.items():
            if occupant is not None and occupant.player_id == player.player_id:
                return self.get_slot_by_id(slot_id)
        return None

    def assign_player(self, player: Optional[Player], slot: Slot) -> "RosterState":
        """Return a copy of this roster with ``slot`` holding ``player``."""

        return RosterBuilder.from_state(self).assign(player, slot).build()

    def is_equivalent_to(self, other: "RosterState") -> bool:
        slot_ids = [slot.slot_id for slot in self.slots]
        slot_ids.extend(slot.slot_id for slot in other.slots)
        slot_ids.extend(self.mapping)
        slot_ids.extend(other.mapping)
        return all(
            _occupant_id(self.mapping.get(slot_id)) == _occupant_id(other.mapping.get(slot_id))
            for slot_id in slot_ids
        )


class RosterBuilder:
    """Accumulates slot assignments and freezes them into a RosterState once."""

    def __init__(
        self,
        slots: Iterable[Slot],
        players: Iterable[Player],
        mapping: Optional[Mapping[str, Optional[Player]]] = None,
    ):
        self.slots = tuple(slots)
        self.players = tuple(players)
        self._mapping: Dict[str, Optional[Player]] = dict(mapping or {})
        self._built = False

    @classmethod
    def from_state(cls, state: RosterState) -> "RosterBuilder":
        return cls(state.slots, state.players, state.mapping)

    def assign(self, player: Optional[Player], slot: Slot) -> "RosterBuilder":
        if self._built:
            raise RuntimeError("RosterBuilder has already been finalized")
        self._mapping[slot.slot_id] = player
        return self

    def build(self) -> RosterState:
        if self._built:
            raise RuntimeError("RosterBuilder has already been finalized")
        self._built = True
        return RosterState(slots=self.slots, players=self.players, mapping=self._mapping)
