"""Position to slot eligibility rules."""

from __future__ import annotations

from typing import Dict, FrozenSet, Union

from benchcoach.errors import InvalidPosition, InvalidSlotType
from benchcoach.models import Player, Position, Slot, SlotType


# UTIL accepts every position and is handled before this table is consulted.
_POSITION_SLOT_TYPES: Dict[Position, FrozenSet[SlotType]] = {
    Position.POINT_GUARD: frozenset({SlotType.POINT_GUARD, SlotType.GUARD}),
    Position.SHOOTING_GUARD: frozenset({SlotType.SHOOTING_GUARD, SlotType.GUARD}),
    Position.SMALL_FORWARD: frozenset({SlotType.SMALL_FORWARD, SlotType.FORWARD}),
    Position.POWER_FORWARD: frozenset({SlotType.POWER_FORWARD, SlotType.FORWARD}),
    Position.CENTER: frozenset({SlotType.CENTER}),
}


def parse_position(value: Union[Position, str]) -> Position:
    try:
        return Position(value)
    except ValueError:
        raise InvalidPosition(value) from None


def parse_slot_type(value: Union[SlotType, Slot, str]) -> SlotType:
    if isinstance(value, Slot):
        return value.slot_type
    try:
        return SlotType(value)
    except ValueError:
        raise InvalidSlotType(value) from None


def position_matches_slot(
    position: Union[Position, str],
    slot_type: Union[SlotType, Slot, str],
) -> bool:
    """Return True if a player at ``position`` may fill a slot of ``slot_type``.

    Raises :class:`InvalidPosition` for codes outside PG/SG/SF/PF/C, even when
    the slot is UTIL.
    """

    resolved_position = parse_position(position)
    resolved_type = parse_slot_type(slot_type)
    if resolved_type is SlotType.UTIL:
        return True
    return resolved_type in _POSITION_SLOT_TYPES[resolved_position]


def player_matches_slot(player: Player, slot: Union[Slot, SlotType, str]) -> bool:
    return any(position_matches_slot(position, slot) for position in player.positions)
