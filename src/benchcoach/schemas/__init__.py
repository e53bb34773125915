"""Pydantic models for roster I/O."""

from .roster import (
    PlayerMovePayload,
    PlayerPayload,
    RosterDiffResponse,
    RosterPayload,
    SlotChangePayload,
    SlotPayload,
)

__all__ = [
    "PlayerMovePayload",
    "PlayerPayload",
    "RosterDiffResponse",
    "RosterPayload",
    "SlotChangePayload",
    "SlotPayload",
]
