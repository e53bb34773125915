"""Exceptions raised by lineup assignment."""

from __future__ import annotations


class BenchcoachError(Exception):
    """Base class for benchcoach errors."""


class InvalidPosition(BenchcoachError, ValueError):
    def __init__(self, position: object):
        super().__init__(f"Unknown position type: {position!r}")
        self.position = position


class InvalidSlotType(BenchcoachError, ValueError):
    def __init__(self, slot_type: object):
        super().__init__(f"Unknown slot type: {slot_type!r}")
        self.slot_type = slot_type


class RosterPayloadError(BenchcoachError, ValueError):
    """Raised when a roster payload references an unknown slot or player."""
