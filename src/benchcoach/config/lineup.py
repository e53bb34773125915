"""Slot layouts for supported league lineups."""

from __future__ import annotations

import logging
import os
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple

from benchcoach.models import Slot, SlotType


logger = logging.getLogger(__name__)

_LAYOUT_ENV = "BENCHCOACH_LAYOUT"
_LAYOUT_DEFAULT = "ESPN_STANDARD"

# Platform lineup-slot ids; repeated slot types get a numeric suffix.
_SLOT_TYPE_IDS: Mapping[SlotType, str] = {
    SlotType.POINT_GUARD: "0",
    SlotType.SHOOTING_GUARD: "1",
    SlotType.SMALL_FORWARD: "2",
    SlotType.POWER_FORWARD: "3",
    SlotType.CENTER: "4",
    SlotType.GUARD: "5",
    SlotType.FORWARD: "6",
    SlotType.UTIL: "11",
}


@dataclass(frozen=True)
class LineupLayout:
    key: str
    description: str
    slot_order: Tuple[SlotType, ...]

    def build_slots(self) -> Tuple[Slot, ...]:
        """Return slots in fill order with stable ids."""

        totals = Counter(self.slot_order)
        seen: Counter[SlotType] = Counter()
        slots = []
        for slot_type in self.slot_order:
            seen[slot_type] += 1
            slot_id = _SLOT_TYPE_IDS[slot_type]
            if totals[slot_type] > 1:
                slot_id = f"{slot_id}-{seen[slot_type]}"
            slots.append(Slot(slot_id=slot_id, slot_type=slot_type))
        return tuple(slots)


_FULL_ORDER: Tuple[SlotType, ...] = (
    SlotType.POINT_GUARD,
    SlotType.SHOOTING_GUARD,
    SlotType.SMALL_FORWARD,
    SlotType.POWER_FORWARD,
    SlotType.CENTER,
    SlotType.GUARD,
    SlotType.FORWARD,
    SlotType.UTIL,
    SlotType.UTIL,
    SlotType.UTIL,
)

_LAYOUTS: Dict[str, LineupLayout] = {
    "ESPN_STANDARD": LineupLayout(
        key="ESPN_STANDARD",
        description="ESPN head-to-head categories default",
        slot_order=_FULL_ORDER,
    ),
    "ESPN_POINTS": LineupLayout(
        key="ESPN_POINTS",
        description="ESPN head-to-head points default",
        slot_order=_FULL_ORDER,
    ),
    "ESPN_COMPACT": LineupLayout(
        key="ESPN_COMPACT",
        description="One slot per position plus three utility slots",
        slot_order=(
            SlotType.POINT_GUARD,
            SlotType.SHOOTING_GUARD,
            SlotType.SMALL_FORWARD,
            SlotType.POWER_FORWARD,
            SlotType.CENTER,
            SlotType.UTIL,
            SlotType.UTIL,
            SlotType.UTIL,
        ),
    ),
    "UTIL_ONLY": LineupLayout(
        key="UTIL_ONLY",
        description="Five interchangeable utility slots",
        slot_order=(SlotType.UTIL,) * 5,
    ),
}


def iter_layouts() -> Iterable[LineupLayout]:
    """Return an iterator of all configured layouts."""

    return _LAYOUTS.values()


def get_layout(key: str) -> LineupLayout:
    """Fetch a layout by key, raising KeyError if missing."""

    normalized = key.strip().upper()
    if normalized not in _LAYOUTS:
        raise KeyError(f"No lineup layout configured for key={key!r}")
    return _LAYOUTS[normalized]


def build_slots(key: str) -> Tuple[Slot, ...]:
    return get_layout(key).build_slots()


def default_layout_key() -> str:
    raw = os.getenv(_LAYOUT_ENV)
    if raw is None or not raw.strip():
        return _LAYOUT_DEFAULT
    normalized = raw.strip().upper()
    if normalized not in _LAYOUTS:
        logger.warning("Unknown layout for %s: %s; using default %s", _LAYOUT_ENV, raw, _LAYOUT_DEFAULT)
        return _LAYOUT_DEFAULT
    return normalized
