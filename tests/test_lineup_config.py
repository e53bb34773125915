import logging

import pytest

from benchcoach.config import build_slots, default_layout_key, get_layout, iter_layouts
from benchcoach.models import SlotType


def test_get_layout_is_case_insensitive():
    layout = get_layout("espn_standard")
    assert layout.key == "ESPN_STANDARD"
    assert layout.slot_order[-1] is SlotType.UTIL


def test_get_layout_missing_raises():
    with pytest.raises(KeyError):
        get_layout("CURLING")


def test_build_slots_assigns_unique_ids():
    slots = build_slots("ESPN_STANDARD")

    assert [slot.slot_id for slot in slots] == [
        "0", "1", "2", "3", "4", "5", "6", "11-1", "11-2", "11-3",
    ]
    assert len({slot.slot_id for slot in slots}) == len(slots)


def test_every_layout_builds():
    for layout in iter_layouts():
        slots = layout.build_slots()
        assert len(slots) == len(layout.slot_order)


def test_default_layout_key_from_env(monkeypatch):
    monkeypatch.delenv("BENCHCOACH_LAYOUT", raising=False)
    assert default_layout_key() == "ESPN_STANDARD"

    monkeypatch.setenv("BENCHCOACH_LAYOUT", "util_only")
    assert default_layout_key() == "UTIL_ONLY"


def test_default_layout_key_warns_on_unknown(monkeypatch, caplog):
    monkeypatch.setenv("BENCHCOACH_LAYOUT", "nope")

    with caplog.at_level(logging.WARNING, logger="benchcoach.config.lineup"):
        assert default_layout_key() == "ESPN_STANDARD"

    assert "BENCHCOACH_LAYOUT" in caplog.text
