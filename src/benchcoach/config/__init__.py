"""Configuration helpers for lineup layouts."""

from .lineup import LineupLayout, build_slots, default_layout_key, get_layout, iter_layouts

__all__ = [
    "LineupLayout",
    "build_slots",
    "default_layout_key",
    "get_layout",
    "iter_layouts",
]
