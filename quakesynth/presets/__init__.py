"""Presets module - Mapping configuration presets."""

from .defaults import (
    DEFAULT_PRESETS,
    LINEAR,
    RUMBLE,
    SOFT,
    get_preset,
)
from ..mapping.sound_mapper import MappingPreset

__all__ = [
    "DEFAULT_PRESETS",
    "LINEAR",
    "RUMBLE",
    "SOFT",
    "get_preset",
    "MappingPreset",
]
