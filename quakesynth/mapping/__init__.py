"""Mapping module - Earthquake events to synth and drawing parameters."""

from .sound_mapper import SoundMapper, MappingPreset, ParameterMapping, SynthParams
from .parameter_curves import CurveType, map_range, clamp
from .projection import MapProjection, EventView, event_view

__all__ = [
    "SoundMapper",
    "MappingPreset",
    "ParameterMapping",
    "SynthParams",
    "CurveType",
    "map_range",
    "clamp",
    "MapProjection",
    "EventView",
    "event_view",
]
