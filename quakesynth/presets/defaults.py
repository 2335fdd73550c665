"""Default mapping presets."""

from ..mapping.sound_mapper import MappingPreset, ParameterMapping
from ..mapping.parameter_curves import CurveType


LINEAR = MappingPreset(
    name="linear",
    description="Straight linear mapping of every field (the reference mapping)",
)

RUMBLE = MappingPreset(
    name="rumble",
    description="Small quakes recede, large quakes dominate and sustain",
    amplitude_mapping=ParameterMapping(
        event_field="magnitude",
        output_min=0.2,
        output_max=1.0,
        curve=CurveType.EXPONENTIAL,
    ),
    pitch_mapping=ParameterMapping(
        event_field="depth",
        output_min=1000.0,
        output_max=200.0,
        curve=CurveType.EASE_OUT,  # Most events are shallow; spread them out
    ),
    duration_mapping=ParameterMapping(
        event_field="magnitude",
        output_min=500.0,
        output_max=2000.0,
        curve=CurveType.EASE_IN,
    ),
)

SOFT = MappingPreset(
    name="soft",
    description="Gentle level differences for long listening sessions",
    amplitude_mapping=ParameterMapping(
        event_field="magnitude",
        output_min=0.2,
        output_max=1.0,
        curve=CurveType.LOGARITHMIC,
    ),
    significance_mapping=ParameterMapping(
        event_field="significance",
        output_min=0.0,
        output_max=1.0,
        curve=CurveType.SMOOTHSTEP,
    ),
    duration_mapping=ParameterMapping(
        event_field="magnitude",
        output_min=500.0,
        output_max=2000.0,
        curve=CurveType.EASE_IN_OUT,
    ),
)

DEFAULT_PRESETS = {
    "linear": LINEAR,
    "rumble": RUMBLE,
    "soft": SOFT,
}


def get_preset(name: str) -> MappingPreset:
    """Get a mapping preset by name, falling back to the linear preset."""
    return DEFAULT_PRESETS.get(name, LINEAR)
