"""Earthquake event to synth parameter mapping."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .parameter_curves import CurveType, map_range
from ..data.schema import DatasetRanges, EarthquakeEvent, FieldRange, LONGITUDE_RANGE

logger = logging.getLogger(__name__)


@dataclass
class ParameterMapping:
    """Defines how an event field maps to a synth parameter.

    The input range is not stored here: it comes from the dataset ranges
    (magnitude, depth, significance) or the fixed longitude range at
    mapping time.
    """

    event_field: str  # magnitude, depth, significance, longitude
    output_min: float
    output_max: float
    curve: CurveType = CurveType.LINEAR


@dataclass
class MappingPreset:
    """Complete event-to-synth mapping configuration."""

    name: str
    description: str

    # Louder for bigger quakes
    amplitude_mapping: ParameterMapping = field(
        default_factory=lambda: ParameterMapping(
            event_field="magnitude",
            output_min=0.2,
            output_max=1.0,
        )
    )

    # Shallow quakes sound high, deep quakes low
    pitch_mapping: ParameterMapping = field(
        default_factory=lambda: ParameterMapping(
            event_field="depth",
            output_min=1000.0,
            output_max=200.0,
        )
    )

    # West hard left, east hard right
    pan_mapping: ParameterMapping = field(
        default_factory=lambda: ParameterMapping(
            event_field="longitude",
            output_min=-1.0,
            output_max=1.0,
        )
    )

    significance_mapping: ParameterMapping = field(
        default_factory=lambda: ParameterMapping(
            event_field="significance",
            output_min=0.0,
            output_max=1.0,
        )
    )

    # Bigger quakes ring longer
    duration_mapping: ParameterMapping = field(
        default_factory=lambda: ParameterMapping(
            event_field="magnitude",
            output_min=500.0,
            output_max=2000.0,
        )
    )


@dataclass(frozen=True)
class SynthParams:
    """Parameters for a single synth trigger."""

    amplitude: float
    pitch: float  # Hz
    pan: float  # -1 (left) to 1 (right)
    tsunami: int  # 0 or 1
    significance_norm: float
    magnitude: float  # Raw, passed through
    depth: float  # Raw km, passed through
    duration_ms: float


def field_value(event: EarthquakeEvent, event_field: str) -> float:
    """Read the raw value a mapping is driven by."""
    if event_field == "magnitude":
        return event.magnitude
    if event_field == "depth":
        return event.depth_km
    if event_field == "significance":
        return float(event.significance)
    if event_field == "longitude":
        return event.longitude
    raise ValueError(f"Unknown event field: {event_field}")


def field_range(ranges: DatasetRanges, event_field: str) -> FieldRange:
    """Input range for a field: dataset-derived, or global for longitude."""
    if event_field == "magnitude":
        return ranges.magnitude
    if event_field == "depth":
        return ranges.depth
    if event_field == "significance":
        return ranges.significance
    if event_field == "longitude":
        return LONGITUDE_RANGE
    raise ValueError(f"Unknown event field: {event_field}")


def apply_mapping(mapping: ParameterMapping, event: EarthquakeEvent, ranges: DatasetRanges) -> float:
    """Evaluate one parameter mapping for an event (clamped to its output range)."""
    span = field_range(ranges, mapping.event_field)
    return map_range(
        field_value(event, mapping.event_field),
        span.min,
        span.max,
        mapping.output_min,
        mapping.output_max,
        mapping.curve,
    )


class SoundMapper:
    """Maps earthquake events to synth parameters.

    Stateless apart from the preset: the same event and ranges always
    produce the same ``SynthParams``.
    """

    def __init__(self, preset: Optional[MappingPreset] = None):
        self.preset = preset or MappingPreset(
            name="default",
            description="Magnitude drives loudness and length, depth drives pitch",
        )

    def set_preset(self, preset: MappingPreset) -> None:
        self.preset = preset
        logger.info(f"Mapping preset set to '{preset.name}'")

    def map(self, event: EarthquakeEvent, ranges: DatasetRanges) -> SynthParams:
        """Compute synth parameters for an event.

        Args:
            event: Event to sonify (raw fields may lie outside ``ranges``)
            ranges: Dataset-derived normalisation ranges

        Returns:
            SynthParams with every mapped value inside its output range
        """
        p = self.preset
        params = SynthParams(
            amplitude=apply_mapping(p.amplitude_mapping, event, ranges),
            pitch=apply_mapping(p.pitch_mapping, event, ranges),
            pan=apply_mapping(p.pan_mapping, event, ranges),
            tsunami=1 if event.tsunami_flag else 0,
            significance_norm=apply_mapping(p.significance_mapping, event, ranges),
            magnitude=event.magnitude,
            depth=event.depth_km,
            duration_ms=apply_mapping(p.duration_mapping, event, ranges),
        )
        logger.debug(f"Mapped event {event.id}: {params}")
        return params
