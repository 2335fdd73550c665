"""Presentation projection: geo <-> screen and per-event visual parameters.

Nothing here is stored on the event. Views are recomputed from the raw
fields on demand, so a dragged or edited event always draws where its
data says it is.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .parameter_curves import clamp, map_range
from ..data.schema import DatasetRanges, EarthquakeEvent

Color = Tuple[int, int, int]

# Significance gradient endpoints (low -> high)
LOW_SIGNIFICANCE_COLOR: Color = (255, 220, 80)
HIGH_SIGNIFICANCE_COLOR: Color = (200, 30, 30)
# Depth gradient endpoints (shallow -> deep)
SHALLOW_COLOR: Color = (60, 60, 70)
DEEP_COLOR: Color = (10, 10, 40)
TSUNAMI_COLOR: Color = (180, 0, 0)


def lerp_color(a: Color, b: Color, t: float) -> Color:
    """Blend two RGB colours; t is clamped to [0, 1]."""
    t = clamp(t, 0.0, 1.0)
    return tuple(int(round(ca + (cb - ca) * t)) for ca, cb in zip(a, b))  # type: ignore[return-value]


class MapProjection:
    """Equirectangular projection onto a ``width`` x ``height`` pixel map.

    Longitude -180 is the left edge, latitude 90 the top edge.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Map size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def to_screen(self, latitude: float, longitude: float) -> Tuple[float, float]:
        x = (longitude + 180.0) / 360.0 * self.width
        y = (90.0 - latitude) / 180.0 * self.height
        return x, y

    def to_geo(self, x: float, y: float) -> Tuple[float, float]:
        """Inverse of ``to_screen``. Points off the map snap to its edge."""
        x = clamp(x, 0.0, float(self.width))
        y = clamp(y, 0.0, float(self.height))
        longitude = x / self.width * 360.0 - 180.0
        latitude = 90.0 - y / self.height * 180.0
        return latitude, longitude


@dataclass(frozen=True)
class EventView:
    """Derived drawing parameters for one event."""

    event_id: int
    x: float
    y: float
    diameter: float
    fill: Color
    background: Color

    def contains(self, px: float, py: float) -> bool:
        """Circular hit test: strictly inside half the diameter."""
        return math.hypot(px - self.x, py - self.y) < self.diameter / 2


def event_view(
    event: EarthquakeEvent,
    ranges: DatasetRanges,
    projection: MapProjection,
    min_diameter: float = 6.0,
    max_diameter: float = 60.0,
) -> EventView:
    """Project an event to screen space.

    Uses the same ``map_range`` clamp/lerp as the sound mapper so that a
    louder circle is always a bigger circle.
    """
    x, y = projection.to_screen(event.latitude, event.longitude)
    diameter = map_range(event.magnitude, ranges.magnitude.min, ranges.magnitude.max, min_diameter, max_diameter)
    sig_norm = map_range(event.significance, ranges.significance.min, ranges.significance.max, 0.0, 1.0)
    fill = lerp_color(LOW_SIGNIFICANCE_COLOR, HIGH_SIGNIFICANCE_COLOR, sig_norm)

    if event.tsunami_flag:
        background = TSUNAMI_COLOR
    else:
        depth_norm = map_range(event.depth_km, ranges.depth.min, ranges.depth.max, 0.0, 1.0)
        background = lerp_color(SHALLOW_COLOR, DEEP_COLOR, depth_norm)

    return EventView(
        event_id=event.id,
        x=x,
        y=y,
        diameter=diameter,
        fill=fill,
        background=background,
    )
