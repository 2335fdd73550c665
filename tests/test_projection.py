"""Tests for the presentation projection."""

import pytest

from quakesynth.data.store import compute_ranges
from quakesynth.mapping.projection import (
    HIGH_SIGNIFICANCE_COLOR,
    LOW_SIGNIFICANCE_COLOR,
    TSUNAMI_COLOR,
    MapProjection,
    event_view,
    lerp_color,
)

from conftest import make_event


def test_to_screen_corners():
    projection = MapProjection(1200, 600)
    assert projection.to_screen(90.0, -180.0) == (0.0, 0.0)
    assert projection.to_screen(-90.0, 180.0) == (1200.0, 600.0)
    assert projection.to_screen(0.0, 0.0) == (600.0, 300.0)


@pytest.mark.parametrize("point", [(0.0, 0.0), (300.0, 150.0), (1000.0, 420.0), (1200.0, 600.0)])
def test_to_geo_inverts_to_screen(point):
    projection = MapProjection(1200, 600)
    lat, lon = projection.to_geo(*point)
    x, y = projection.to_screen(lat, lon)
    assert (x, y) == pytest.approx(point)


def test_to_geo_clamps_off_map_points():
    projection = MapProjection(1200, 600)
    assert projection.to_geo(-50.0, -50.0) == (90.0, -180.0)
    assert projection.to_geo(5000.0, 5000.0) == (-90.0, 180.0)


def test_invalid_map_size():
    with pytest.raises(ValueError):
        MapProjection(0, 600)


def test_event_view_diameter_and_colors():
    small = make_event(0, magnitude=5.0, significance=100, depth_km=10.0)
    big = make_event(1, magnitude=8.0, significance=900, depth_km=300.0, tsunami_flag=1)
    ranges = compute_ranges([small, big])
    projection = MapProjection(1200, 600)

    small_view = event_view(small, ranges, projection, 6.0, 60.0)
    big_view = event_view(big, ranges, projection, 6.0, 60.0)

    assert small_view.diameter == pytest.approx(6.0)
    assert big_view.diameter == pytest.approx(60.0)
    assert small_view.fill == LOW_SIGNIFICANCE_COLOR
    assert big_view.fill == HIGH_SIGNIFICANCE_COLOR
    assert big_view.background == TSUNAMI_COLOR
    assert small_view.background != TSUNAMI_COLOR


def test_event_view_follows_edits():
    event = make_event(0, latitude=0.0, longitude=0.0)
    ranges = compute_ranges([event])
    projection = MapProjection(1200, 600)

    event.latitude = 45.0
    event.longitude = -90.0
    view = event_view(event, ranges, projection)

    assert (view.x, view.y) == pytest.approx((300.0, 150.0))


def test_contains_is_strict_circle():
    event = make_event(0)
    view = event_view(event, compute_ranges([event]), MapProjection(1200, 600), 20.0, 20.0)

    assert view.contains(view.x, view.y)
    assert view.contains(view.x + 9.9, view.y)
    assert not view.contains(view.x + 10.0, view.y)
    assert not view.contains(view.x + 8.0, view.y + 8.0)


def test_lerp_color_clamps():
    assert lerp_color((0, 0, 0), (100, 200, 255), 0.5) == (50, 100, 128)
    assert lerp_color((0, 0, 0), (100, 200, 255), 2.0) == (100, 200, 255)
