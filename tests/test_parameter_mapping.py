"""Tests for event-to-synth parameter mapping."""

import math

import pytest

from quakesynth.data.store import compute_ranges
from quakesynth.mapping.parameter_curves import CurveType, clamp, map_range
from quakesynth.mapping.sound_mapper import SoundMapper
from quakesynth.presets import DEFAULT_PRESETS, get_preset

from conftest import make_event


def in_bounds(params):
    return (
        0.2 <= params.amplitude <= 1.0
        and 200.0 <= params.pitch <= 1000.0
        and -1.0 <= params.pan <= 1.0
        and 0.0 <= params.significance_norm <= 1.0
        and 500.0 <= params.duration_ms <= 2000.0
    )


def test_map_range_linear():
    assert map_range(5.0, 0.0, 10.0, 0.0, 100.0) == pytest.approx(50.0)
    assert map_range(0.0, -180.0, 180.0, -1.0, 1.0) == pytest.approx(0.0)


def test_map_range_inverted_output():
    assert map_range(0.0, 0.0, 100.0, 1000.0, 200.0) == pytest.approx(1000.0)
    assert map_range(100.0, 0.0, 100.0, 1000.0, 200.0) == pytest.approx(200.0)
    assert map_range(25.0, 0.0, 100.0, 1000.0, 200.0) == pytest.approx(800.0)


def test_map_range_clamps_out_of_range_input():
    assert map_range(-50.0, 0.0, 10.0, 0.2, 1.0) == pytest.approx(0.2)
    assert map_range(500.0, 0.0, 10.0, 0.2, 1.0) == pytest.approx(1.0)
    assert map_range(500.0, 0.0, 10.0, 1000.0, 200.0) == pytest.approx(200.0)


def test_map_range_degenerate_input_returns_midpoint():
    assert map_range(7.0, 7.0, 7.0, 0.2, 1.0) == pytest.approx(0.6)
    assert map_range(3.0, 7.0, 7.0, 500.0, 2000.0) == pytest.approx(1250.0)
    assert map_range(7.0, 7.0, 7.0, 1000.0, 200.0) == pytest.approx(600.0)


@pytest.mark.parametrize("curve", list(CurveType))
def test_every_curve_stays_in_output_range(curve):
    for i in range(-5, 16):
        value = map_range(i / 10.0, 0.0, 1.0, 0.2, 1.0, curve)
        assert 0.2 <= value <= 1.0
    assert map_range(0.0, 0.0, 1.0, 0.2, 1.0, curve) == pytest.approx(0.2)
    assert map_range(1.0, 0.0, 1.0, 0.2, 1.0, curve) == pytest.approx(1.0)


def test_clamp_accepts_either_bound_order():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(5.0, 1.0, 0.0) == 1.0
    assert clamp(-5.0, 1000.0, 200.0) == 200.0


def test_single_event_maps_to_midpoints():
    event = make_event(0, magnitude=7.0, depth_km=100.0, latitude=10.0, longitude=20.0, significance=800)
    ranges = compute_ranges([event])

    params = SoundMapper().map(event, ranges)

    assert params.amplitude == pytest.approx(0.6)
    assert params.pitch == pytest.approx(600.0)
    assert params.significance_norm == pytest.approx(0.5)
    assert params.duration_ms == pytest.approx(1250.0)
    # Longitude always uses the global range
    assert params.pan == pytest.approx(20.0 / 180.0)
    for value in (params.amplitude, params.pitch, params.pan, params.significance_norm, params.duration_ms):
        assert math.isfinite(value)


def test_min_and_max_magnitude_hit_range_ends():
    low = make_event(0, magnitude=6.5, depth_km=10.0, significance=100)
    high = make_event(1, magnitude=9.0, depth_km=500.0, significance=1000)
    ranges = compute_ranges([low, high])
    mapper = SoundMapper()

    low_params = mapper.map(low, ranges)
    high_params = mapper.map(high, ranges)

    assert low_params.amplitude == pytest.approx(0.2)
    assert low_params.duration_ms == pytest.approx(500.0)
    assert high_params.amplitude == pytest.approx(1.0)
    assert high_params.duration_ms == pytest.approx(2000.0)
    # Shallow is high-pitched
    assert low_params.pitch == pytest.approx(1000.0)
    assert high_params.pitch == pytest.approx(200.0)
    assert low_params.significance_norm == pytest.approx(0.0)
    assert high_params.significance_norm == pytest.approx(1.0)


def test_raw_fields_pass_through():
    event = make_event(0, magnitude=6.2, depth_km=33.0, tsunami_flag=1)
    params = SoundMapper().map(event, compute_ranges([event]))
    assert params.magnitude == 6.2
    assert params.depth == 33.0
    assert params.tsunami == 1


def test_pan_follows_longitude():
    events = [make_event(0, longitude=-180.0), make_event(1, longitude=90.0), make_event(2, longitude=180.0)]
    ranges = compute_ranges(events)
    mapper = SoundMapper()

    pans = [mapper.map(e, ranges).pan for e in events]

    assert pans == pytest.approx([-1.0, 0.5, 1.0])


@pytest.mark.parametrize("preset_name", sorted(DEFAULT_PRESETS))
def test_outputs_clamped_for_values_outside_dataset_ranges(preset_name):
    dataset = [
        make_event(0, magnitude=6.0, depth_km=50.0, significance=200),
        make_event(1, magnitude=7.0, depth_km=150.0, significance=600),
    ]
    ranges = compute_ranges(dataset)
    mapper = SoundMapper(get_preset(preset_name))
    extremes = [
        make_event(2, magnitude=4.0, depth_km=0.0, longitude=-180.0, significance=0),
        make_event(3, magnitude=9.0, depth_km=700.0, longitude=180.0, significance=5000),
        make_event(4, magnitude=6.5, depth_km=100.0, longitude=0.0, significance=400),
    ]

    for event in dataset + extremes:
        assert in_bounds(mapper.map(event, ranges))


def test_mapping_is_deterministic(sample_events):
    ranges = compute_ranges(sample_events)
    mapper = SoundMapper()
    assert mapper.map(sample_events[1], ranges) == mapper.map(sample_events[1], ranges)


def test_unknown_preset_falls_back_to_linear():
    assert get_preset("nonexistent").name == "linear"


def test_set_preset_changes_curve():
    low = make_event(0, magnitude=5.0)
    mid = make_event(1, magnitude=6.0)
    high = make_event(2, magnitude=7.0)
    ranges = compute_ranges([low, mid, high])
    mapper = SoundMapper()
    linear_amp = mapper.map(mid, ranges).amplitude

    mapper.set_preset(get_preset("rumble"))

    assert mapper.preset.name == "rumble"
    assert mapper.map(mid, ranges).amplitude < linear_amp
    assert mapper.map(high, ranges).amplitude == pytest.approx(1.0)


def test_soft_preset_eases_duration():
    events = [make_event(0, magnitude=5.0), make_event(1, magnitude=5.5), make_event(2, magnitude=7.0)]
    ranges = compute_ranges(events)
    mapper = SoundMapper(get_preset("soft"))

    # Quarter of the way up the magnitude range: ease-in-out stays below linear
    assert mapper.map(events[1], ranges).duration_ms == pytest.approx(500.0 + 0.125 * 1500.0)
    assert mapper.map(events[0], ranges).duration_ms == pytest.approx(500.0)
    assert mapper.map(events[2], ranges).duration_ms == pytest.approx(2000.0)
