"""Shared fixtures for quakesynth tests."""

import csv

import pytest

from quakesynth.config import Settings
from quakesynth.data.schema import EarthquakeEvent
from quakesynth.data.store import DataStore
from quakesynth.session import Session
from quakesynth.transport.base import SendResult, Transport
from quakesynth.transport.message import encode_message

CSV_HEADER = ["date_time", "magnitude", "depth", "latitude", "longitude", "sig", "tsunami"]


class RecordingTransport(Transport):
    """Keeps every message instead of sending it."""

    def __init__(self):
        self.sent = []
        self.closed = False

    def send(self, params):
        self.sent.append(params)
        return SendResult(ok=True, message=encode_message(params))

    def close(self):
        self.closed = True


def make_event(event_id=0, **overrides):
    fields = dict(
        id=event_id,
        timestamp=f"2001-01-{event_id + 1:02d} 00:00",
        magnitude=6.0,
        depth_km=30.0,
        latitude=0.0,
        longitude=0.0,
        significance=500,
        tsunami_flag=0,
    )
    fields.update(overrides)
    return EarthquakeEvent(**fields)


def write_csv(path, rows, header=CSV_HEADER):
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)
    return path


@pytest.fixture
def recorder():
    return RecordingTransport()


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        output_enabled=False,
        frames_per_event=1,
        drag_throttle_ticks=5,
        map_width=1200,
        map_height=600,
        min_diameter=6.0,
        max_diameter=60.0,
    )


@pytest.fixture
def sample_events():
    # Spread out so their circles never overlap
    return [
        make_event(0, magnitude=5.0, depth_km=10.0, latitude=40.0, longitude=-120.0, significance=300),
        make_event(1, magnitude=7.5, depth_km=600.0, latitude=-20.0, longitude=170.0, significance=900, tsunami_flag=1),
        make_event(2, magnitude=6.0, depth_km=100.0, latitude=10.0, longitude=20.0, significance=500),
    ]


@pytest.fixture
def sample_csv(tmp_path):
    return write_csv(
        tmp_path / "quakes.csv",
        [
            ["2004-12-26 00:58", "9.1", "30", "3.3", "95.98", "1274", "1"],
            ["2010-02-27 06:34", "8.8", "22.9", "-36.12", "-72.9", "2910", "1"],
            ["2011-03-11 05:46", "9.1", "29", "38.3", "142.37", "2184", "1"],
            ["2015-04-25 06:11", "7.8", "8.2", "28.23", "84.73", "2820", "0"],
        ],
    )


@pytest.fixture
def session_factory(test_settings, recorder):
    def _build(events):
        return Session(test_settings, transport=recorder, store=DataStore.from_events(events))

    return _build


@pytest.fixture
def interactive_session(session_factory, sample_events):
    """A session whose events have all been played."""
    session = session_factory(sample_events)
    session.load()
    session.playback.skip_to_end()
    return session
