"""Playback module - Chronological event sequencer."""

from .schema import PlaybackState, PlaybackStatus
from .controller import PlaybackController

__all__ = [
    "PlaybackState",
    "PlaybackStatus",
    "PlaybackController",
]
