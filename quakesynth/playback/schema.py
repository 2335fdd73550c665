"""Playback state models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PlaybackState(str, Enum):
    """Playback state machine states."""

    LOADING = "loading"  # Waiting for the dataset
    PLAYING = "playing"  # Advancing one event every N ticks
    INTERACTIVE = "interactive"  # Paused or finished; user edits events


class PlaybackStatus(BaseModel):
    """Current playback state for status display."""

    state: PlaybackState
    index: int = 0
    total_events: int = 0
    frames_per_event: int = 1
    progress: float = 0.0  # 0-1
    last_event_id: Optional[int] = None
    last_timestamp: str = ""
