"""Playback controller state machine for chronological event sonification."""

import logging
from pathlib import Path
from typing import Optional, Union

from .schema import PlaybackState, PlaybackStatus
from ..context import SessionContext
from ..data.schema import EarthquakeEvent
from ..errors import LoadError

logger = logging.getLogger(__name__)


class PlaybackController:
    """State machine for stepping through the dataset in order.

    LOADING -> PLAYING once the dataset is loaded. PLAYING advances one
    event every ``frames_per_event`` ticks and hands over to INTERACTIVE
    when the events run out, or on pause / skip-to-end. INTERACTIVE goes
    back to PLAYING only by resume (while events remain) or restart.

    The number of active events always equals ``index``.
    """

    def __init__(self, context: SessionContext, frames_per_event: int = 10):
        self._context = context
        self._state: PlaybackState = PlaybackState.LOADING
        self._index: int = 0
        self._ticks_since_advance: int = 0
        self._frames_per_event: int = max(1, int(frames_per_event))

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def index(self) -> int:
        return self._index

    @property
    def frames_per_event(self) -> int:
        return self._frames_per_event

    @property
    def is_exhausted(self) -> bool:
        return self._index >= len(self._context.store)

    def load(self, source: Optional[Union[str, Path]] = None) -> None:
        """Load the dataset (if a source is given) and start playing.

        Raises:
            LoadError: If loading fails; the session cannot continue.
        """
        if self._state != PlaybackState.LOADING:
            logger.debug(f"load() ignored in state {self._state.value}")
            return

        store = self._context.store
        if source is not None:
            store.load(source)
        elif not store.is_loaded:
            raise LoadError("No dataset to play")

        self._index = 0
        self._ticks_since_advance = 0
        self._state = PlaybackState.PLAYING
        logger.info(f"Playing {len(store)} events, one every {self._frames_per_event} ticks")

    def tick(self) -> Optional[EarthquakeEvent]:
        """Advance by one tick.

        Returns:
            The event that was played this tick, if any.
        """
        if self._state != PlaybackState.PLAYING:
            return None

        if self.is_exhausted:
            self._state = PlaybackState.INTERACTIVE
            logger.info(f"Playback complete ({self._index} events); interactive mode")
            return None

        self._ticks_since_advance += 1
        if self._ticks_since_advance < self._frames_per_event:
            return None
        self._ticks_since_advance = 0

        event = self._context.store[self._index]
        event.active = True
        self._index += 1
        self._context.trigger(event)
        logger.debug(f"Played event {event.id} ({self._index}/{len(self._context.store)})")
        return event

    def pause(self) -> None:
        """Pause playback and hand control to interaction."""
        if self._state != PlaybackState.PLAYING:
            logger.debug(f"pause() ignored in state {self._state.value}")
            return
        self._state = PlaybackState.INTERACTIVE
        logger.info(f"Playback paused at {self._index}/{len(self._context.store)}")

    def resume(self) -> None:
        """Resume playback. No-op once every event has been played."""
        if self._state != PlaybackState.INTERACTIVE or self.is_exhausted:
            logger.debug(f"resume() ignored (state={self._state.value}, index={self._index})")
            return
        self._context.dragging = False
        self._state = PlaybackState.PLAYING
        logger.info(f"Playback resumed at {self._index}/{len(self._context.store)}")

    def toggle_pause(self) -> None:
        if self._state == PlaybackState.PLAYING:
            self.pause()
        else:
            self.resume()

    def skip_to_end(self) -> None:
        """Mark every remaining event played and go interactive."""
        if self._state != PlaybackState.PLAYING:
            logger.debug(f"skip_to_end() ignored in state {self._state.value}")
            return
        store = self._context.store
        for event in store.events[self._index:]:
            event.active = True
        self._index = len(store)
        self._state = PlaybackState.INTERACTIVE
        logger.info("Skipped to end; interactive mode")

    def restart(self) -> None:
        """Deactivate everything and play again from the first event."""
        if self._state != PlaybackState.INTERACTIVE:
            logger.debug(f"restart() ignored in state {self._state.value}")
            return
        self._context.store.deactivate_all()
        self._context.clear_selection()
        self._index = 0
        self._ticks_since_advance = 0
        self._state = PlaybackState.PLAYING
        logger.info("Playback restarted")

    def set_frames_per_event(self, frames: int) -> None:
        """Set the playback cadence (floored at 1 tick per event)."""
        self._frames_per_event = max(1, int(frames))
        logger.debug(f"Playback speed: one event every {self._frames_per_event} ticks")

    def faster(self) -> None:
        self.set_frames_per_event(self._frames_per_event - 1)

    def slower(self) -> None:
        self.set_frames_per_event(self._frames_per_event + 1)

    def get_status(self) -> PlaybackStatus:
        """Get current playback state for UI updates."""
        store = self._context.store
        total = len(store)
        last = store[self._index - 1] if self._index > 0 else None
        return PlaybackStatus(
            state=self._state,
            index=self._index,
            total_events=total,
            frames_per_event=self._frames_per_event,
            progress=self._index / total if total else 0.0,
            last_event_id=last.id if last else None,
            last_timestamp=last.timestamp if last else "",
        )
