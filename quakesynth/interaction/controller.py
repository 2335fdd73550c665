"""Interactive selection, drag-to-relocate and field edits."""

import logging
from enum import Enum
from typing import Optional

from ..context import SessionContext
from ..data.schema import EarthquakeEvent
from ..mapping.parameter_curves import clamp
from ..mapping.projection import MapProjection, event_view
from ..playback.controller import PlaybackController
from ..playback.schema import PlaybackState

logger = logging.getLogger(__name__)

# Absolute edit bounds, independent of the dataset ranges
MAGNITUDE_BOUNDS = (4.0, 9.0)
DEPTH_BOUNDS = (0.0, 700.0)
MAGNITUDE_STEP = 0.1
DEPTH_STEP = 10.0


class EditableField(str, Enum):
    """Event fields the user can edit from the keyboard."""

    MAGNITUDE = "magnitude"
    DEPTH = "depth"
    TSUNAMI = "tsunami"


class InteractionController:
    """Handles pointer and keyboard editing of played events.

    Only responds while playback is INTERACTIVE; everything else, and any
    operation needing a selection when there is none, is a silent no-op.
    Every accepted action re-triggers the selected event on the synth,
    except drags, which send at most once per ``drag_throttle_ticks``.
    """

    def __init__(
        self,
        context: SessionContext,
        playback: PlaybackController,
        projection: MapProjection,
        drag_throttle_ticks: int = 5,
        min_diameter: float = 6.0,
        max_diameter: float = 60.0,
    ):
        self._context = context
        self._playback = playback
        self.projection = projection
        self.drag_throttle_ticks = max(1, int(drag_throttle_ticks))
        self.min_diameter = min_diameter
        self.max_diameter = max_diameter
        self._ticks_since_send: int = 0

    @property
    def is_available(self) -> bool:
        return self._playback.state == PlaybackState.INTERACTIVE

    @property
    def selected_event(self) -> Optional[EarthquakeEvent]:
        return self._context.selected_event

    @property
    def is_dragging(self) -> bool:
        return self._context.dragging

    def tick(self) -> None:
        """Advance the drag throttle by one tick."""
        self._ticks_since_send += 1

    def hit_test(self, x: float, y: float) -> Optional[EarthquakeEvent]:
        """Find the topmost active event under a screen point.

        Events are drawn in dataset order, so the last one drawn wins.
        """
        store = self._context.store
        for event in reversed(store.events):
            if not event.active:
                continue
            view = event_view(event, store.ranges, self.projection, self.min_diameter, self.max_diameter)
            if view.contains(x, y):
                return event
        return None

    def select(self, x: float, y: float) -> Optional[EarthquakeEvent]:
        """Select the event under the pointer, start dragging it and trigger it.

        A click on empty map clears the selection.
        """
        if not self.is_available:
            return None

        event = self.hit_test(x, y)
        if event is None:
            if self._context.selected_id is not None:
                logger.debug("Selection cleared")
            self._context.clear_selection()
            return None

        self._context.selected_id = event.id
        self._context.dragging = True
        self._ticks_since_send = 0
        self._context.trigger(event)
        logger.info(f"Selected event {event.id} ({event.timestamp}, M{event.magnitude})")
        return event

    def drag(self, x: float, y: float) -> bool:
        """Move the selected event to the pointer position.

        The position is updated on every call; the synth is re-triggered
        only when the throttle window has elapsed.

        Returns:
            True if a message was sent.
        """
        if not self.is_available or not self._context.dragging:
            return False
        event = self._context.selected_event
        if event is None:
            return False

        latitude, longitude = self.projection.to_geo(x, y)
        event.latitude = latitude
        event.longitude = longitude

        if self._ticks_since_send < self.drag_throttle_ticks:
            return False
        self._ticks_since_send = 0
        self._context.trigger(event)
        logger.debug(f"Dragged event {event.id} to ({latitude:.2f}, {longitude:.2f})")
        return True

    def release(self) -> None:
        """End the current drag; the selection is kept."""
        self._context.dragging = False

    def clear_selection(self) -> None:
        self._context.clear_selection()

    def edit_field(self, field: EditableField, delta: float = 0.0) -> Optional[EarthquakeEvent]:
        """Adjust a field of the selected event and re-trigger it.

        Magnitude is clamped to [4.0, 9.0] and depth to [0, 700] km; the
        tsunami flag toggles and ignores ``delta``. A clamped edit that
        changes nothing still triggers.

        Returns:
            The edited event, or None if nothing is selected.
        """
        if not self.is_available:
            return None
        event = self._context.selected_event
        if event is None:
            return None

        field = EditableField(field)
        if field == EditableField.MAGNITUDE:
            event.magnitude = round(clamp(event.magnitude + delta, *MAGNITUDE_BOUNDS), 6)
        elif field == EditableField.DEPTH:
            event.depth_km = round(clamp(event.depth_km + delta, *DEPTH_BOUNDS), 6)
        elif field == EditableField.TSUNAMI:
            event.tsunami_flag = 0 if event.tsunami_flag else 1

        self._context.trigger(event)
        logger.info(
            f"Edited event {event.id}: M{event.magnitude}, depth {event.depth_km} km, "
            f"tsunami {event.tsunami_flag}"
        )
        return event
