"""Shared per-session state passed to the controllers."""

import logging
from dataclasses import dataclass
from typing import Optional

from .data.schema import EarthquakeEvent
from .data.store import DataStore
from .mapping.sound_mapper import SoundMapper
from .transport.base import SendResult, Transport

logger = logging.getLogger(__name__)


@dataclass
class SessionContext:
    """Everything the controllers share: data, mapping, output and selection.

    The selection is held by event id, never by object reference.
    """

    store: DataStore
    mapper: SoundMapper
    transport: Transport
    selected_id: Optional[int] = None
    dragging: bool = False

    @property
    def selected_event(self) -> Optional[EarthquakeEvent]:
        if self.selected_id is None:
            return None
        return self.store.get(self.selected_id)

    def is_selected(self, event: EarthquakeEvent) -> bool:
        return self.selected_id is not None and event.id == self.selected_id

    def clear_selection(self) -> None:
        self.selected_id = None
        self.dragging = False

    def trigger(self, event: EarthquakeEvent) -> SendResult:
        """Map an event with the dataset ranges and send it to the synth."""
        params = self.mapper.map(event, self.store.ranges)
        return self.transport.send(params)
