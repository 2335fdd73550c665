"""Session wiring: data, mapping, transport and both controllers."""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import Settings, settings as default_settings
from .context import SessionContext
from .data.store import DataStore
from .interaction.controller import DEPTH_STEP, MAGNITUDE_STEP, EditableField, InteractionController
from .mapping.projection import EventView, MapProjection, event_view
from .mapping.sound_mapper import SoundMapper
from .playback.controller import PlaybackController
from .playback.schema import PlaybackState, PlaybackStatus
from .presets.defaults import get_preset
from .transport.base import Transport
from .transport.factory import create_transport

logger = logging.getLogger(__name__)


class Session:
    """One run of the sonification: owns every component and routes user input.

    A frontend calls ``tick()`` once per frame, forwards pointer and key
    events, and draws ``views()``.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[Transport] = None,
        store: Optional[DataStore] = None,
    ):
        self.config = config or default_settings
        cfg = self.config

        if transport is None:
            transport = create_transport(
                "udp" if cfg.output_enabled else "none",
                host=cfg.host,
                port=cfg.port,
            )

        self.context = SessionContext(
            store=store or DataStore(),
            mapper=SoundMapper(get_preset(cfg.mapping_preset)),
            transport=transport,
        )
        self.projection = MapProjection(cfg.map_width, cfg.map_height)
        self.playback = PlaybackController(self.context, frames_per_event=cfg.frames_per_event)
        self.interaction = InteractionController(
            self.context,
            self.playback,
            self.projection,
            drag_throttle_ticks=cfg.drag_throttle_ticks,
            min_diameter=cfg.min_diameter,
            max_diameter=cfg.max_diameter,
        )
        self.show_map = cfg.show_map
        self.tick_count = 0

        # key -> action
        self._key_actions = {
            " ": self.playback.toggle_pause,
            "space": self.playback.toggle_pause,
            "i": self.playback.skip_to_end,
            "r": self.playback.restart,
            "+": self.playback.faster,
            "=": self.playback.faster,
            "-": self.playback.slower,
            "m": self.toggle_map,
            "up": lambda: self.interaction.edit_field(EditableField.MAGNITUDE, MAGNITUDE_STEP),
            "down": lambda: self.interaction.edit_field(EditableField.MAGNITUDE, -MAGNITUDE_STEP),
            "right": lambda: self.interaction.edit_field(EditableField.DEPTH, DEPTH_STEP),
            "left": lambda: self.interaction.edit_field(EditableField.DEPTH, -DEPTH_STEP),
            "t": lambda: self.interaction.edit_field(EditableField.TSUNAMI),
        }

    @property
    def store(self) -> DataStore:
        return self.context.store

    @property
    def state(self) -> PlaybackState:
        return self.playback.state

    def load(self, source: Optional[Union[str, Path]] = None) -> None:
        """Load the dataset and start playback. Raises LoadError."""
        self.playback.load(source if source is not None or self.store.is_loaded else self.config.data_path)

    def tick(self) -> None:
        """Run one frame."""
        self.tick_count += 1
        self.playback.tick()
        self.interaction.tick()

    def handle_key(self, key: str) -> bool:
        """Dispatch a key press. Returns False for unbound keys."""
        action = self._key_actions.get(key if len(key) > 1 else key.lower())
        if action is None:
            logger.debug(f"Unbound key: {key!r}")
            return False
        action()
        return True

    def mouse_pressed(self, x: float, y: float) -> None:
        self.interaction.select(x, y)

    def mouse_dragged(self, x: float, y: float) -> None:
        self.interaction.drag(x, y)

    def mouse_released(self) -> None:
        self.interaction.release()

    def toggle_map(self) -> None:
        self.show_map = not self.show_map

    def views(self) -> list[EventView]:
        """Drawing parameters for every played event, in draw order."""
        if not self.store.is_loaded:
            return []
        cfg = self.config
        ranges = self.store.ranges
        return [
            event_view(e, ranges, self.projection, cfg.min_diameter, cfg.max_diameter)
            for e in self.store
            if e.active
        ]

    def get_status(self) -> PlaybackStatus:
        return self.playback.get_status()

    def close(self) -> None:
        self.context.transport.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
