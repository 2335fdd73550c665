"""Configuration settings for quakesynth."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """quakesynth configuration settings.

    Every field can be overridden with a ``QUAKESYNTH_`` environment
    variable or a ``.env`` file.
    """

    # Synth endpoint (Pure Data [netreceive -u])
    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)
    output_enabled: bool = True

    # Mapping preset: "linear" (default), "rumble", "soft"
    mapping_preset: str = "linear"

    # Dataset
    data_path: str = "data/earthquakes.csv"

    # Logging settings
    # Root log level (DEBUG, INFO, WARNING, ERROR)
    log_level: str = "INFO"
    log_level_playback: str = "INFO"
    log_level_interaction: str = "INFO"
    log_level_transport: str = "WARNING"  # Very verbose at DEBUG (one line per message)

    # Playback cadence
    frames_per_event: int = Field(default=10, ge=1)  # One event every N ticks
    target_fps: int = Field(default=60, ge=1)

    # Interaction
    drag_throttle_ticks: int = Field(default=5, ge=1)  # At most one send per N ticks while dragging

    # Map geometry (pixels)
    map_width: int = Field(default=1200, ge=1)
    map_height: int = Field(default=600, ge=1)
    min_diameter: float = 6.0
    max_diameter: float = 60.0
    show_map: bool = True

    @field_validator("log_level", "log_level_playback", "log_level_interaction", "log_level_transport")
    @classmethod
    def normalize_level(cls, v):
        return v.upper()

    class Config:
        env_prefix = "QUAKESYNTH_"
        env_file = ".env"


settings = Settings()
