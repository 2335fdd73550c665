"""Interaction module - Selecting, dragging and editing events."""

from .controller import (
    InteractionController,
    EditableField,
    MAGNITUDE_BOUNDS,
    DEPTH_BOUNDS,
    MAGNITUDE_STEP,
    DEPTH_STEP,
)

__all__ = [
    "InteractionController",
    "EditableField",
    "MAGNITUDE_BOUNDS",
    "DEPTH_BOUNDS",
    "MAGNITUDE_STEP",
    "DEPTH_STEP",
]
