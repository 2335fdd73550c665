"""Data module - Earthquake events and dataset loading."""

from .schema import EarthquakeEvent, FieldRange, DatasetRanges, LONGITUDE_RANGE, DATASET_COLUMNS
from .store import DataStore, load, compute_ranges

__all__ = [
    "EarthquakeEvent",
    "FieldRange",
    "DatasetRanges",
    "LONGITUDE_RANGE",
    "DATASET_COLUMNS",
    "DataStore",
    "load",
    "compute_ranges",
]
