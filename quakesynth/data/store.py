"""Dataset loading and normalisation ranges."""

import csv
import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from pydantic import ValidationError

from ..errors import LoadError
from .schema import DATASET_COLUMNS, DatasetRanges, EarthquakeEvent, FieldRange

logger = logging.getLogger(__name__)


def load(source: Union[str, Path]) -> list[EarthquakeEvent]:
    """Load events from a CSV file, preserving row order.

    Args:
        source: Path to a CSV file with a header row containing the
            ``date_time``, ``magnitude``, ``depth``, ``latitude``,
            ``longitude``, ``sig`` and ``tsunami`` columns.

    Returns:
        Events in input order, each with ``id`` equal to its row index.

    Raises:
        LoadError: If the file is missing, a column is missing, a row
            does not parse, or there are no rows.
    """
    path = Path(source)
    if not path.is_file():
        raise LoadError(f"Dataset not found: {path}")

    events: list[EarthquakeEvent] = []
    try:
        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = [c for c in DATASET_COLUMNS.values() if c not in (reader.fieldnames or [])]
            if missing:
                raise LoadError(f"Dataset {path} is missing columns: {', '.join(missing)}")

            for row_num, row in enumerate(reader):
                record = {column: row[column] for column in DATASET_COLUMNS.values()}
                try:
                    events.append(EarthquakeEvent(id=row_num, **record))
                except ValidationError as e:
                    # +2: header line, 1-based line numbers
                    raise LoadError(f"Malformed row at {path}:{row_num + 2}: {e}") from e
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LoadError(f"Could not read dataset {path}: {e}") from e

    if not events:
        raise LoadError(f"Dataset {path} contains no events")

    logger.info(f"Loaded {len(events)} events from {path}")
    return events


def compute_ranges(events: Sequence[EarthquakeEvent]) -> DatasetRanges:
    """Scan events once for min/max magnitude, depth and significance.

    The scan is seeded from the first event, so an empty sequence has
    no defined range and is rejected.

    Raises:
        LoadError: If ``events`` is empty.
    """
    if not events:
        raise LoadError("Cannot compute ranges of an empty dataset")

    first = events[0]
    min_mag = max_mag = first.magnitude
    min_depth = max_depth = first.depth_km
    min_sig = max_sig = first.significance

    for event in events[1:]:
        min_mag = min(min_mag, event.magnitude)
        max_mag = max(max_mag, event.magnitude)
        min_depth = min(min_depth, event.depth_km)
        max_depth = max(max_depth, event.depth_km)
        min_sig = min(min_sig, event.significance)
        max_sig = max(max_sig, event.significance)

    return DatasetRanges(
        magnitude=FieldRange(min=min_mag, max=max_mag),
        depth=FieldRange(min=min_depth, max=max_depth),
        significance=FieldRange(min=min_sig, max=max_sig),
    )


class DataStore:
    """Owns the ordered event sequence and its normalisation ranges.

    Ranges are computed once in ``load`` and never recomputed, even when
    individual events are edited later.
    """

    def __init__(self):
        self._events: list[EarthquakeEvent] = []
        self._ranges: Optional[DatasetRanges] = None
        self.source: Optional[Path] = None

    @classmethod
    def from_events(cls, events: Sequence[EarthquakeEvent]) -> "DataStore":
        """Build a store from already-constructed events."""
        store = cls()
        store._ranges = compute_ranges(events)
        store._events = list(events)
        return store

    def load(self, source: Union[str, Path]) -> list[EarthquakeEvent]:
        """Load the dataset and derive ranges. Raises LoadError on failure."""
        events = load(source)
        self._ranges = compute_ranges(events)
        self._events = events
        self.source = Path(source)
        r = self._ranges
        logger.info(
            f"Ranges: magnitude {r.magnitude.min}-{r.magnitude.max}, "
            f"depth {r.depth.min}-{r.depth.max}, significance {r.significance.min}-{r.significance.max}"
        )
        return events

    @property
    def is_loaded(self) -> bool:
        return self._ranges is not None

    @property
    def events(self) -> list[EarthquakeEvent]:
        return self._events

    @property
    def ranges(self) -> DatasetRanges:
        if self._ranges is None:
            raise LoadError("No dataset loaded")
        return self._ranges

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[EarthquakeEvent]:
        return iter(self._events)

    def __getitem__(self, index: int) -> EarthquakeEvent:
        return self._events[index]

    def get(self, event_id: int) -> Optional[EarthquakeEvent]:
        """Look up an event by its stable id."""
        # ids are row positions, so this is a direct index
        if 0 <= event_id < len(self._events) and self._events[event_id].id == event_id:
            return self._events[event_id]
        return next((e for e in self._events if e.id == event_id), None)

    def active_count(self) -> int:
        return sum(1 for e in self._events if e.active)

    def deactivate_all(self) -> None:
        for event in self._events:
            event.active = False
