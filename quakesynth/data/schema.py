"""Earthquake event data models."""

from pydantic import BaseModel, ConfigDict, Field


# Column names in the input dataset, keyed by model field
DATASET_COLUMNS = {
    "timestamp": "date_time",
    "magnitude": "magnitude",
    "depth_km": "depth",
    "latitude": "latitude",
    "longitude": "longitude",
    "significance": "sig",
    "tsunami_flag": "tsunami",
}


class EarthquakeEvent(BaseModel):
    """One earthquake record plus its runtime playback flags.

    Screen position is not stored: it is derived from the raw
    fields by ``mapping.projection`` whenever it is needed.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True, allow_inf_nan=False)

    id: int = Field(ge=0, description="Stable identifier (row position in the dataset)")

    # Raw fields
    timestamp: str = Field(alias="date_time", description="Event time as given by the dataset")
    magnitude: float = Field(description="Magnitude, typically 4.0-9.5")
    depth_km: float = Field(alias="depth", ge=0, description="Hypocentre depth in km")
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    significance: int = Field(alias="sig", ge=0, description="USGS significance score")
    tsunami_flag: int = Field(alias="tsunami", ge=0, le=1)

    # Runtime fields
    active: bool = Field(default=False, description="True once the event has been played")
    user_created: bool = Field(default=False, description="Always False; events are only loaded")


class FieldRange(BaseModel):
    """Inclusive (min, max) span of one field across the dataset."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @property
    def is_degenerate(self) -> bool:
        return self.min == self.max


class DatasetRanges(BaseModel):
    """Normalisation ranges derived once from the loaded dataset."""

    model_config = ConfigDict(frozen=True)

    magnitude: FieldRange
    depth: FieldRange
    significance: FieldRange


# Longitude normalises against the whole globe, not the dataset
LONGITUDE_RANGE = FieldRange(min=-180.0, max=180.0)
