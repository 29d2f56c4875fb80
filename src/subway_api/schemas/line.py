"""Line schemas - lines and their sections."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from subway_api.schemas.station import Station

# ============================================================================
# Line Schemas
# ============================================================================


class LineCreate(BaseModel):
    """Request model for creating a line with its first section.

    Distance is range-checked by the section itself so that a bad distance
    gets the same 400 response here as when adding a section.
    """

    name: str = Field(..., min_length=1, max_length=255)
    color: str = Field(..., min_length=1, max_length=32)
    up_station_id: UUID
    down_station_id: UUID
    distance: int


class LineUpdate(BaseModel):
    """Request model for updating a line."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    color: str | None = Field(default=None, min_length=1, max_length=32)


class Line(BaseModel):
    """A line response with its stations in travel order."""

    id: UUID
    name: str
    color: str
    stations: list[Station]
    distance: int
    created_at: datetime
    updated_at: datetime


# ============================================================================
# Section Schemas
# ============================================================================


class SectionCreate(BaseModel):
    """Request model for adding a section to a line."""

    up_station_id: UUID
    down_station_id: UUID
    distance: int


class Section(BaseModel):
    """A section response."""

    id: UUID
    line_id: UUID
    up_station_id: UUID
    down_station_id: UUID
    distance: int
