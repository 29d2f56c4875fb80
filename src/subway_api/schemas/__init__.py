"""Pydantic schemas for API request/response models."""

from subway_api.schemas.line import Line, LineCreate, LineUpdate, Section, SectionCreate
from subway_api.schemas.station import Station, StationCreate

__all__ = [
    # Station
    "Station",
    "StationCreate",
    # Line
    "Line",
    "LineCreate",
    "LineUpdate",
    # Section
    "Section",
    "SectionCreate",
]
