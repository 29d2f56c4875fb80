"""Domain model for subway lines: stations, sections and the section chain."""

from subway_api.domain.exceptions import (
    DisconnectedSectionError,
    DuplicateStationsError,
    IllegalChainStateError,
    InvalidDistanceError,
    InvalidPlacementError,
    InvalidSectionRemovalError,
    SameStationsError,
    SectionError,
    SectionRemovalTooShortError,
)
from subway_api.domain.line import Line
from subway_api.domain.section import Section
from subway_api.domain.sections import Sections
from subway_api.domain.station import Station

__all__ = [
    "DisconnectedSectionError",
    "DuplicateStationsError",
    "IllegalChainStateError",
    "InvalidDistanceError",
    "InvalidPlacementError",
    "InvalidSectionRemovalError",
    "Line",
    "SameStationsError",
    "Section",
    "SectionError",
    "SectionRemovalTooShortError",
    "Sections",
    "Station",
]
