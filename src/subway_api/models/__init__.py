"""SQLAlchemy models for the subway database."""

from subway_api.models.line import Line, Section
from subway_api.models.station import Station

__all__ = [
    "Line",
    "Section",
    "Station",
]
