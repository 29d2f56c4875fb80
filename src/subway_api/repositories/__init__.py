"""Data access layer for the subway API."""

from subway_api.repositories import line, station

__all__ = [
    "line",
    "station",
]
