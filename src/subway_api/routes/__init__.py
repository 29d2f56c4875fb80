"""API routes for the subway API."""

from subway_api.routes.lines import router as lines_router
from subway_api.routes.stations import router as stations_router

__all__ = [
    "lines_router",
    "stations_router",
]
