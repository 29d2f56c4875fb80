"""Station CRUD endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from subway_api.database import get_db
from subway_api.repositories import station as station_repo
from subway_api.schemas import Station, StationCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stations", tags=["stations"])


@router.post("", response_model=Station, status_code=status.HTTP_201_CREATED)
async def create_station(
    station_create: StationCreate,
    db: AsyncSession = Depends(get_db),
) -> Station:
    """Create a new station. Station names are unique."""
    station = await station_repo.create_station(db, station_create)
    logger.info("Created station: station_id=%s name=%s", station.id, station.name)
    return station


@router.get("", response_model=list[Station])
async def list_stations(db: AsyncSession = Depends(get_db)) -> list[Station]:
    """List all stations."""
    return await station_repo.list_stations(db)


@router.get("/{station_id}", response_model=Station)
async def get_station(station_id: UUID, db: AsyncSession = Depends(get_db)) -> Station:
    """Get a station by ID."""
    station = await station_repo.get_station(db, station_id)
    if station is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Station {station_id} not found",
        )
    return station


@router.delete("/{station_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_station(station_id: UUID, db: AsyncSession = Depends(get_db)) -> None:
    """
    Delete a station.

    Returns 409 if the station is still part of a line.
    """
    if await station_repo.get_station_model(db, station_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Station {station_id} not found",
        )
    if await station_repo.is_station_in_use(db, station_id):
        logger.warning("Refused to delete station in use: station_id=%s", station_id)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Station {station_id} is registered on a line",
        )
    await station_repo.delete_station(db, station_id)
