"""Line endpoints - line CRUD and section management."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from subway_api import domain
from subway_api.database import get_db
from subway_api.models import Line as LineModel
from subway_api.repositories import line as line_repo
from subway_api.repositories import station as station_repo
from subway_api.schemas import Line, LineCreate, LineUpdate, Section, SectionCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lines", tags=["lines"])


async def _get_station_or_404(db: AsyncSession, station_id: UUID) -> domain.Station:
    """Resolve a station ID. Raises HTTPException if it doesn't exist."""
    station = await station_repo.get_domain_station(db, station_id)
    if station is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Station {station_id} not found",
        )
    return station


async def _get_line_model_or_404(
    db: AsyncSession, line_id: UUID, for_update: bool = False
) -> LineModel:
    """Load a line with its sections. Raises HTTPException if it doesn't exist."""
    model = await line_repo.get_line_model(db, line_id, for_update=for_update)
    if model is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Line {line_id} not found",
        )
    return model


# ============================================================================
# Line Endpoints
# ============================================================================


@router.post("", response_model=Line, status_code=status.HTTP_201_CREATED)
async def create_line(
    line_create: LineCreate,
    db: AsyncSession = Depends(get_db),
) -> Line:
    """Create a new line with its first section."""
    up_station = await _get_station_or_404(db, line_create.up_station_id)
    down_station = await _get_station_or_404(db, line_create.down_station_id)

    line = domain.Line.create(
        name=line_create.name,
        color=line_create.color,
        up_station=up_station,
        down_station=down_station,
        distance=line_create.distance,
    )
    created = await line_repo.create_line(db, line)
    logger.info("Created line: line_id=%s name=%s", created.id, created.name)
    return created


@router.get("", response_model=list[Line])
async def list_lines(db: AsyncSession = Depends(get_db)) -> list[Line]:
    """List all lines with their stations in travel order."""
    return await line_repo.list_lines(db)


@router.get("/{line_id}", response_model=Line)
async def get_line(line_id: UUID, db: AsyncSession = Depends(get_db)) -> Line:
    """Get a line with its stations in travel order."""
    line = await line_repo.get_line(db, line_id)
    if line is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Line {line_id} not found",
        )
    return line


@router.patch("/{line_id}", response_model=Line)
async def update_line(
    line_id: UUID,
    line_update: LineUpdate,
    db: AsyncSession = Depends(get_db),
) -> Line:
    """Update a line's name or color."""
    model = await _get_line_model_or_404(db, line_id)
    line = line_repo.to_domain(model)
    line.update(name=line_update.name, color=line_update.color)
    return await line_repo.save_line(db, model, line)


@router.delete("/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_line(line_id: UUID, db: AsyncSession = Depends(get_db)) -> None:
    """Delete a line and all of its sections."""
    deleted = await line_repo.delete_line(db, line_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Line {line_id} not found",
        )
    logger.info("Deleted line: line_id=%s", line_id)


# ============================================================================
# Section Endpoints
# ============================================================================


@router.post("/{line_id}/sections", response_model=Line, status_code=status.HTTP_201_CREATED)
async def add_section(
    line_id: UUID,
    section_create: SectionCreate,
    db: AsyncSession = Depends(get_db),
) -> Line:
    """
    Add a section to a line.

    The section may extend either end of the line, or split an existing
    section that starts at the same up-station.
    """
    model = await _get_line_model_or_404(db, line_id, for_update=True)
    up_station = await _get_station_or_404(db, section_create.up_station_id)
    down_station = await _get_station_or_404(db, section_create.down_station_id)

    line = line_repo.to_domain(model)
    line.add_section(up_station, down_station, section_create.distance)
    updated = await line_repo.save_line(db, model, line)
    logger.info(
        "Added section: line_id=%s up_station_id=%s down_station_id=%s distance=%s",
        line_id,
        up_station.id,
        down_station.id,
        section_create.distance,
    )
    return updated


@router.get("/{line_id}/sections", response_model=list[Section])
async def list_sections(line_id: UUID, db: AsyncSession = Depends(get_db)) -> list[Section]:
    """List a line's sections from the up-end to the down-end."""
    sections = await line_repo.list_sections(db, line_id)
    if sections is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Line {line_id} not found",
        )
    return sections


@router.delete("/{line_id}/sections", status_code=status.HTTP_204_NO_CONTENT)
async def remove_section(
    line_id: UUID,
    station_id: UUID = Query(..., description="Down-station of the last stored section"),
    db: AsyncSession = Depends(get_db),
) -> None:
    """
    Remove the line's last section.

    Only the most recently added section can be removed, and only when its
    down-station is the given station.
    """
    model = await _get_line_model_or_404(db, line_id, for_update=True)
    station = await _get_station_or_404(db, station_id)

    line = line_repo.to_domain(model)
    line.remove_section(station)
    await line_repo.save_line(db, model, line)
    logger.info("Removed section: line_id=%s station_id=%s", line_id, station_id)
