"""Line repository - data access for lines and their sections.

Lines are loaded into the domain aggregate, changed there, and written
back. Section rows are matched to domain sections by id; a section's row
position is its index in the chain's storage order.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from subway_api import domain
from subway_api.models import Line as LineModel
from subway_api.models import Section as SectionModel
from subway_api.models import Station as StationModel
from subway_api.repositories.station import station_to_schema
from subway_api.schemas import Line, Section


def _ensure_utc(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC)."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def _line_query(for_update: bool = False):
    """Select lines with sections and their stations eagerly loaded."""
    query = (
        select(LineModel)
        .options(
            selectinload(LineModel.sections).selectinload(SectionModel.up_station),
            selectinload(LineModel.sections).selectinload(SectionModel.down_station),
        )
        .execution_options(populate_existing=True)
    )
    if for_update:
        # Locks only the line row; the sections are loaded by separate selects.
        query = query.with_for_update(of=LineModel)
    return query


# ============================================================================
# Line Operations
# ============================================================================


async def create_line(db: AsyncSession, line: domain.Line) -> Line:
    """Persist a new line and its initial sections."""
    model = LineModel(id=line.id, name=line.name, color=line.color)
    db.add(model)
    _sync_sections(model, line)
    await db.commit()
    return await _reload_line(db, line.id)


async def get_line(db: AsyncSession, line_id: UUID) -> Line | None:
    """Get a line by ID with its stations in travel order."""
    model = await get_line_model(db, line_id)
    if model is None:
        return None
    return _line_to_schema(model)


async def get_line_model(
    db: AsyncSession, line_id: UUID, for_update: bool = False
) -> LineModel | None:
    """Get a line model by ID with its sections loaded (for internal use).

    With for_update the line row stays locked until the session commits, so
    section changes to one line are applied one request at a time.
    """
    result = await db.execute(_line_query(for_update).where(LineModel.id == line_id))
    return result.scalar_one_or_none()


async def list_lines(db: AsyncSession) -> list[Line]:
    """List all lines ordered by name."""
    result = await db.execute(_line_query().order_by(LineModel.name))
    return [_line_to_schema(line) for line in result.scalars().all()]


async def save_line(db: AsyncSession, model: LineModel, line: domain.Line) -> Line:
    """Write a changed line aggregate back onto its model and commit."""
    model.name = line.name
    model.color = line.color
    _sync_sections(model, line)
    await db.commit()
    return await _reload_line(db, line.id)


async def delete_line(db: AsyncSession, line_id: UUID) -> bool:
    """Delete a line. Sections are deleted via cascade."""
    model = await get_line_model(db, line_id)
    if model is None:
        return False

    await db.delete(model)
    await db.commit()
    return True


async def list_sections(db: AsyncSession, line_id: UUID) -> list[Section] | None:
    """List a line's sections in travel order. Returns None if the line doesn't exist."""
    model = await get_line_model(db, line_id)
    if model is None:
        return None
    line = to_domain(model)
    return [
        Section(
            id=s.id,
            line_id=line.id,
            up_station_id=s.up_station.id,
            down_station_id=s.down_station.id,
            distance=s.distance,
        )
        for s in line.sections.ordered_sections()
    ]


# ============================================================================
# Domain Mapping
# ============================================================================


def to_domain(model: LineModel) -> domain.Line:
    """Build the line aggregate from a model loaded by get_line_model."""
    sections = domain.Sections(
        domain.Section(
            id=s.id,
            up_station=_station_to_domain(s.up_station),
            down_station=_station_to_domain(s.down_station),
            distance=s.distance,
        )
        for s in model.sections
    )
    return domain.Line(id=model.id, name=model.name, color=model.color, sections=sections)


def _station_to_domain(station: StationModel) -> domain.Station:
    return domain.Station(id=station.id, name=station.name)


def _sync_sections(model: LineModel, line: domain.Line) -> None:
    """Make the model's section rows match the aggregate's sections."""
    existing = {s.id: s for s in model.sections}
    for position, section in enumerate(line.sections):
        section_model = existing.pop(section.id, None)
        if section_model is None:
            model.sections.append(
                SectionModel(
                    id=section.id,
                    up_station_id=section.up_station.id,
                    down_station_id=section.down_station.id,
                    distance=section.distance,
                    position=position,
                )
            )
            continue
        section_model.up_station_id = section.up_station.id
        section_model.down_station_id = section.down_station.id
        section_model.distance = section.distance
        section_model.position = position

    # delete-orphan cascade removes the rows
    for orphan in existing.values():
        model.sections.remove(orphan)


async def _reload_line(db: AsyncSession, line_id: UUID) -> Line:
    model = await get_line_model(db, line_id)
    return _line_to_schema(model)


# ============================================================================
# Schema Converters
# ============================================================================


def _line_to_schema(model: LineModel) -> Line:
    """Convert SQLAlchemy model to Pydantic schema."""
    station_models: dict[UUID, StationModel] = {}
    for section in model.sections:
        station_models[section.up_station.id] = section.up_station
        station_models[section.down_station.id] = section.down_station

    line = to_domain(model)
    stations = line.stations if line.sections.size() else []
    return Line(
        id=model.id,
        name=model.name,
        color=model.color,
        stations=[station_to_schema(station_models[s.id]) for s in stations],
        distance=line.sections.total_distance(),
        created_at=_ensure_utc(model.created_at),
        updated_at=_ensure_utc(model.updated_at),
    )
