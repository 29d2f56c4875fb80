"""Station repository - data access for stations."""

from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from subway_api import domain
from subway_api.models import Section as SectionModel
from subway_api.models import Station as StationModel
from subway_api.schemas import Station, StationCreate


def _ensure_utc(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (UTC). SQLite returns naive datetimes."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


async def create_station(db: AsyncSession, station_create: StationCreate) -> Station:
    """Create a new station."""
    station = StationModel(name=station_create.name)
    db.add(station)
    await db.commit()
    await db.refresh(station)
    return station_to_schema(station)


async def get_station(db: AsyncSession, station_id: UUID) -> Station | None:
    """Get a station by ID."""
    station = await get_station_model(db, station_id)
    if station is None:
        return None
    return station_to_schema(station)


async def get_station_model(db: AsyncSession, station_id: UUID) -> StationModel | None:
    """Get a station model by ID (for internal use)."""
    result = await db.execute(select(StationModel).where(StationModel.id == station_id))
    return result.scalar_one_or_none()


async def get_domain_station(db: AsyncSession, station_id: UUID) -> domain.Station | None:
    """Get a station as a domain value, for building sections."""
    station = await get_station_model(db, station_id)
    if station is None:
        return None
    return domain.Station(id=station.id, name=station.name)


async def list_stations(db: AsyncSession) -> list[Station]:
    """List all stations ordered by name."""
    result = await db.execute(select(StationModel).order_by(StationModel.name))
    return [station_to_schema(s) for s in result.scalars().all()]


async def is_station_in_use(db: AsyncSession, station_id: UUID) -> bool:
    """Return True if any line section starts or ends at the station."""
    result = await db.execute(
        select(func.count())
        .select_from(SectionModel)
        .where(
            or_(
                SectionModel.up_station_id == station_id,
                SectionModel.down_station_id == station_id,
            )
        )
    )
    return result.scalar_one() > 0


async def delete_station(db: AsyncSession, station_id: UUID) -> bool:
    """Delete a station. Returns False if it doesn't exist."""
    station = await get_station_model(db, station_id)
    if station is None:
        return False

    await db.delete(station)
    await db.commit()
    return True


def station_to_schema(station: StationModel) -> Station:
    """Convert SQLAlchemy model to Pydantic schema."""
    return Station(
        id=station.id,
        name=station.name,
        created_at=_ensure_utc(station.created_at),
        updated_at=_ensure_utc(station.updated_at),
    )
