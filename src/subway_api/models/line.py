"""Line models - lines and their sections."""

import uuid
from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from subway_api.database import Base
from subway_api.models.station import Station


class Line(Base):
    """A subway line."""

    __tablename__ = "lines"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    color: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    sections: Mapped[list["Section"]] = relationship(
        "Section",
        back_populates="line",
        cascade="all, delete-orphan",
        order_by="Section.position",
    )

    __table_args__ = (UniqueConstraint("name", name="uq_line_name"),)


class Section(Base):
    """A directed section of a line between two stations.

    position is the section's storage order within its line, not its travel
    order.
    """

    __tablename__ = "sections"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    line_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("lines.id", ondelete="CASCADE"), nullable=False
    )
    up_station_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("stations.id"), nullable=False
    )
    down_station_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("stations.id"), nullable=False
    )
    distance: Mapped[int] = mapped_column(Integer, nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # Relationships
    line: Mapped["Line"] = relationship("Line", back_populates="sections")
    up_station: Mapped[Station] = relationship(Station, foreign_keys=[up_station_id])
    down_station: Mapped[Station] = relationship(Station, foreign_keys=[down_station_id])

    __table_args__ = (
        Index("ix_sections_line_id", "line_id"),
        Index("ix_sections_up_station_id", "up_station_id"),
        Index("ix_sections_down_station_id", "down_station_id"),
        CheckConstraint("up_station_id != down_station_id", name="ck_section_no_self_ref"),
        CheckConstraint("distance > 0", name="ck_section_positive_distance"),
    )
