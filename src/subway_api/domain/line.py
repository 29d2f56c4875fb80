"""Line aggregate - a named subway line and its section chain."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from subway_api.domain.exceptions import SectionRemovalTooShortError
from subway_api.domain.section import Section
from subway_api.domain.sections import Sections
from subway_api.domain.station import Station

MIN_SECTIONS = 1


@dataclass
class Line:
    """A subway line. All section changes go through the line's chain."""

    name: str
    color: str
    sections: Sections = field(default_factory=Sections)
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def create(
        cls,
        name: str,
        color: str,
        up_station: Station,
        down_station: Station,
        distance: int,
    ) -> "Line":
        """Create a line with its first section."""
        line = cls(name=name, color=color)
        line.add_section(up_station, down_station, distance)
        return line

    @property
    def stations(self) -> list[Station]:
        return self.sections.get_stations()

    def update(self, name: str | None = None, color: str | None = None) -> None:
        if name is not None:
            self.name = name
        if color is not None:
            self.color = color

    def add_section(self, up_station: Station, down_station: Station, distance: int) -> Section:
        section = Section(up_station=up_station, down_station=down_station, distance=distance)
        self.sections.add(section)
        return section

    def remove_section(self, station: Station) -> None:
        """Remove the tail section ending at station, keeping at least one section."""
        if self.sections.size() <= MIN_SECTIONS:
            raise SectionRemovalTooShortError()
        self.sections.remove_last_section(station)
