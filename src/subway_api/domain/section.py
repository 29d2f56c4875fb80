"""Section - a directed, weighted edge between two stations of a line."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from subway_api.domain.exceptions import InvalidDistanceError, SameStationsError
from subway_api.domain.station import Station


@dataclass(eq=False)
class Section:
    """
    A segment of a line running from up_station to down_station.

    Sections compare by identity; two sections with the same stations are
    still different edges. up_station and distance change in place when
    another section splits this one.
    """

    up_station: Station
    down_station: Station
    distance: int
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.up_station == self.down_station:
            raise SameStationsError(self.up_station.id)
        if self.distance <= 0:
            raise InvalidDistanceError(self.distance)

    def is_up_station(self, station: Station) -> bool:
        return self.up_station == station

    def is_down_station(self, station: Station) -> bool:
        return self.down_station == station

    def split_at(self, new_section: "Section") -> None:
        """Shorten this section so it starts where new_section ends."""
        if new_section.distance >= self.distance:
            raise InvalidDistanceError(new_section.distance, limit=self.distance)
        self.up_station = new_section.down_station
        self.distance -= new_section.distance
