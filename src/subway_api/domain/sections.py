"""Section chain - the ordered path of sections that makes up a line.

Sections are kept in insertion order, which is not travel order: head
extensions and splits append to the end of storage. Travel order is rebuilt
on demand by walking from the up-end station.
"""

import logging
from collections.abc import Iterable, Iterator

from subway_api.domain.exceptions import (
    DisconnectedSectionError,
    DuplicateStationsError,
    IllegalChainStateError,
    InvalidPlacementError,
    InvalidSectionRemovalError,
)
from subway_api.domain.section import Section
from subway_api.domain.station import Station

logger = logging.getLogger(__name__)


class Sections:
    """The sections of one line, forming a single simple directed path."""

    def __init__(self, sections: Iterable[Section] | None = None) -> None:
        self._sections: list[Section] = list(sections) if sections else []

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def size(self) -> int:
        return len(self._sections)

    def is_empty(self) -> bool:
        return not self._sections

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, new_section: Section) -> None:
        """
        Insert a section into the chain.

        Placement is tried in order: first section of an empty chain, new
        down-end, new up-end, then a split of the section that shares the new
        section's up-station. Nothing is mutated if validation fails.
        """
        self._validate_new_section(new_section)

        if not self._sections:
            self._sections.append(new_section)
            return

        if self.down_end_station() == new_section.up_station:
            self._sections.append(new_section)
            return

        if self.up_end_station() == new_section.down_station:
            self._sections.append(new_section)
            return

        existing = self._find_by_up_station(new_section.up_station)
        if existing is not None:
            existing.split_at(new_section)
            self._sections.append(new_section)
            return

        raise InvalidPlacementError()

    def remove_last_section(self, station: Station) -> None:
        """
        Remove the most recently stored section if it ends at station.

        Only the section in the last storage position can be removed. After a
        head extension or a split that section is not the travel-order tail.
        """
        if not self._sections:
            raise InvalidSectionRemovalError(station.id)
        last = self._sections[-1]
        if not last.is_down_station(station):
            raise InvalidSectionRemovalError(station.id)
        self._sections.pop()

    def remove(self, *sections: Section) -> None:
        """Detach the given sections, whatever their position."""
        targets = {id(s) for s in sections}
        self._sections = [s for s in self._sections if id(s) not in targets]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_stations(self) -> list[Station]:
        """Return the stations in travel order, from up-end to down-end."""
        current = self.up_end_station()
        by_up_station = {s.up_station: s for s in self._sections}

        stations = [current]
        while current in by_up_station:
            current = by_up_station[current].down_station
            if len(stations) > len(self._sections):
                raise IllegalChainStateError("Section chain contains a cycle.")
            stations.append(current)
        return stations

    def ordered_sections(self) -> list[Section]:
        """Return the sections in travel order."""
        by_up_station = {s.up_station: s for s in self._sections}
        return [by_up_station[station] for station in self.get_stations()[:-1]]

    def up_end_station(self) -> Station:
        down_stations = {s.down_station for s in self._sections}
        candidates = {s.up_station for s in self._sections} - down_stations
        if len(candidates) != 1:
            raise IllegalChainStateError("Section chain has no unique up-end station.")
        return next(iter(candidates))

    def down_end_station(self) -> Station:
        up_stations = {s.up_station for s in self._sections}
        candidates = {s.down_station for s in self._sections} - up_stations
        if len(candidates) != 1:
            raise IllegalChainStateError("Section chain has no unique down-end station.")
        return next(iter(candidates))

    def stations_set(self) -> set[Station]:
        """All stations referenced by any section."""
        stations: set[Station] = set()
        for section in self._sections:
            stations.add(section.up_station)
            stations.add(section.down_station)
        return stations

    def total_distance(self) -> int:
        return sum(s.distance for s in self._sections)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find_by_up_station(self, station: Station) -> Section | None:
        for section in self._sections:
            if section.is_up_station(station):
                return section
        return None

    def _validate_new_section(self, new_section: Section) -> None:
        stations = self.stations_set()
        has_up = new_section.up_station in stations
        has_down = new_section.down_station in stations

        if has_up and has_down:
            logger.debug(
                "Rejected section %s -> %s: both stations already on line",
                new_section.up_station.id,
                new_section.down_station.id,
            )
            raise DuplicateStationsError()
        if self._sections and not has_up and not has_down:
            logger.debug(
                "Rejected section %s -> %s: no station on line",
                new_section.up_station.id,
                new_section.down_station.id,
            )
            raise DisconnectedSectionError()
