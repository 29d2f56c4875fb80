"""Domain exceptions raised by the section chain and line aggregate."""

from uuid import UUID


class SectionError(Exception):
    """Base exception for section chain errors."""

    pass


class SameStationsError(SectionError):
    """Raised when a section's up-station and down-station are the same station."""

    def __init__(self, station_id: UUID) -> None:
        self.station_id = station_id
        super().__init__(f"Up-station and down-station must differ (station {station_id}).")


class InvalidDistanceError(SectionError):
    """
    Raised when a section distance is not usable.

    Either the distance itself is not positive, or a split would leave the
    existing section with a non-positive remainder.
    """

    def __init__(self, distance: int, limit: int | None = None) -> None:
        self.distance = distance
        self.limit = limit
        if limit is None:
            message = f"Section distance must be positive, got {distance}."
        else:
            message = (
                f"Section distance {distance} must be less than the distance "
                f"of the section being split ({limit})."
            )
        super().__init__(message)


class DuplicateStationsError(SectionError):
    """Raised when both stations of a new section are already on the line."""

    def __init__(self) -> None:
        super().__init__("Both the up-station and down-station are already registered on the line.")


class DisconnectedSectionError(SectionError):
    """Raised when neither station of a new section is on the line."""

    def __init__(self) -> None:
        super().__init__("Neither the up-station nor the down-station is registered on the line.")


class InvalidPlacementError(SectionError):
    """
    Raised when a validated section matches no placement rule.

    A section that shares exactly one station with the line but attaches
    neither at an end nor at an existing up-station cannot be inserted.
    """

    def __init__(self) -> None:
        super().__init__(
            "Section must extend the line at either end or share its up-station "
            "with an existing section."
        )


class InvalidSectionRemovalError(SectionError):
    """Raised when a removal targets a station that does not end the last stored section."""

    def __init__(self, station_id: UUID) -> None:
        self.station_id = station_id
        super().__init__(
            f"Station {station_id} is not the down-station of the last stored section."
        )


class SectionRemovalTooShortError(SectionError):
    """Raised when removing a section would leave the line without sections."""

    def __init__(self) -> None:
        super().__init__("A line must keep at least one section.")


class IllegalChainStateError(SectionError):
    """
    Raised when the chain has no unique up-end or down-end.

    Only reachable if the chain was empty or an earlier mutation corrupted it.
    """

    def __init__(self, message: str = "Section chain has no unique end station.") -> None:
        super().__init__(message)
