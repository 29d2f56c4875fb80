"""Station value type."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class Station:
    """A station referenced by sections. Equality is by id."""

    id: UUID
    name: str = field(default="", compare=False)
