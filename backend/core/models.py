"""Core data models for the building hierarchy."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.visitor import BuildingVisitor


@dataclass
class Room:
    id: str
    name: str
    volume: float  # m³

    def accept(self, visitor: "BuildingVisitor") -> None:
        visitor.visit_room(self)


@dataclass
class Level:
    id: str
    name: str
    rooms: list[Room] | None = field(default_factory=list)

    def accept(self, visitor: "BuildingVisitor") -> None:
        """Notify the visitor of this level, then of each room in order."""
        visitor.visit_level(self)
        for room in self.rooms or []:
            room.accept(visitor)


@dataclass
class Building:
    id: str
    name: str
    levels: list[Level] | None = field(default_factory=list)

    def accept(self, visitor: "BuildingVisitor") -> None:
        """Walk the whole hierarchy: building first, then each level with its rooms.

        A missing level or room list is walked as an empty one.
        """
        visitor.visit_building(self)
        for level in self.levels or []:
            level.accept(visitor)


type Node = Building | Level | Room
