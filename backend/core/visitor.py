"""BuildingVisitor abstract base class."""

from abc import ABC, abstractmethod

from core.models import Building, Level, Room


class BuildingVisitor(ABC):
    """Observer notified once per node while a building is walked."""

    @abstractmethod
    def visit_building(self, building: Building) -> None: ...

    @abstractmethod
    def visit_level(self, level: Level) -> None: ...

    @abstractmethod
    def visit_room(self, room: Room) -> None: ...
