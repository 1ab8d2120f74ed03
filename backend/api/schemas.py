"""Request bodies for the HTTP layer."""

from pydantic import BaseModel, Field

from core.models import Building, Level, Room


class RoomIn(BaseModel):
    id: str
    name: str
    volume: float = Field(ge=0.0)

    def to_domain(self) -> Room:
        return Room(id=self.id, name=self.name, volume=self.volume)


class LevelIn(BaseModel):
    id: str
    name: str
    rooms: list[RoomIn] | None = None

    def to_domain(self) -> Level:
        rooms = None if self.rooms is None else [r.to_domain() for r in self.rooms]
        return Level(id=self.id, name=self.name, rooms=rooms)


class BuildingIn(BaseModel):
    """A building as posted by a client. Missing level/room lists stay missing."""

    id: str
    name: str
    levels: list[LevelIn] | None = None

    def to_domain(self) -> Building:
        levels = None if self.levels is None else [lvl.to_domain() for lvl in self.levels]
        return Building(id=self.id, name=self.name, levels=levels)
