"""Volume report: a visitor that mirrors the building hierarchy with volume totals.

Each report field is optional so a serializer can omit fields that were never
filled in. The ``json`` metadata key holds the field's name on the wire.
"""

from dataclasses import dataclass, field
from typing import override

from core.models import Building, Level, Room
from core.visitor import BuildingVisitor
from core.volume import calculate_volume


@dataclass
class RoomReport:
    """Volume of a single room."""

    room_id: str | None = field(default=None, metadata={"json": "roomId"})
    room_name: str | None = field(default=None, metadata={"json": "roomName"})
    volume: float | None = field(default=None, metadata={"json": "volume"})


@dataclass
class LevelReport:
    """Total volume of a level plus the report of each of its rooms."""

    level_id: str | None = field(default=None, metadata={"json": "levelId"})
    level_name: str | None = field(default=None, metadata={"json": "levelName"})
    total_volume: float | None = field(default=None, metadata={"json": "totalVolume"})
    rooms: list[RoomReport] | None = field(default=None, metadata={"json": "rooms"})


@dataclass
class BuildingReport:
    """Root of the volume report tree."""

    building_id: str | None = field(default=None, metadata={"json": "buildingId"})
    building_name: str | None = field(default=None, metadata={"json": "buildingName"})
    total_volume: float | None = field(default=None, metadata={"json": "totalVolume"})
    levels: list[LevelReport] | None = field(default=None, metadata={"json": "levels"})


class VolumeReportVisitor(BuildingVisitor):
    """Builds a BuildingReport while a building is walked.

    Rooms attach to the most recently visited level, so the visitor relies on
    the traversal order of ``Building.accept``. Use one instance per report.
    """

    def __init__(self) -> None:
        self._report: BuildingReport | None = None
        self._current_level: LevelReport | None = None

    @override
    def visit_building(self, building: Building) -> None:
        self._report = BuildingReport(
            building_id=building.id,
            building_name=building.name,
            total_volume=calculate_volume(building),
            levels=[],
        )

    @override
    def visit_level(self, level: Level) -> None:
        self._current_level = LevelReport(
            level_id=level.id,
            level_name=level.name,
            total_volume=calculate_volume(level),
            rooms=[],
        )
        if self._report is not None and self._report.levels is not None:
            self._report.levels.append(self._current_level)

    @override
    def visit_room(self, room: Room) -> None:
        if self._current_level is None or self._current_level.rooms is None:
            return
        self._current_level.rooms.append(
            RoomReport(
                room_id=room.id,
                room_name=room.name,
                volume=calculate_volume(room),
            )
        )

    @property
    def report(self) -> BuildingReport | None:
        """The finished report, or None if no building has been visited."""
        return self._report
