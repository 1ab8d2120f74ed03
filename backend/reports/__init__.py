"""Report builders that walk the building hierarchy."""

from reports.volume import BuildingReport, LevelReport, RoomReport, VolumeReportVisitor

__all__ = [
    "BuildingReport",
    "LevelReport",
    "RoomReport",
    "VolumeReportVisitor",
]
