"""HTTP request schemas."""

from api.schemas import BuildingIn, LevelIn, RoomIn

__all__ = ["BuildingIn", "LevelIn", "RoomIn"]
