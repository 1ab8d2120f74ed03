"""Core domain models and traversal."""

from core.models import Building, Level, Node, Room
from core.visitor import BuildingVisitor
from core.volume import calculate_volume

__all__ = [
    "Building",
    "BuildingVisitor",
    "Level",
    "Node",
    "Room",
    "calculate_volume",
]
