"""Volume totals for any node of the building hierarchy."""

from core.models import Building, Level, Node, Room


def calculate_volume(node: Node) -> float:
    """Total volume under a node: a room's own volume, or the sum of its descendants."""
    match node:
        case Room(volume=volume):
            return volume
        case Level(rooms=rooms):
            return sum((calculate_volume(room) for room in rooms or []), 0.0)
        case Building(levels=levels):
            return sum((calculate_volume(level) for level in levels or []), 0.0)
