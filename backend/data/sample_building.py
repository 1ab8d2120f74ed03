"""Sample building for the API and tests."""

from core.models import Building, Level, Room


def create_sample_building() -> Building:
    """Create a hardcoded sample student housing building."""
    return Building(
        id="building-1",
        name="Student Housing A",
        levels=[
            _ground_floor(),
            _first_floor(),
            _roof(),
        ],
    )


def _ground_floor() -> Level:
    """Ground floor: lobby, kitchen, common room, laundry and storage. 3 m ceilings."""
    return Level(
        id="l-0",
        name="Ground Floor",
        rooms=[
            Room(id="r-001", name="Lobby", volume=270.0),
            Room(id="r-002", name="Kitchen", volume=270.0),
            Room(id="r-003", name="Common Room", volume=270.0),
            Room(id="r-004", name="Laundry", volume=135.0),
            Room(id="r-006", name="Storage", volume=67.5),
        ],
    )


def _first_floor() -> Level:
    """First floor: bedrooms and a shared bathroom. 2.7 m ceilings."""
    return Level(
        id="l-1",
        name="First Floor",
        rooms=[
            Room(id="r-101", name="Bedroom 101", volume=40.5),
            Room(id="r-102", name="Bedroom 102", volume=40.5),
            Room(id="r-103", name="Bedroom 103", volume=40.5),
            Room(id="r-105", name="Shared Bathroom", volume=24.3),
        ],
    )


def _roof() -> Level:
    """Roof terrace: no enclosed rooms."""
    return Level(id="l-2", name="Roof", rooms=[])


SAMPLE_BUILDING = create_sample_building()
