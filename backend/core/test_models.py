"""Traversal order and tolerance of the building hierarchy."""

from typing import override

from core.models import Building, Level, Room
from core.visitor import BuildingVisitor


class RecordingVisitor(BuildingVisitor):
    """Records the id of every visited node, prefixed by its kind."""

    def __init__(self) -> None:
        self.seen: list[str] = []

    @override
    def visit_building(self, building: Building) -> None:
        self.seen.append(f"building:{building.id}")

    @override
    def visit_level(self, level: Level) -> None:
        self.seen.append(f"level:{level.id}")

    @override
    def visit_room(self, room: Room) -> None:
        self.seen.append(f"room:{room.id}")


def _two_level_building() -> Building:
    return Building(
        id="B1",
        name="HQ",
        levels=[
            Level(
                id="L1",
                name="Ground",
                rooms=[Room(id="R1", name="Lobby", volume=50.0), Room(id="R2", name="Hall", volume=30.0)],
            ),
            Level(id="L2", name="Roof", rooms=[Room(id="R3", name="Plant", volume=12.0)]),
        ],
    )


def test_traversal_order_is_depth_first() -> None:
    visitor = RecordingVisitor()
    _two_level_building().accept(visitor)

    assert visitor.seen == [
        "building:B1",
        "level:L1",
        "room:R1",
        "room:R2",
        "level:L2",
        "room:R3",
    ]


def test_each_node_visited_once() -> None:
    visitor = RecordingVisitor()
    _two_level_building().accept(visitor)
    assert len(visitor.seen) == len(set(visitor.seen)) == 6


def test_missing_child_lists_are_walked_as_empty() -> None:
    visitor = RecordingVisitor()
    Building(id="B", name="Shell", levels=None).accept(visitor)
    assert visitor.seen == ["building:B"]

    visitor = RecordingVisitor()
    Building(id="B", name="Shell", levels=[Level(id="L", name="Void", rooms=None)]).accept(visitor)
    assert visitor.seen == ["building:B", "level:L"]


def test_traversal_can_start_below_the_root() -> None:
    visitor = RecordingVisitor()
    Level(id="L", name="Only", rooms=[Room(id="R", name="Box", volume=1.0)]).accept(visitor)
    assert visitor.seen == ["level:L", "room:R"]


def test_default_child_lists_are_independent() -> None:
    a = Level(id="A", name="A")
    b = Level(id="B", name="B")
    assert a.rooms is not None
    a.rooms.append(Room(id="R", name="R", volume=1.0))
    assert b.rooms == []
