import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from core.amphipod import amphipod_kinds
from core.configuration import Configuration
from core.graph.base import BoardGraph
from core.graph.burrow import BurrowGraph
from core.graph.cells import Corridor, Room


def test_default_burrow_geometry():
    graph = BurrowGraph()
    assert graph.room_count == 4
    assert graph.room_depth == 2
    assert graph.corridor_length == 11
    assert graph.room_entrances == (3, 5, 7, 9)
    assert [h for h in range(1, 12) if graph.is_forbidden_stop(h)] == [3, 5, 7, 9]


def test_corridor_anchor():
    graph = BurrowGraph(room_depth=4)
    assert graph.to_corridor_anchor(Corridor(6)) == (6, 0)
    assert graph.to_corridor_anchor(Room(1, 1)) == (3, 1)
    assert graph.to_corridor_anchor(Room(4, 4)) == (9, 4)


def test_distance():
    graph = BurrowGraph()
    assert graph.dist(Corridor(1), Room(1, 2)) == 4
    assert graph.dist(Room(1, 2), Room(4, 1)) == 9
    assert graph.dist(Corridor(6), Room(3, 2)) == 3
    assert graph.dist(Corridor(2), Corridor(10)) == 8
    # симметрия
    assert graph.dist(Room(4, 1), Room(1, 2)) == graph.dist(Room(1, 2), Room(4, 1))


def test_custom_entrances():
    graph = BurrowGraph(room_count=2, room_depth=1, corridor_length=7, room_entrances=(2, 6))
    assert graph.to_corridor_anchor(Room(2, 1)) == (6, 1)
    assert graph.is_forbidden_stop(2) and graph.is_forbidden_stop(6)
    assert not graph.is_forbidden_stop(3)
    assert graph.dist(Corridor(4), Room(1, 1)) == 3


def test_contains_and_cells():
    graph = BurrowGraph(room_count=2, room_depth=2)
    assert graph.corridor_length == 7
    assert graph.contains(Corridor(1)) and graph.contains(Corridor(7))
    assert not graph.contains(Corridor(0))
    assert not graph.contains(Corridor(8))
    assert graph.contains(Room(2, 2))
    assert not graph.contains(Room(2, 3))
    assert not graph.contains(Room(3, 1))
    assert graph.room_cells(1) == [Room(1, 1), Room(1, 2)]
    assert len(graph.cells()) == 7 + 4


@pytest.mark.parametrize(
    "kwargs",
    [
        {"room_count": 0},
        {"room_depth": 0},
        {"room_count": 2, "room_entrances": (3,)},
        {"room_count": 2, "room_entrances": (3, 3)},
        {"room_count": 2, "corridor_length": 5, "room_entrances": (3, 6)},
    ],
)
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        BurrowGraph(**kwargs)


def test_corridor_clear_checks_strictly_between():
    graph = BurrowGraph()
    kinds = amphipod_kinds()
    config = Configuration.from_cells(
        [(Corridor(4), kinds["A"]), (Corridor(8), kinds["B"])],
        room_depth=2,
    )
    assert graph.corridor_clear(config, 4, 8)
    assert graph.corridor_clear(config, 8, 4)
    assert not graph.corridor_clear(config, 3, 5)
    assert not graph.corridor_clear(config, 11, 7)
    assert graph.corridor_clear(config, 5, 5)


def test_burrow_graph_provides_board_interface():
    graph = BurrowGraph(room_count=3, room_depth=2)
    members = set(BoardGraph.__annotations__) | {
        name for name, value in vars(BoardGraph).items()
        if callable(value) and not name.startswith("_")
    }
    assert {"room_depth", "corridor_length", "corridor_clear", "dist"} <= members
    for name in members:
        assert hasattr(graph, name), name
