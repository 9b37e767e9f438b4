import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from core.amphipod import Amphipod, amphipod_kinds
from core.configuration import Configuration, validate_configuration
from core.graph.burrow import BurrowGraph
from core.graph.cells import Corridor, Room

KINDS = amphipod_kinds(4)
A, B, C, D = (KINDS[k] for k in "ABCD")


def example_config() -> Configuration:
    """Классическая стартовая нора: B C B D / A D C A."""
    return Configuration.from_cells(
        [
            (Room(1, 1), B), (Room(2, 1), C), (Room(3, 1), B), (Room(4, 1), D),
            (Room(1, 2), A), (Room(2, 2), D), (Room(3, 2), C), (Room(4, 2), A),
        ],
        room_depth=2,
    )


def solved_config(depth: int = 2) -> Configuration:
    return Configuration.from_cells(
        [(Room(k.target_room, d), k) for k in KINDS.values() for d in range(1, depth + 1)],
        room_depth=depth,
    )


def test_equality_and_hash_ignore_insertion_order():
    pairs = list(example_config().items())
    reordered = Configuration(tuple(reversed(pairs)), room_depth=2)
    assert reordered == example_config()
    assert hash(reordered) == hash(example_config())
    assert len({reordered, example_config()}) == 1
    assert reordered.sort_key() == example_config().sort_key()


def test_occupant_at():
    config = example_config()
    assert config.occupant_at(Room(1, 1)) == B
    assert config.occupant_at(Room(4, 2)) == A
    assert config.occupant_at(Corridor(1)) is None
    assert Room(2, 2) in config
    assert len(config) == 8


def test_is_token_settled():
    config = example_config()
    assert config.is_token_settled(Room(1, 2))      # A на дне своей комнаты
    assert config.is_token_settled(Room(3, 2))      # C на дне своей комнаты
    assert not config.is_token_settled(Room(1, 1))  # B в чужой комнате
    assert not config.is_token_settled(Room(4, 1))  # D над чужим A
    assert not config.is_token_settled(Corridor(1))  # пустая клетка коридора


def test_settled_requires_every_deeper_cell():
    config = Configuration.from_cells(
        [(Room(1, 1), A), (Room(1, 2), B), (Room(1, 3), A)],
        room_depth=3,
    )
    assert config.is_token_settled(Room(1, 3))
    assert not config.is_token_settled(Room(1, 2))
    assert not config.is_token_settled(Room(1, 1))


def test_is_solved():
    assert solved_config().is_solved()
    assert solved_config(4).is_solved()
    assert not example_config().is_solved()


def test_with_move_is_pure_and_conserves_tokens():
    config = example_config()
    moved = config.with_move(Room(1, 1), Corridor(2), B)

    assert config.occupant_at(Room(1, 1)) == B
    assert config.occupant_at(Corridor(2)) is None

    assert moved.occupant_at(Room(1, 1)) is None
    assert moved.occupant_at(Corridor(2)) == B
    assert len(moved) == len(config)
    assert sorted(a.name for _, a in moved.items()) == sorted(a.name for _, a in config.items())
    assert len({cell for cell, _ in moved.items()}) == len(moved)
    assert moved != config


def test_with_move_rejects_occupied_destination():
    with pytest.raises(AssertionError):
        example_config().with_move(Room(1, 1), Room(2, 1), B)


def test_with_move_rejects_wrong_source():
    with pytest.raises(AssertionError):
        example_config().with_move(Corridor(1), Corridor(2), B)


def test_from_cells_rejects_duplicate_cell():
    with pytest.raises(ValueError):
        Configuration.from_cells([(Room(1, 1), A), (Room(1, 1), B)], room_depth=2)


def test_constructor_rejects_duplicate_cell():
    # прямой конструктор не должен молча схлопывать повторную клетку
    with pytest.raises(ValueError):
        Configuration(((Room(1, 1), A), (Room(1, 1), B)), room_depth=2)


def test_validate_accepts_example():
    validate_configuration(example_config(), BurrowGraph())


def test_validate_rejects_wrong_counts():
    pairs = list(example_config().items())
    pairs[0] = (Room(1, 1), A)  # три A и один B
    config = Configuration(tuple(pairs), room_depth=2)
    with pytest.raises(ValueError):
        validate_configuration(config, BurrowGraph())


def test_validate_rejects_depth_outside_room():
    config = Configuration.from_cells(
        list(example_config().items())[1:] + [(Room(1, 3), B)],
        room_depth=2,
    )
    with pytest.raises(ValueError):
        validate_configuration(config, BurrowGraph())


def test_validate_rejects_depth_mismatch():
    with pytest.raises(ValueError):
        validate_configuration(example_config(), BurrowGraph(room_depth=4))


def test_validate_rejects_forbidden_stop():
    pairs = [(cell, amph) for cell, amph in example_config().items() if cell != Room(1, 1)]
    config = Configuration.from_cells(pairs + [(Corridor(5), B)], room_depth=2)
    with pytest.raises(ValueError):
        validate_configuration(config, BurrowGraph())


def test_validate_rejects_unknown_room():
    stray = Amphipod("E", 5, 10000)
    pairs = [(cell, amph) for cell, amph in example_config().items() if cell != Room(1, 1)]
    config = Configuration.from_cells(pairs + [(Corridor(1), stray)], room_depth=2)
    with pytest.raises(ValueError):
        validate_configuration(config, BurrowGraph())
