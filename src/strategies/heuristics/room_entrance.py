from __future__ import annotations

from core.configuration import Configuration
from core.graph.base import BoardGraph
from core.graph.cells import Room

from .base import Heuristic


class RoomEntranceHeuristic(Heuristic):
    """
    Каждый неустроенный амфипод идёт напрямую до верхней клетки своей
    комнаты (depth = 1), не обращая внимания на блокировки.
    Устроенные амфиподы дают 0.
    """

    def lower_bound_cost(self, config: Configuration, graph: BoardGraph) -> int:
        cost = 0
        for cell, amph in config.items():
            if config.is_token_settled(cell):
                continue
            cost += graph.dist(cell, Room(amph.target_room, 1)) * amph.unit_cost
        return cost


class ZeroHeuristic(Heuristic):
    """h = 0: A* вырождается в поиск равной стоимости (Дейкстра)."""

    def lower_bound_cost(self, config: Configuration, graph: BoardGraph) -> int:
        return 0
