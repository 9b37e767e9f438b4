from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from core.amphipod import Amphipod
from core.configuration import Configuration
from core.graph.base import BoardGraph
from core.graph.cells import Cell, Corridor, Room
from core.move import Move

from .base import MoveGenerator


class BurrowMoveGenerator(MoveGenerator):
    """
    Генератор ходов амфиподов в норе.

    Правила:
    - устроенный амфипод (is_token_settled) никуда не ходит;
    - из комнаты нельзя выйти, если над амфиподом кто-то стоит;
    - в комнату можно зайти только в свою, только на самую глубокую
      свободную клетку и только если ниже стоят "свои";
    - коридор между стартом и финишем (строго между) должен быть пуст —
      обгонять нельзя;
    - из коридора — только в комнату, из комнаты — в коридор
      (кроме позиций перед входами) или сразу в свою комнату;
    - нулевые ходы не генерируются.
    """

    def moves(self, config: Configuration, cell: Cell, graph: BoardGraph) -> List[Move]:
        amph = config.occupant_at(cell)
        assert amph is not None, f"Клетка {cell} пуста"

        if config.is_token_settled(cell):
            return []

        if isinstance(cell, Room):
            for above in range(1, cell.depth):
                # Сверху кто-то стоит — выйти нельзя
                if config.occupant_at(Room(cell.room, above)) is not None:
                    return []

        result: List[Move] = []
        h1, d1 = graph.to_corridor_anchor(cell)

        spot = self.room_slot(config, amph, graph)
        if spot is not None:
            h2, d2 = graph.to_corridor_anchor(spot)
            if h1 != h2 and graph.corridor_clear(config, h1, h2):
                result.append(Move(amph, cell, spot, d1 + abs(h1 - h2) + d2))

        if isinstance(cell, Corridor):
            # Из коридора в коридор ходить нельзя
            return result

        for h in range(h1 + 1, graph.corridor_length + 1):
            if config.occupant_at(Corridor(h)) is not None:
                break
            if graph.is_forbidden_stop(h):
                continue
            result.append(Move(amph, cell, Corridor(h), d1 + h - h1))

        for h in range(h1 - 1, 0, -1):
            if config.occupant_at(Corridor(h)) is not None:
                break
            if graph.is_forbidden_stop(h):
                continue
            result.append(Move(amph, cell, Corridor(h), d1 + h1 - h))

        return result

    @staticmethod
    def room_slot(config: Configuration, amph: Amphipod, graph: BoardGraph) -> Optional[Room]:
        """
        Самая глубокая свободная клетка целевой комнаты amph, если все клетки
        под ней заняты амфиподами этой комнаты. Иначе None.
        """
        room = amph.target_room
        for depth in range(graph.room_depth, 0, -1):
            other = config.occupant_at(Room(room, depth))
            if other is None:
                return Room(room, depth)
            if other.target_room != room:
                # Чужой в комнате — заходить нельзя
                return None
        return None

    def successors(
        self, config: Configuration, graph: BoardGraph
    ) -> Iterator[Tuple[Move, Configuration]]:
        for cell, amph in config.items():
            if config.is_token_settled(cell):
                continue
            for move in self.moves(config, cell, graph):
                assert config.occupant_at(move.dest) is None, (
                    f"Генератор вернул занятую клетку {move.dest}"
                )
                yield move, config.with_move(cell, move.dest, amph)
