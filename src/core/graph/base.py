from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, List, Tuple

from core.graph.cells import Cell, Corridor, Room

if TYPE_CHECKING:
    from core.configuration import Configuration


class BoardGraph(Protocol):
    room_count: int
    room_depth: int
    corridor_length: int
    room_entrances: Tuple[int, ...]

    def to_corridor_anchor(self, cell: Cell) -> Tuple[int, int]:
        """(позиция в коридоре, глубина от коридора) для любой клетки."""
        ...

    def dist(self, a: Cell, b: Cell) -> int:
        """Расстояние с маршрутом коридор → комната (без диагоналей)."""
        ...

    def is_forbidden_stop(self, position: int) -> bool:
        """True — если в этой позиции коридора нельзя заканчивать ход."""
        ...

    def contains(self, cell: Cell) -> bool:
        """True — если клетка существует на доске."""
        ...

    def corridor_cells(self) -> List[Corridor]:
        ...

    def room_cells(self, room: int) -> List[Room]:
        ...

    def corridor_clear(self, config: Configuration, h1: int, h2: int) -> bool:
        """True — если коридор строго между h1 и h2 свободен."""
        ...
