from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from core.graph.base import BoardGraph
from core.graph.cells import Cell, Corridor, Room

if TYPE_CHECKING:
    from core.configuration import Configuration


class BurrowGraph(BoardGraph):
    def __init__(
        self,
        room_count: int = 4,
        room_depth: int = 2,
        corridor_length: Optional[int] = None,
        room_entrances: Optional[Sequence[int]] = None,
    ):
        """
        Нора: один коридор и room_count комнат глубины room_depth.

        По умолчанию повторяет классическую нору: комната r выходит
        в позицию коридора 2*r + 1, длина коридора 2*room_count + 3
        (для 4 комнат — 11 клеток, входы 3, 5, 7, 9).
        """
        if room_count <= 0:
            raise ValueError(f"room_count должен быть положительным, получено {room_count}")
        if room_depth <= 0:
            raise ValueError(f"room_depth должен быть положительным, получено {room_depth}")

        if corridor_length is None:
            corridor_length = 2 * room_count + 3
        if room_entrances is None:
            room_entrances = [2 * r + 1 for r in range(1, room_count + 1)]

        if len(room_entrances) != room_count:
            raise ValueError(
                f"Ожидалось {room_count} входов в комнаты, получено {len(room_entrances)}"
            )
        if len(set(room_entrances)) != room_count:
            raise ValueError(f"Входы в комнаты повторяются: {list(room_entrances)}")
        for pos in room_entrances:
            if not 1 <= pos <= corridor_length:
                raise ValueError(f"Вход {pos} вне коридора 1..{corridor_length}")

        self.room_count = room_count
        self.room_depth = room_depth
        self.corridor_length = corridor_length
        self.room_entrances: Tuple[int, ...] = tuple(room_entrances)
        self._forbidden = frozenset(self.room_entrances)

    def to_corridor_anchor(self, cell: Cell) -> Tuple[int, int]:
        if isinstance(cell, Room):
            return self.room_entrances[cell.room - 1], cell.depth
        return cell.position, 0

    def dist(self, a: Cell, b: Cell) -> int:
        h1, d1 = self.to_corridor_anchor(a)
        h2, d2 = self.to_corridor_anchor(b)
        return abs(h1 - h2) + d1 + d2

    def is_forbidden_stop(self, position: int) -> bool:
        return position in self._forbidden

    def contains(self, cell: Cell) -> bool:
        if isinstance(cell, Room):
            return 1 <= cell.room <= self.room_count and 1 <= cell.depth <= self.room_depth
        if isinstance(cell, Corridor):
            return 1 <= cell.position <= self.corridor_length
        return False

    def corridor_cells(self) -> List[Corridor]:
        return [Corridor(h) for h in range(1, self.corridor_length + 1)]

    def room_cells(self, room: int) -> List[Room]:
        """Клетки комнаты сверху вниз (depth = 1 .. room_depth)."""
        return [Room(room, d) for d in range(1, self.room_depth + 1)]

    def cells(self) -> List[Cell]:
        result: List[Cell] = list(self.corridor_cells())
        for room in range(1, self.room_count + 1):
            result.extend(self.room_cells(room))
        return result

    def corridor_clear(self, config: Configuration, h1: int, h2: int) -> bool:
        """
        True — если все позиции коридора строго между h1 и h2 свободны.
        Сами h1 и h2 не проверяются.
        """
        lo, hi = (h1, h2) if h1 < h2 else (h2, h1)
        for h in range(lo + 1, hi):
            if config.occupant_at(Corridor(h)) is not None:
                return False
        return True

    def __repr__(self) -> str:
        return (
            f"BurrowGraph(rooms={self.room_count}, depth={self.room_depth}, "
            f"corridor={self.corridor_length}, entrances={self.room_entrances})"
        )
