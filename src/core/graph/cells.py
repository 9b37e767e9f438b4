from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Corridor:
    """Клетка общего коридора. position: 1..corridor_length."""

    position: int

    def sort_key(self) -> Tuple[int, int, int]:
        return (1, self.position, 0)

    def __repr__(self) -> str:
        return f"Corridor({self.position})"


@dataclass(frozen=True)
class Room:
    """
    Клетка комнаты.

        room  : номер комнаты, 1..room_count
        depth : глубина, 1 = ближе всего к коридору
    """

    room: int
    depth: int

    def sort_key(self) -> Tuple[int, int, int]:
        return (0, self.room, self.depth)

    def __repr__(self) -> str:
        return f"Room({self.room}, {self.depth})"


# Закрытый набор вариантов клетки; алгоритмы различают их через isinstance
Cell = Union[Corridor, Room]
