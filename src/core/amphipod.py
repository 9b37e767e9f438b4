from __future__ import annotations
from dataclasses import dataclass
from string import ascii_uppercase
from typing import Dict


@dataclass(frozen=True, order=True)
class Amphipod:
    """
    Тип фишки (амфипода).

        name        : символ типа ('A', 'B', ...), по нему идёт сравнение
        target_room : комната, в которой амфипод должен оказаться
        unit_cost   : стоимость одного шага
    """

    name: str
    target_room: int
    unit_cost: int

    def __repr__(self) -> str:
        return self.name


def amphipod_kinds(room_count: int = 4) -> Dict[str, Amphipod]:
    """Стандартные типы: A → комната 1 (1), B → 2 (10), C → 3 (100), ..."""
    if not 1 <= room_count <= len(ascii_uppercase):
        raise ValueError(f"Неподдерживаемое число комнат: {room_count}")
    return {
        letter: Amphipod(letter, idx + 1, 10 ** idx)
        for idx, letter in enumerate(ascii_uppercase[:room_count])
    }
