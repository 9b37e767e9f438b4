from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, Optional, Tuple

from core.amphipod import Amphipod
from core.graph.cells import Cell, Corridor, Room

if TYPE_CHECKING:
    from core.graph.base import BoardGraph


Placement = Tuple[Tuple[Cell, Amphipod], ...]


def _cell_key(item: Tuple[Cell, Amphipod]):
    return item[0].sort_key()


@dataclass(frozen=True)
class Configuration:
    """
    Конфигурация норы: какие клетки заняты какими амфиподами.

    Хранится как отсортированный по клеткам tuple пар (cell, amphipod),
    поэтому равенство и хэш не зависят от порядка вставки.
    Immutable → можно безопасно класть в dict / set.
    """

    placement: Placement
    room_depth: int
    _index: Dict[Cell, Amphipod] = field(init=False, repr=False, compare=False)
    _hash: int = field(init=False, repr=False, compare=False)
    _key: Optional[tuple] = field(init=False, repr=False, compare=False, default=None)

    def __post_init__(self):
        placement = tuple(sorted(self.placement, key=_cell_key))
        index = dict(placement)
        if len(index) != len(placement):
            cells = [cell for cell, _ in placement]
            twice = sorted({c for c in cells if cells.count(c) > 1}, key=lambda c: c.sort_key())
            raise ValueError(f"Клетки заняты дважды: {twice}")
        object.__setattr__(self, "placement", placement)
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_hash", hash((placement, self.room_depth)))

    def __hash__(self) -> int:
        return self._hash

    # ------------------------------------------------------------
    # Построение
    # ------------------------------------------------------------
    @classmethod
    def from_cells(
        cls, pairs: Iterable[Tuple[Cell, Amphipod]], room_depth: int
    ) -> Configuration:
        """Собрать конфигурацию из пар (cell, amphipod); повтор клетки — ValueError."""
        seen: Dict[Cell, Amphipod] = {}
        for cell, amph in pairs:
            if cell in seen:
                raise ValueError(f"Клетка {cell} занята дважды: {seen[cell]} и {amph}")
            seen[cell] = amph
        return cls(tuple(seen.items()), room_depth)

    # ------------------------------------------------------------
    # Доступ к данным
    # ------------------------------------------------------------
    def occupant_at(self, cell: Cell) -> Optional[Amphipod]:
        return self._index.get(cell)

    def items(self) -> Placement:
        return self.placement

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._index

    def __len__(self) -> int:
        return len(self.placement)

    def is_token_settled(self, cell: Cell) -> bool:
        """
        True, если амфипод в cell стоит в своей комнате и все клетки
        под ним (depth+1..room_depth) заняты амфиподами той же комнаты.
        Пустая клетка и клетка коридора → False.
        """
        if not isinstance(cell, Room):
            return False
        amph = self._index.get(cell)
        if amph is None or amph.target_room != cell.room:
            return False
        for depth in range(cell.depth + 1, self.room_depth + 1):
            below = self._index.get(Room(cell.room, depth))
            if below is None or below.target_room != cell.room:
                return False
        return True

    def is_solved(self) -> bool:
        """Все амфиподы на своих местах."""
        return all(self.is_token_settled(cell) for cell, _ in self.placement)

    def with_move(self, source: Cell, dest: Cell, amph: Amphipod) -> Configuration:
        """
        Новая конфигурация, в которой amph переставлен из source в dest.
        Текущая конфигурация не меняется.
        """
        assert self._index.get(source) == amph, f"В {source} нет {amph}"
        assert dest not in self._index, f"Клетка {dest} уже занята"
        moved = dict(self._index)
        del moved[source]
        moved[dest] = amph
        return Configuration(tuple(moved.items()), self.room_depth)

    def sort_key(self) -> tuple:
        """Канонический ключ для детерминированного tie-break в Open."""
        if self._key is None:
            key = tuple((cell.sort_key(), amph.name) for cell, amph in self.placement)
            object.__setattr__(self, "_key", key)
        return self._key

    def __repr__(self) -> str:
        inner = ", ".join(f"{cell}: {amph}" for cell, amph in self.placement)
        return f"Configuration({{{inner}}})"


def validate_configuration(config: Configuration, graph: BoardGraph) -> None:
    """
    Проверка начальной конфигурации до запуска поиска.
    Любое нарушение → ValueError.
    """
    if config.room_depth != graph.room_depth:
        raise ValueError(
            f"Глубина комнат конфигурации ({config.room_depth}) "
            f"не совпадает с графом ({graph.room_depth})"
        )

    per_room: Counter[int] = Counter()
    for cell, amph in config.items():
        if not graph.contains(cell):
            raise ValueError(f"Клетка {cell} вне норы {graph}")
        if isinstance(cell, Corridor) and graph.is_forbidden_stop(cell.position):
            raise ValueError(f"{amph} стоит перед входом в комнату: {cell}")
        if not 1 <= amph.target_room <= graph.room_count:
            raise ValueError(f"У {amph} несуществующая целевая комната {amph.target_room}")
        per_room[amph.target_room] += 1

    for room in range(1, graph.room_count + 1):
        if per_room[room] != graph.room_depth:
            raise ValueError(
                f"Комнате {room} предназначено {per_room[room]} амфиподов, "
                f"ожидалось {graph.room_depth}"
            )
