from __future__ import annotations
from typing import Protocol, Iterator, List, Tuple

from core.configuration import Configuration
from core.graph.base import BoardGraph
from core.graph.cells import Cell
from core.move import Move


class MoveGenerator(Protocol):
    """
    Интерфейс генератора ходов для A*.

    Генератор отвечает за:
        - перечисление допустимых ходов одного амфипода
        - учёт блокировок (комната, коридор, "нельзя обгонять")
        - запрет остановки перед входом в комнату
        - построение конфигураций-потомков

    Важно:
        Ход — это ОДНО перемещение ОДНОГО амфипода.
        Пустой список ходов — нормальный результат, не ошибка.
    """

    def moves(self, config: Configuration, cell: Cell, graph: BoardGraph) -> List[Move]:
        """
        Все допустимые ходы амфипода из клетки cell.
        cell обязан быть занят.
        """
        ...

    def successors(
        self, config: Configuration, graph: BoardGraph
    ) -> Iterator[Tuple[Move, Configuration]]:
        """
        Пары (ход, новая конфигурация) для всех ещё не устроенных амфиподов
        в каноническом порядке клеток.
        """
        ...
