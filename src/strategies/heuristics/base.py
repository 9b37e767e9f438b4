from __future__ import annotations
from typing import Protocol

from core.configuration import Configuration
from core.graph.base import BoardGraph


class Heuristic(Protocol):
    """
    Интерфейс оценки оставшейся стоимости для A*.

    Оценка обязана быть допустимой (никогда не превышать реальную
    минимальную стоимость решения), иначе первое извлечённое из Open
    решение может оказаться не оптимальным.
    """

    def lower_bound_cost(self, config: Configuration, graph: BoardGraph) -> int:
        """Нижняя граница энергии до полностью решённой конфигурации."""
        ...
