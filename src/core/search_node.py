from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .configuration import Configuration
from .move import Move


@dataclass(eq=False)
class SearchNode:
    """
    Узел A*-поиска.

    Содержит:
        config               : Configuration
            Конфигурация норы в этой точке поиска.

        accumulated_cost     : int
            Энергия, потраченная от старта до config.

        estimated_total_cost : int
            accumulated_cost + эвристика(config).

        parent               : SearchNode | None
            Родительский узел (для восстановления пути).

        move                 : Move | None
            Ход, которым получили config из parent.config.
    """

    config: Configuration
    accumulated_cost: int
    estimated_total_cost: int
    parent: Optional["SearchNode"] = None
    move: Optional[Move] = None

    def priority_key(self) -> tuple:
        """
        Полный порядок для Open (меньше → раньше):
            1. estimated_total_cost по возрастанию
            2. при равенстве — больший accumulated_cost (ближе к завершению)
            3. канонический ключ конфигурации
        """
        return (
            self.estimated_total_cost,
            -self.accumulated_cost,
            self.config.sort_key(),
        )

    def reconstruct_path(self) -> list[Configuration]:
        """Конфигурации от корня до этого узла."""
        path = []
        node = self
        while node is not None:
            path.append(node.config)
            node = node.parent
        return list(reversed(path))

    def reconstruct_moves(self) -> list[Move]:
        moves = []
        node = self
        while node is not None and node.move is not None:
            moves.append(node.move)
            node = node.parent
        return list(reversed(moves))

    def __repr__(self):
        return (
            f"SearchNode(g={self.accumulated_cost}, f={self.estimated_total_cost}, "
            f"config={self.config})"
        )
