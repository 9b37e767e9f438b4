from __future__ import annotations
from dataclasses import dataclass

from core.amphipod import Amphipod
from core.graph.cells import Cell


@dataclass(frozen=True)
class Move:
    """
    Один ход амфипода.

    Хранит:
        amphipod : кто ходит
        source   : откуда
        dest     : куда
        steps    : пройденное расстояние (graph.dist(source, dest))

    Стоимость хода = steps * amphipod.unit_cost.
    """

    amphipod: Amphipod
    source: Cell
    dest: Cell
    steps: int

    @property
    def cost(self) -> int:
        return self.steps * self.amphipod.unit_cost

    def __repr__(self):
        return f"Move({self.amphipod}: {self.source} -> {self.dest}, steps={self.steps})"
