from __future__ import annotations
import heapq
from itertools import count
from typing import Iterator, List, Tuple

from core.search_node import SearchNode
from .base import OpenPolicy


class PriorityOpen(OpenPolicy):
    """
    Open-список как двоичная куча по SearchNode.priority_key():
    (f по возрастанию, больший g раньше, канонический ключ конфигурации).

    Счётчик вставок стоит последним и только защищает от сравнения
    самих узлов; на порядок различных узлов не влияет.
    """

    def __init__(self):
        self._heap: List[Tuple[tuple, int, SearchNode]] = []
        self._counter: Iterator[int] = count()

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.priority_key(), next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def peek(self) -> SearchNode:
        return self._heap[0][2]

    def empty(self) -> bool:
        return len(self._heap) == 0

    def __len__(self) -> int:
        return len(self._heap)
