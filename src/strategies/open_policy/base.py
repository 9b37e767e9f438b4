from __future__ import annotations
from typing import Protocol

from core.search_node import SearchNode


class OpenPolicy(Protocol):
    """
    Open-список A*: узлы извлекаются строго по SearchNode.priority_key()
    (меньший ключ раньше). Ключ полный, поэтому порядок извлечения
    детерминирован и не зависит от порядка push.

    В Open могут лежать устаревшие записи той же конфигурации с большей g:
    удалять их не требуется, движок пропускает их при pop.
    """

    def push(self, node: SearchNode) -> None:
        """Добавить узел в структуру."""
        ...

    def pop(self) -> SearchNode:
        """Удалить и вернуть следующий узел."""
        ...

    def peek(self) -> SearchNode:
        """Посмотреть на следующий узел, НЕ удаляя."""
        ...

    def empty(self) -> bool:
        """True если Open-список пуст."""
        ...

    def __len__(self) -> int:
        ...
